from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from javap_paste.sdk.models import Sdk


@dataclass(slots=True)
class PipelineContext:
    code: str
    sdk: Sdk
    workdir: Path
    source_path: Path | None = None
    class_files: list[Path] = field(default_factory=list)
    compiler_log: str = ""
    disassembly: str = ""
    decompiled: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
