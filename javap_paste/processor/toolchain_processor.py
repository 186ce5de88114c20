import tempfile
import threading
from pathlib import Path

from javap_paste.logging.logger import Log
from javap_paste.processor.base import BaseProcessor
from javap_paste.processor.models import ProcessingInput, ProcessingOutput
from javap_paste.processor.pipeline import PipelineContext, PipelineStep
from javap_paste.processor.steps import (
    CompileStep,
    DecompileStep,
    DisassembleStep,
    WriteSourceStep,
)
from javap_paste.sdk.registry import find_sdk


class ToolchainProcessor(BaseProcessor):
    """Compiles with a real SDK, then runs javap and procyon on the classes.

    Pipeline: write source -> compile -> disassemble -> decompile.
    Every call works in its own temporary directory; at most
    ``max_concurrent`` calls run the toolchain at the same time.
    """

    def __init__(
        self,
        *,
        sdk_root: Path,
        java_home: Path,
        procyon_jar: Path,
        max_concurrent: int = 2,
    ) -> None:
        self._steps: list[PipelineStep] = [
            WriteSourceStep(),
            CompileStep(sdk_root),
            DisassembleStep(java_home),
            DecompileStep(java_home, procyon_jar),
        ]
        self._semaphore = threading.BoundedSemaphore(max(1, max_concurrent))

    def process(self, processing_input: ProcessingInput) -> ProcessingOutput:
        sdk = find_sdk(processing_input.compiler_name)
        with self._semaphore, tempfile.TemporaryDirectory(prefix="javap-") as tmp:
            context = PipelineContext(
                code=processing_input.code,
                sdk=sdk,
                workdir=Path(tmp),
            )
            for step in self._steps:
                context = step.run(context)
        Log.debug(f"Processed {len(processing_input.code)} chars with {sdk.name}")
        return ProcessingOutput(
            compiler_log=context.compiler_log,
            disassembly=context.disassembly,
            decompiled=context.decompiled,
        )
