from dataclasses import dataclass

from javap_paste.processor.models import ProcessingInput, ProcessingOutput


@dataclass(frozen=True)
class Paste:
    """A stored paste. ``output`` is always the pipeline result for ``input``."""

    id: str
    owner_token: str
    input: ProcessingInput
    output: ProcessingOutput


@dataclass(frozen=True)
class DefaultPaste:
    """A precomputed, read-only paste kept in memory under ``default:<LANGUAGE>``."""

    id: str
    input: ProcessingInput
    output: ProcessingOutput
