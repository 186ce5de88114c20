"""Example processor backend.

Use this module as a reference when implementing new processor backends.
Implement BaseProcessor and register the engine in ProcessorFactory.
"""

from javap_paste.processor.base import BaseProcessor
from javap_paste.processor.models import ProcessingInput, ProcessingOutput


class ExampleProcessor(BaseProcessor):
    """Deterministic processor that echoes the code into every output.

    No toolchain calls. Useful for local development and tests.
    """

    def process(self, processing_input: ProcessingInput) -> ProcessingOutput:
        code = processing_input.code
        return ProcessingOutput(
            compiler_log=f"compiler log {code}",
            disassembly=f"javap {code}",
            decompiled=f"procyon {code}",
        )
