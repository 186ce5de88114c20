from abc import ABC, abstractmethod

from javap_paste.processor.models import ProcessingInput, ProcessingOutput


class BaseProcessor(ABC):
    """Contract for all compile/analyze backends."""

    @abstractmethod
    def process(self, processing_input: ProcessingInput) -> ProcessingOutput:
        """Compile the input and analyze the produced class files.

        Must be safe to call from several threads at once and must depend
        only on its input.

        Args:
            processing_input: Code and the name of the SDK to compile it with.

        Returns:
            ProcessingOutput with compiler log, javap and procyon text.
            Compiler errors are reported in the compiler log.

        Raises:
            ProcessingError: if the toolchain itself is unavailable or fails.
        """
