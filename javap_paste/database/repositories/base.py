from abc import ABC, abstractmethod

from javap_paste.paste.models import Paste
from javap_paste.processor.models import ProcessingInput, ProcessingOutput


class BasePasteRepository(ABC):
    """Contract for paste storage backends.

    Writes are whole-record: input and output always change together.
    Concurrent updates of one paste are not coordinated; the last one wins.
    """

    @abstractmethod
    def insert(self, paste: Paste) -> None:
        """Store a new paste.

        Raises:
            PasteStorageError: if the id is taken or the store is unreachable.
        """

    @abstractmethod
    def find_by_id(self, paste_id: str) -> Paste | None:
        """Return the paste with this id, or None."""

    @abstractmethod
    def update(
        self,
        paste_id: str,
        processing_input: ProcessingInput,
        processing_output: ProcessingOutput,
    ) -> None:
        """Replace input and output of a stored paste in one write.

        Raises:
            PasteNotFoundError: if no paste with this id exists.
            PasteStorageError: if the store is unreachable.
        """
