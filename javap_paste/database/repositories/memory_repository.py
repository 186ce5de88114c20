import threading
from dataclasses import replace

from javap_paste.database.repositories.base import BasePasteRepository
from javap_paste.paste.exceptions import PasteNotFoundError, PasteStorageError
from javap_paste.paste.models import Paste
from javap_paste.processor.models import ProcessingInput, ProcessingOutput


class InMemoryPasteRepository(BasePasteRepository):
    """Process-local paste store. Contents are lost on restart."""

    def __init__(self) -> None:
        self._pastes: dict[str, Paste] = {}
        self._lock = threading.Lock()

    def insert(self, paste: Paste) -> None:
        with self._lock:
            if paste.id in self._pastes:
                raise PasteStorageError(f"Paste {paste.id} already exists")
            self._pastes[paste.id] = paste

    def find_by_id(self, paste_id: str) -> Paste | None:
        with self._lock:
            return self._pastes.get(paste_id)

    def update(
        self,
        paste_id: str,
        processing_input: ProcessingInput,
        processing_output: ProcessingOutput,
    ) -> None:
        with self._lock:
            paste = self._pastes.get(paste_id)
            if paste is None:
                raise PasteNotFoundError(f"Paste {paste_id} not found")
            self._pastes[paste_id] = replace(
                paste, input=processing_input, output=processing_output
            )
