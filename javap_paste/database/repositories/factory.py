from javap_paste.config.settings import Settings
from javap_paste.database.repositories.base import BasePasteRepository
from javap_paste.database.repositories.memory_repository import InMemoryPasteRepository
from javap_paste.database.repositories.paste_repository import PostgresPasteRepository


class PasteRepositoryFactory:
    """Creates the paste store selected in settings."""

    BACKENDS: dict[str, type[BasePasteRepository]] = {
        "postgres": PostgresPasteRepository,
        "memory": InMemoryPasteRepository,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePasteRepository:
        backend = settings.storage_backend.lower()
        repository_cls = cls.BACKENDS.get(backend)
        if repository_cls is None:
            raise ValueError(
                f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
            )
        return repository_cls()
