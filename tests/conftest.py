import pytest

from javap_paste.database.repositories.memory_repository import InMemoryPasteRepository
from javap_paste.paste.default_paste import DefaultPasteRegistry
from javap_paste.paste.service import PasteService
from javap_paste.processor.example_processor import ExampleProcessor
from javap_paste.processor.models import ProcessingInput


@pytest.fixture()
def processor() -> ExampleProcessor:
    return ExampleProcessor()


@pytest.fixture()
def default_pastes(processor: ExampleProcessor) -> DefaultPasteRegistry:
    return DefaultPasteRegistry.build(processor)


@pytest.fixture()
def memory_repository() -> InMemoryPasteRepository:
    return InMemoryPasteRepository()


@pytest.fixture()
def paste_service(
    memory_repository: InMemoryPasteRepository,
    processor: ExampleProcessor,
    default_pastes: DefaultPasteRegistry,
) -> PasteService:
    return PasteService(memory_repository, processor, default_pastes)


@pytest.fixture()
def java_input() -> ProcessingInput:
    return ProcessingInput(code="test code 1", compiler_name="JDK_21")
