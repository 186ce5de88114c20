from pydantic import BaseModel, ConfigDict

from javap_paste.processor.models import ProcessingInput, ProcessingOutput


class PasteDto(BaseModel):
    """Outward view of a paste. The owner token is never part of it."""

    model_config = ConfigDict(frozen=True)

    id: str
    editable: bool
    input: ProcessingInput
    output: ProcessingOutput

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str) -> "PasteDto":
        return cls.model_validate_json(raw)


class PasteCreate(BaseModel):
    """Request body for creating a paste."""

    model_config = ConfigDict(frozen=True)

    input: ProcessingInput


class PasteUpdate(BaseModel):
    """Request body for replacing the input of an existing paste."""

    model_config = ConfigDict(frozen=True)

    input: ProcessingInput
