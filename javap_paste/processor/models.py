from pydantic import BaseModel, ConfigDict, Field


class ProcessingInput(BaseModel):
    """Source code plus the SDK it should be compiled with."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = ""
    compiler_name: str = Field(alias="compilerName")


class ProcessingOutput(BaseModel):
    """Result of one pipeline run. Always produced as a whole."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    compiler_log: str = Field(alias="compilerLog")
    disassembly: str = Field(alias="javap")
    decompiled: str = Field(alias="procyon")
