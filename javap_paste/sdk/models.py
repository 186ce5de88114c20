from dataclasses import dataclass, field
from enum import Enum


class Language(str, Enum):
    """Source languages a paste can be written in."""

    JAVA = "JAVA"
    KOTLIN = "KOTLIN"
    SCALA = "SCALA"

    @property
    def source_file(self) -> str:
        return _SOURCE_FILES[self]


_SOURCE_FILES = {
    Language.JAVA: "Main.java",
    Language.KOTLIN: "Main.kt",
    Language.SCALA: "Main.scala",
}


@dataclass(frozen=True)
class Sdk:
    """A compiler toolchain installed under the SDK root."""

    name: str
    language: Language
    directory: str
    compiler: str
    compiler_args: tuple[str, ...] = field(default_factory=tuple)
