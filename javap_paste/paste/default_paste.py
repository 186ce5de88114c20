from collections.abc import Iterable

from javap_paste.logging.logger import Log
from javap_paste.paste.models import DefaultPaste
from javap_paste.processor.base import BaseProcessor
from javap_paste.processor.models import ProcessingInput
from javap_paste.sdk.models import Language
from javap_paste.sdk.registry import default_sdk, languages

DEFAULT_ID_PREFIX = "default:"

SAMPLE_CODE: dict[Language, str] = {
    Language.JAVA: """import java.util.*;

public class Main {
    public Main() {
        int i = 0;
        i++;
    }
}
""",
    Language.KOTLIN: """fun main() {
    val greeting = "Hello"
    println("$greeting, World!")
}
""",
    Language.SCALA: """object Main {
  def main(args: Array[String]): Unit = {
    val xs = List(1, 2, 3)
    println(xs.map(_ * 2))
  }
}
""",
}


def is_default_id(paste_id: str) -> bool:
    return paste_id.startswith(DEFAULT_ID_PREFIX)


def default_id(language: Language) -> str:
    return f"{DEFAULT_ID_PREFIX}{language.value}"


class DefaultPasteRegistry:
    """Read-only set of sample pastes, one per language.

    Built once at startup by running the processor over SAMPLE_CODE; there
    is no way to change it afterwards.
    """

    def __init__(self, pastes: Iterable[DefaultPaste]) -> None:
        self._pastes: tuple[DefaultPaste, ...] = tuple(pastes)
        self._by_id: dict[str, DefaultPaste] = {p.id: p for p in self._pastes}

    @classmethod
    def build(
        cls,
        processor: BaseProcessor,
        langs: Iterable[Language] | None = None,
    ) -> "DefaultPasteRegistry":
        pastes = []
        for language in languages() if langs is None else langs:
            processing_input = ProcessingInput(
                code=SAMPLE_CODE[language],
                compiler_name=default_sdk(language).name,
            )
            pastes.append(
                DefaultPaste(
                    id=default_id(language),
                    input=processing_input,
                    output=processor.process(processing_input),
                )
            )
        Log.info(f"Built {len(pastes)} default pastes")
        return cls(pastes)

    @property
    def default_pastes(self) -> tuple[DefaultPaste, ...]:
        return self._pastes

    def lookup(self, paste_id: str) -> DefaultPaste | None:
        return self._by_id.get(paste_id)
