import pytest

from javap_paste.sdk.exceptions import UnknownSdkError
from javap_paste.sdk.models import Language
from javap_paste.sdk.registry import SDKS, default_sdk, find_sdk, languages


class TestFindSdk:
    def test_finds_known_sdk(self) -> None:
        sdk = find_sdk("KOTLIN_1_9")
        assert sdk.language == Language.KOTLIN
        assert sdk.compiler == "kotlinc"

    def test_raises_for_unknown_sdk(self) -> None:
        with pytest.raises(UnknownSdkError, match="Unknown compiler 'GCC'"):
            find_sdk("GCC")

    def test_names_are_unique(self) -> None:
        names = [sdk.name for sdk in SDKS]
        assert len(names) == len(set(names))


class TestLanguages:
    def test_in_declaration_order(self) -> None:
        assert languages() == [Language.JAVA, Language.KOTLIN, Language.SCALA]

    def test_default_sdk_is_first_declared(self) -> None:
        assert default_sdk(Language.JAVA).name == "JDK_21"
        assert default_sdk(Language.SCALA).name == "SCALA_2_13"

    def test_source_file_names(self) -> None:
        assert Language.JAVA.source_file == "Main.java"
        assert Language.KOTLIN.source_file == "Main.kt"
        assert Language.SCALA.source_file == "Main.scala"
