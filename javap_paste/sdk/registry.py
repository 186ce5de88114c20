from javap_paste.sdk.exceptions import UnknownSdkError
from javap_paste.sdk.models import Language, Sdk

# First SDK declared for a language is that language's default.
SDKS: tuple[Sdk, ...] = (
    Sdk("JDK_21", Language.JAVA, "jdk-21", "javac", ("-g", "-encoding", "UTF-8")),
    Sdk("JDK_17", Language.JAVA, "jdk-17", "javac", ("-g", "-encoding", "UTF-8")),
    Sdk("JDK_11", Language.JAVA, "jdk-11", "javac", ("-g", "-encoding", "UTF-8")),
    Sdk("KOTLIN_1_9", Language.KOTLIN, "kotlin-1.9", "kotlinc"),
    Sdk("SCALA_2_13", Language.SCALA, "scala-2.13", "scalac"),
)

_BY_NAME: dict[str, Sdk] = {sdk.name: sdk for sdk in SDKS}


def find_sdk(name: str) -> Sdk:
    """Look up an SDK by its compilerName.

    Raises:
        UnknownSdkError: if no SDK has this name.
    """
    sdk = _BY_NAME.get(name)
    if sdk is None:
        raise UnknownSdkError(
            f"Unknown compiler '{name}'. Choose from: {list(_BY_NAME)}"
        )
    return sdk


def languages() -> list[Language]:
    """Languages with at least one SDK, in declaration order."""
    seen: list[Language] = []
    for sdk in SDKS:
        if sdk.language not in seen:
            seen.append(sdk.language)
    return seen


def default_sdk(language: Language) -> Sdk:
    for sdk in SDKS:
        if sdk.language == language:
            return sdk
    raise UnknownSdkError(f"No SDK available for {language.value}")
