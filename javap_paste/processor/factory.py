from javap_paste.config.settings import Settings
from javap_paste.processor.base import BaseProcessor
from javap_paste.processor.example_processor import ExampleProcessor
from javap_paste.processor.toolchain_processor import ToolchainProcessor


class ProcessorFactory:
    """Creates the configured processor backend."""

    ENGINES = ("toolchain", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseProcessor:
        engine = settings.processor_engine.lower()
        if engine == "example":
            return ExampleProcessor()
        if engine == "toolchain":
            return ToolchainProcessor(
                sdk_root=settings.sdk_root,
                java_home=settings.java_home,
                procyon_jar=settings.procyon_jar,
                max_concurrent=settings.max_concurrent_compilations,
            )
        raise ValueError(
            f"Unknown processor engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
