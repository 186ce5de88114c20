from pathlib import Path

from javap_paste.logging.logger import Log
from javap_paste.processor.command import run_command
from javap_paste.processor.pipeline import PipelineContext, PipelineStep


def _relative(context: PipelineContext, paths: list[Path]) -> list[str]:
    return [str(path.relative_to(context.workdir)) for path in paths]


class WriteSourceStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        source_dir = context.workdir / "src"
        source_dir.mkdir(parents=True, exist_ok=True)
        context.source_path = source_dir / context.sdk.language.source_file
        context.source_path.write_text(context.code, encoding="utf-8")
        return context


class CompileStep(PipelineStep):
    def __init__(self, sdk_root: Path) -> None:
        self._sdk_root = sdk_root

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.source_path is None:
            raise ValueError("PipelineContext.source_path must be set before compilation")
        sdk = context.sdk
        classes_dir = context.workdir / "classes"
        classes_dir.mkdir(exist_ok=True)
        compiler = self._sdk_root / sdk.directory / "bin" / sdk.compiler
        result = run_command(
            [
                str(compiler),
                *sdk.compiler_args,
                "-d",
                "classes",
                *_relative(context, [context.source_path]),
            ],
            cwd=context.workdir,
        )
        context.compiler_log = result.output
        context.class_files = sorted(classes_dir.rglob("*.class"))
        Log.info(
            f"Compiled with {sdk.name}: exit code {result.exit_code}, "
            f"{len(context.class_files)} class files"
        )
        return context


class DisassembleStep(PipelineStep):
    def __init__(self, java_home: Path) -> None:
        self._javap = java_home / "bin" / "javap"

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.class_files:
            return context
        result = run_command(
            [str(self._javap), "-c", "-p", "-constants", *_relative(context, context.class_files)],
            cwd=context.workdir,
        )
        context.disassembly = result.output
        return context


class DecompileStep(PipelineStep):
    def __init__(self, java_home: Path, procyon_jar: Path) -> None:
        self._java = java_home / "bin" / "java"
        self._procyon_jar = procyon_jar

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.class_files:
            return context
        result = run_command(
            [
                str(self._java),
                "-jar",
                str(self._procyon_jar),
                *_relative(context, context.class_files),
            ],
            cwd=context.workdir,
        )
        context.decompiled = result.output
        return context
