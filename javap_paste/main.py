import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from javap_paste.config.settings import Settings
from javap_paste.database.connection import close_pool, init_pool
from javap_paste.database.repositories.factory import PasteRepositoryFactory
from javap_paste.logging.logger import Log
from javap_paste.paste.default_paste import DefaultPasteRegistry
from javap_paste.paste.dto import PasteCreate, PasteDto, PasteUpdate
from javap_paste.paste.exceptions import PasteError
from javap_paste.paste.service import PasteService
from javap_paste.processor.exceptions import ProcessingError
from javap_paste.processor.factory import ProcessorFactory
from javap_paste.processor.models import ProcessingInput
from javap_paste.sdk.exceptions import UnknownSdkError


def build_service(settings: Settings) -> PasteService:
    """Wire repository and processor, then build the default pastes eagerly."""
    processor = ProcessorFactory.create(settings)
    repository = PasteRepositoryFactory.create(settings)
    default_pastes = DefaultPasteRegistry.build(processor)
    return PasteService(repository, processor, default_pastes)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="javap-paste")
    parser.add_argument("--token", default=None, help="owner token")
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="compile code and store a new paste")
    create.add_argument("compiler_name")
    create.add_argument("source", nargs="?", type=Path, help="source file, stdin if omitted")

    get = commands.add_parser("get", help="show a paste")
    get.add_argument("paste_id")

    update = commands.add_parser("update", help="replace the code of an owned paste")
    update.add_argument("paste_id")
    update.add_argument("compiler_name")
    update.add_argument("source", nargs="?", type=Path, help="source file, stdin if omitted")
    return parser


def _read_source(source: Path | None) -> str:
    if source is None:
        return sys.stdin.read()
    return source.read_text(encoding="utf-8")


def run(service: PasteService, args: argparse.Namespace) -> PasteDto:
    if args.command == "create":
        processing_input = ProcessingInput(
            code=_read_source(args.source), compiler_name=args.compiler_name
        )
        return service.create_paste(args.token, PasteCreate(input=processing_input))
    if args.command == "update":
        processing_input = ProcessingInput(
            code=_read_source(args.source), compiler_name=args.compiler_name
        )
        return service.update_paste(
            args.token, args.paste_id, PasteUpdate(input=processing_input)
        )
    return service.get_paste(args.token, args.paste_id)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: configure -> initialize pool -> build service -> run one command.

    Stdout carries only the paste JSON; logs and errors go to stderr.
    """
    args = _build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    uses_database = settings.storage_backend.lower() == "postgres"
    if uses_database:
        init_pool(settings)

    try:
        service = build_service(settings)
        print(run(service, args).to_json())
    except (PasteError, ProcessingError, UnknownSdkError) as exc:
        Log.error(f"{args.command} failed: {exc}")
        print(f"error {exc.status_code}: {exc}", file=sys.stderr)
        return 1
    finally:
        if uses_database:
            close_pool()
    return 0


if __name__ == "__main__":
    sys.exit(main())
