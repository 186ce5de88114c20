import subprocess
from dataclasses import dataclass
from pathlib import Path

from javap_paste.logging.logger import Log
from javap_paste.processor.exceptions import ProcessingError


@dataclass(frozen=True)
class CommandResult:
    exit_code: int
    output: str


def run_command(args: list[str], cwd: Path) -> CommandResult:
    """Run a toolchain command with stderr folded into stdout.

    A non-zero exit code is a normal result (e.g. a compile error).

    Raises:
        ProcessingError: if the executable cannot be started.
    """
    Log.debug(f"Running {' '.join(args)} in {cwd}")
    try:
        completed = subprocess.run(
            args,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise ProcessingError(f"Failed to run {args[0]}: {exc}") from exc
    return CommandResult(exit_code=completed.returncode, output=completed.stdout or "")
