"""
Shell command adapter — run an external command and capture its output.

This is the only place the checker spawns processes.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when a command is missing, fails, or times out."""

    def __init__(
        self,
        command: list[str],
        message: str,
        return_code: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.return_code = return_code
        self.stderr = stderr


def run_command(
    command: list[str],
    cwd: Path | str | None = None,
    timeout: float | None = None,
) -> str:
    """Run ``command`` and return its stdout.

    The executable is resolved through ``shutil.which`` so wrapper shims
    (``npm.cmd`` on Windows, volta/nvm shims) behave like they do in a shell.

    Args:
        command: argv list, e.g. ``["node", "--version"]``.
        cwd: Working directory (default: inherit).
        timeout: Seconds to wait, or None to wait forever.

    Raises:
        CommandError: If the executable is missing, exits non-zero,
            or exceeds ``timeout``.
    """
    executable = shutil.which(command[0])
    if executable is None:
        raise CommandError(command, f"Command not found: {command[0]}")

    argv = [executable, *command[1:]]
    logger.debug("Executing: %s (cwd=%s)", " ".join(command), cwd)

    try:
        result = subprocess.run(
            argv,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise CommandError(command, f"Command timed out after {timeout}s") from e
    except OSError as e:
        raise CommandError(command, f"Command execution error: {e}") from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise CommandError(
            command,
            stderr or f"Command exited with code {result.returncode}",
            return_code=result.returncode,
            stderr=stderr,
        )

    return result.stdout or ""
