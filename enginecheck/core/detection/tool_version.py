"""
Detection — Active tool version probing.

Runs each tool's ``--version`` command and normalizes its output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from enginecheck.adapters.shell.command import CommandError, run_command
from enginecheck.core.models.check import Tool

logger = logging.getLogger(__name__)

VERSION_COMMANDS: dict[Tool, list[str]] = {
    Tool.NODE: ["node", "--version"],
    Tool.NPM:  ["npm", "--version"],
    Tool.YARN: ["yarn", "--version"],
}

_missing = set(Tool) - set(VERSION_COMMANDS)
if _missing:
    raise RuntimeError(f"No version command for: {sorted(t.value for t in _missing)}")


class EngineCheckError(Exception):
    """Base error for failures that abort a check run."""


class ProbeError(EngineCheckError):
    """Raised when a tool's active version cannot be determined."""

    def __init__(self, tool: Tool, message: str) -> None:
        super().__init__(f"Could not get the {tool.value} version: {message}")
        self.tool = tool


def normalize_version(output: str) -> str:
    """Trim a ``--version`` report down to the bare version.

    ``"v18.2.0\\n"`` and ``"18.2.0"`` both become ``"18.2.0"``.
    """
    version = output.strip()
    if version.startswith("v"):
        version = version[1:]
    return version


def probe_version(
    tool: Tool,
    cwd: Path | str | None = None,
    timeout: float | None = None,
) -> str:
    """Return the active version of ``tool`` as seen from ``cwd``.

    Raises:
        ProbeError: If the tool is missing, fails, or times out.
    """
    try:
        output = run_command(VERSION_COMMANDS[tool], cwd=cwd, timeout=timeout)
    except CommandError as e:
        raise ProbeError(tool, str(e)) from e

    version = normalize_version(output)
    logger.debug("%s active version: %s", tool.value, version)
    return version
