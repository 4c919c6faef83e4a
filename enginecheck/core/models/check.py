"""
Check models — the tools we know how to probe and per-tool outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Tool(str, Enum):
    """Tools whose active version can be checked.

    Declaration order is the order tools are checked and reported in.
    """

    NODE = "node"
    NPM = "npm"
    YARN = "yarn"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one tool against the manifest."""

    tool: Tool
    active_version: str
    required_range: str | None = None
    satisfied: bool = True
