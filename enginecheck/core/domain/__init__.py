"""Pure domain logic — no I/O."""

from enginecheck.core.domain.version_range import (
    InvalidRange,
    InvalidVersion,
    Range,
    Version,
    satisfies,
)

__all__ = [
    "InvalidRange",
    "InvalidVersion",
    "Range",
    "Version",
    "satisfies",
]
