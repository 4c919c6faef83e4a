"""Detection — read-only probes of the local toolchain."""

from enginecheck.core.detection.tool_version import (
    VERSION_COMMANDS,
    EngineCheckError,
    ProbeError,
    normalize_version,
    probe_version,
)

__all__ = [
    "VERSION_COMMANDS",
    "EngineCheckError",
    "ProbeError",
    "normalize_version",
    "probe_version",
]
