"""
Manifest model — the slice of package.json the checker cares about.

Only ``name``, ``version``, ``engines`` and ``volta`` are read. Everything
else in the file is ignored. Unexpected shapes never fail validation: a
non-mapping ``engines``/``volta`` counts as empty, and a tool key whose
value is not a range still declares the tool, with no constraint.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Manifest(BaseModel):
    """Declared project identity and tool version constraints."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    version: str | None = None

    engines: dict[str, str] = Field(default_factory=dict)   # tool → range
    volta: dict[str, str] = Field(default_factory=dict)     # tool → pinned version

    @field_validator("name", "version", mode="before")
    @classmethod
    def _scalar_or_none(cls, value: Any) -> str | None:
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, (str, int, float)):
            return str(value)
        return None

    @field_validator("engines", "volta", mode="before")
    @classmethod
    def _string_mapping(cls, value: Any) -> dict[str, str]:
        # e.g. the legacy array form of "engines"
        if not isinstance(value, dict):
            return {}
        # Keys are kept whatever their value: a key alone selects the tool,
        # and a value that is not a range means "no constraint" ("").
        ranges: dict[str, str] = {}
        for key, raw in value.items():
            if isinstance(raw, (str, int, float)) and not isinstance(raw, bool):
                ranges[str(key)] = str(raw)
            else:
                ranges[str(key)] = ""
        return ranges

    def declares(self, tool_name: str) -> bool:
        """Whether either constraint mapping mentions ``tool_name``."""
        return tool_name in self.engines or tool_name in self.volta
