"""
Shared test fixtures and configuration.
"""

import json
import logging
from pathlib import Path
from typing import Callable

import pytest

from enginecheck.core.detection.tool_version import ProbeError
from enginecheck.core.models.check import Tool


class FakeProbe:
    """Stand-in for probe_version: answers from a dict, records calls.

    A tool missing from ``versions`` raises ProbeError like an absent binary.
    """

    def __init__(self) -> None:
        self.versions: dict[str, str] = {}
        self.calls: list[Tool] = []

    def __call__(self, tool: Tool, cwd=None, timeout=None) -> str:
        self.calls.append(tool)
        if tool.value not in self.versions:
            raise ProbeError(tool, f"Command not found: {tool.value}")
        return self.versions[tool.value]


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() rewires the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[object], Path]:
    """Write ``data`` as package.json into tmp_path and return the path."""

    def _write(data: object) -> Path:
        path = tmp_path / "package.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fake_probe(monkeypatch) -> FakeProbe:
    """Replace the version probe used by the check use case."""
    probe = FakeProbe()
    monkeypatch.setattr(
        "enginecheck.core.use_cases.check_engines.probe_version", probe
    )
    return probe
