"""
Check engines use case — compare active tool versions with the manifest.

Flow:
    load manifest → resolve tools → probe + compare each tool (in order)
    → aggregate into an EngineCheckResult.

Probes run one after another. A ProbeError is not caught here: it aborts
the whole run and no partial result is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from enginecheck.core.config.loader import load_manifest
from enginecheck.core.detection.tool_version import probe_version
from enginecheck.core.domain.version_range import satisfies
from enginecheck.core.models.check import CheckResult, Tool
from enginecheck.core.models.manifest import Manifest

logger = logging.getLogger(__name__)


@dataclass
class EngineCheckResult:
    """Result of a full check run."""

    manifest: Manifest = field(default_factory=Manifest)
    project_dir: Path | None = None
    tools: list[Tool] = field(default_factory=list)
    results: list[CheckResult] = field(default_factory=list)

    @property
    def in_project(self) -> bool:
        """False when the manifest references none of the known tools."""
        return bool(self.tools)

    @property
    def valid(self) -> bool:
        return all(r.satisfied for r in self.results)

    @property
    def exit_code(self) -> int:
        return 0 if self.valid else 1


def resolve_tools(manifest: Manifest) -> list[Tool]:
    """Known tools referenced by ``engines`` or ``volta``, in Tool order."""
    return [tool for tool in Tool if manifest.declares(tool.value)]


def required_range(tool: Tool, manifest: Manifest) -> str | None:
    """The range ``tool`` must satisfy; ``engines`` wins over ``volta``."""
    return manifest.engines.get(tool.value) or manifest.volta.get(tool.value) or None


def check_tool(
    tool: Tool,
    manifest: Manifest,
    project_dir: Path | None = None,
    timeout: float | None = None,
) -> CheckResult:
    """Probe one tool and evaluate it against its required range.

    Raises:
        ProbeError: If the tool's version cannot be determined.
    """
    active = probe_version(tool, cwd=project_dir, timeout=timeout)
    wanted = required_range(tool, manifest)

    ok = wanted is None or satisfies(active, wanted)

    logger.info(
        "%s %s %s %s",
        tool.value, active, "satisfies" if ok else "does not satisfy", wanted or "*",
    )
    return CheckResult(
        tool=tool,
        active_version=active,
        required_range=wanted,
        satisfied=ok,
    )


def run_check(
    project_dir: Path | None = None,
    timeout: float | None = None,
) -> EngineCheckResult:
    """Run the full check for the project in ``project_dir`` (default: cwd).

    Raises:
        ProbeError: On the first tool whose version cannot be determined.
    """
    project_dir = project_dir or Path.cwd()
    manifest = load_manifest(project_dir)
    result = EngineCheckResult(
        manifest=manifest,
        project_dir=project_dir,
        tools=resolve_tools(manifest),
    )

    if not result.in_project:
        logger.debug("No known tools declared in %s", project_dir)
        return result

    for tool in result.tools:
        result.results.append(
            check_tool(tool, manifest, project_dir=project_dir, timeout=timeout)
        )

    return result
