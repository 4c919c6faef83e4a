"""
enginecheck — CLI entrypoint.

Usage:
    enginecheck
    enginecheck --version
    python -m enginecheck --project-dir path/to/project
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from enginecheck import __version__
from enginecheck.core.observability.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _probe_timeout() -> float | None:
    """Optional probe timeout from ENGINECHECK_PROBE_TIMEOUT (seconds)."""
    raw = os.environ.get("ENGINECHECK_PROBE_TIMEOUT")
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid ENGINECHECK_PROBE_TIMEOUT=%r", raw)
        return None
    return timeout if timeout > 0 else None


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    }
)
@click.version_option(
    __version__, "--version", "-v", prog_name="enginecheck", message="%(version)s"
)
@click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="ENGINECHECK_PROJECT_DIR",
    help="Project directory holding package.json (default: cwd).",
)
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
def cli(
    project_dir: Path | None,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Check active node/npm/yarn versions against package.json."""
    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("ENGINECHECK_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("ENGINECHECK_LOG_FILE"),
        log_file_level=os.environ.get("ENGINECHECK_LOG_FILE_LEVEL"),
    )

    from enginecheck.core.detection.tool_version import EngineCheckError
    from enginecheck.core.use_cases.check_engines import run_check
    from enginecheck.ui.cli import report

    root = (project_dir or Path.cwd()).resolve()

    try:
        result = run_check(root, timeout=_probe_timeout())
    except EngineCheckError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if not result.in_project:
        report.echo_not_in_project()
        return

    report.echo_banner(result.manifest)
    report.echo_results(result.results)
    report.echo_summary(result.valid)

    if not result.valid:
        sys.exit(result.exit_code)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
