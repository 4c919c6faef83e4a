"""
Report rendering for the check command.

Thin presentation over ``EngineCheckResult``; all decisions are made
in ``enginecheck.core.use_cases.check_engines``.
"""

from __future__ import annotations

import json

import click

from enginecheck.core.config.loader import MANIFEST_FILE
from enginecheck.core.models.check import CheckResult, Tool
from enginecheck.core.models.manifest import Manifest

_EXAMPLE_MANIFEST = {
    "name": "my-project",
    "version": "1.0.0",
    "engines": {
        "node": "^16",
        "npm": "^8",
    },
}


def _tool_list() -> str:
    names = [click.style(t.value, fg="cyan") for t in Tool]
    return ", ".join(names[:-1]) + " and/or " + names[-1]


def echo_not_in_project() -> None:
    """Explain how to declare constraints when none were found."""
    click.echo()
    click.secho("Oops! Are we inside the project?", fg="green")
    click.echo()
    click.echo(
        f"If so, you can set the {_tool_list()} version in the "
        f"{click.style(MANIFEST_FILE, fg='cyan')} file."
    )
    click.echo()
    click.echo("Example:")
    click.echo()
    click.secho(json.dumps(_EXAMPLE_MANIFEST, indent=2), fg="cyan")
    click.echo()


def echo_banner(manifest: Manifest) -> None:
    if not manifest.name:
        return
    version = manifest.version or "?"
    click.secho(f"{manifest.name}: {version}", fg="bright_blue")


def format_result(result: CheckResult) -> str:
    """One styled report line for a tool."""
    head = f"{result.tool.value}: {result.active_version}"
    if result.satisfied:
        return click.style(head, fg="green")
    return (
        click.style(head, fg="red")
        + " "
        + click.style(f"(required version: {result.required_range})", fg="yellow")
    )


def echo_results(results: list[CheckResult]) -> None:
    for result in results:
        click.echo(format_result(result))


def echo_summary(valid: bool) -> None:
    click.echo()
    if valid:
        click.secho("Everything looks good, let's continue...", fg="bright_blue")
    else:
        click.secho("Oops! We can't continue.", fg="yellow")
        click.echo()
        click.secho(
            "Make sure the required version is active "
            "(e.g. node --version) and try again.",
            fg="yellow",
        )
    click.echo()
