"""Render install and uninstall results."""

import click

from claude_agents.install.models import (
    Failed,
    Installed,
    InstallResult,
    NotInstalled,
    Overwritten,
    Removed,
    Skipped,
    UninstallResult,
    summarize_results,
)


def echo_install_results(results: list[InstallResult]) -> None:
    """Print one line per result followed by a summary of non-zero counts."""
    for result in results:
        name = result.agent.identifier
        match result.status:
            case Installed():
                click.echo(click.style("✓ ", fg="green") + name)
            case Overwritten():
                click.echo(click.style("✓ ", fg="green") + f"{name} (overwritten)")
            case Skipped(reason=reason):
                click.echo(click.style("- ", fg="yellow") + f"{name} - {reason}")
            case Failed(error=error):
                click.echo(click.style("✗ ", fg="red") + f"{name} - {error}")

    summary = summarize_results(results)
    click.echo("")
    click.echo(click.style("Summary:", bold=True))
    if summary.installed > 0:
        click.echo(f"  Installed: {summary.installed}")
    if summary.overwritten > 0:
        click.echo(f"  Overwritten: {summary.overwritten}")
    if summary.skipped > 0:
        click.echo(f"  Skipped: {summary.skipped}")
    if summary.failed > 0:
        click.echo(f"  Failed: {summary.failed}")


def echo_uninstall_results(results: list[UninstallResult]) -> int:
    """Print one line per result and return the number of failures."""
    failed = 0
    for result in results:
        match result.status:
            case Removed():
                click.echo(click.style("✓ ", fg="green") + f"{result.identifier} removed")
            case NotInstalled():
                click.echo(click.style("- ", fg="yellow") + f"{result.identifier} - not installed")
            case Failed(error=error):
                click.echo(click.style("✗ ", fg="red") + f"{result.identifier} - {error}")
                failed += 1
    return failed
