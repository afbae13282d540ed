"""Refresh installed agents from the catalog."""

import click

from claude_agents.cli.helpers import catalog_errors, resolve_target_flags, target_options
from claude_agents.cli.reporting import echo_install_results
from claude_agents.context import AgentsContext
from claude_agents.install.models import summarize_results


@click.command("update")
@target_options
@click.pass_obj
def update_cmd(ctx: AgentsContext, use_global: bool, use_local: bool) -> None:
    """Rewrite installed agents whose content differs from the catalog.

    Agents that are not installed are not added, and installed files
    with no catalog counterpart are left alone.
    """
    target = resolve_target_flags(ctx, use_global, use_local)

    with catalog_errors():
        catalog = ctx.repository.load_agents()

    results = ctx.installer.update(catalog, target)
    if not results:
        click.echo(f"No installed agents to update in {ctx.installer.target_dir(target)}")
        return

    echo_install_results(results)
    if summarize_results(results).has_failures:
        raise SystemExit(1)
