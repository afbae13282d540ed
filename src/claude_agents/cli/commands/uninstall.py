"""Remove installed agent files."""

import click

from claude_agents.cli.helpers import resolve_target_flags, target_options
from claude_agents.cli.reporting import echo_uninstall_results
from claude_agents.context import AgentsContext


@click.command("uninstall")
@click.argument("names", nargs=-1, required=True)
@target_options
@click.pass_obj
def uninstall_cmd(
    ctx: AgentsContext,
    names: tuple[str, ...],
    use_global: bool,
    use_local: bool,
) -> None:
    """Remove installed agents by name.

    Examples:

    \b
      claude-agents uninstall swift-architect --local
    """
    target = resolve_target_flags(ctx, use_global, use_local)
    results = ctx.installer.uninstall(list(dict.fromkeys(names)), target)
    if echo_uninstall_results(results) > 0:
        raise SystemExit(1)
