"""Install agent files into a target directory."""

import click

from claude_agents.catalog.models import Agent
from claude_agents.cli.helpers import catalog_errors, resolve_target_flags, target_options
from claude_agents.cli.reporting import echo_install_results
from claude_agents.context import AgentsContext
from claude_agents.install.models import Skipped, summarize_results
from claude_agents.install.service import ABORTED_REASON
from claude_agents.output import user_output


def parse_selection(selection: str, available: list[Agent]) -> list[Agent]:
    """Map a "1,3" or "all" selection to agents.

    Out-of-range and non-numeric entries are ignored; repeats are dropped.
    """
    if selection.strip().lower() == "all":
        return list(available)

    chosen: list[Agent] = []
    for part in selection.split(","):
        part = part.strip()
        if not part.isdigit():
            continue
        index = int(part)
        if 1 <= index <= len(available):
            agent = available[index - 1]
            if agent not in chosen:
                chosen.append(agent)
    return chosen


def _prompt_for_agents(available: list[Agent]) -> list[Agent]:
    click.echo("Available agents:")
    for position, agent in enumerate(available, start=1):
        click.echo(f"  {position}. {agent.identifier}")
    click.echo("")
    selection = click.prompt(
        "Enter agent numbers to install (comma-separated), or 'all'",
        default="",
        show_default=False,
    )
    return parse_selection(selection, available)


def _resolve_names(ctx: AgentsContext, names: tuple[str, ...]) -> list[Agent]:
    agents: list[Agent] = []
    for name in dict.fromkeys(names):
        agent = ctx.repository.get_agent(name)
        if agent is None:
            warning = click.style("Warning: ", fg="yellow")
            user_output(f"{warning}Agent '{name}' not found, skipping...")
            continue
        agents.append(agent)
    return agents


@click.command("install")
@click.argument("names", nargs=-1)
@target_options
@click.option("--all", "-a", "install_all", is_flag=True, help="Install all available agents")
@click.option("--force", "-f", is_flag=True, help="Overwrite agents that already exist")
@click.pass_obj
def install_cmd(
    ctx: AgentsContext,
    names: tuple[str, ...],
    use_global: bool,
    use_local: bool,
    install_all: bool,
    force: bool,
) -> None:
    """Install agents to ~/.claude/agents/ or ./.claude/agents/.

    With no NAMES and no --all, shows the catalog and asks which agents to
    install. Without --force, existing files are skipped (or, when choosing
    interactively, you are asked about each one).

    Examples:

    \b
      # Install two agents globally
      claude-agents install swift-architect testing-specialist

    \b
      # Install everything into the current project, replacing old copies
      claude-agents install --all --local --force
    """
    target = resolve_target_flags(ctx, use_global, use_local)

    with catalog_errors():
        if install_all:
            agents = ctx.repository.load_agents()
        elif names:
            agents = _resolve_names(ctx, names)
        else:
            available = ctx.repository.load_agents()
            if not available:
                click.echo("No agents available to install")
                return
            agents = _prompt_for_agents(available)
            if not agents:
                click.echo("Installation cancelled")
                return

    if not agents:
        click.echo("No agents to install")
        return

    target_dir = ctx.installer.target_dir(target)
    click.echo(f"Installing {len(agents)} agent(s) to {target.display_name} location...")
    click.echo(f"Target: {target_dir}")
    click.echo("")

    results = ctx.installer.install(
        agents,
        target,
        overwrite=force,
        interactive=not force and not names,
    )
    echo_install_results(results)

    if any(result.status == Skipped(ABORTED_REASON) for result in results):
        user_output("Installation aborted")
        raise SystemExit(1)
    if summarize_results(results).has_failures:
        raise SystemExit(1)
