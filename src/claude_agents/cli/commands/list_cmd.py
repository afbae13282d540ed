"""List agents available in the catalog."""

import click

from claude_agents.catalog.models import Agent
from claude_agents.cli.helpers import catalog_errors
from claude_agents.context import AgentsContext


def _keep(agents: list[Agent], matches: list[Agent]) -> list[Agent]:
    wanted = {agent.identifier for agent in matches}
    return [agent for agent in agents if agent.identifier in wanted]


@click.command("list")
@click.option("--tool", help="Only agents that use this tool (e.g. Bash)")
@click.option("--model", help="Only agents that use this model (case-insensitive)")
@click.option("--mcp", "mcp_server", help="Only agents that require this MCP server")
@click.option("--search", "query", help="Case-insensitive search over name and description")
@click.option("--verbose", "-v", is_flag=True, help="Show tools, model and MCP servers")
@click.pass_obj
def list_cmd(
    ctx: AgentsContext,
    tool: str | None,
    model: str | None,
    mcp_server: str | None,
    query: str | None,
    verbose: bool,
) -> None:
    """List available agents.

    Filters combine: an agent is shown only if it matches all of them.

    Examples:

    \b
      # List everything
      claude-agents list

    \b
      # Agents that can run shell commands on opus
      claude-agents list --tool Bash --model opus
    """
    repository = ctx.repository
    with catalog_errors():
        agents = repository.load_agents()
        if tool is not None:
            agents = _keep(agents, repository.by_tool(tool))
        if model is not None:
            agents = _keep(agents, repository.by_model(model))
        if mcp_server is not None:
            agents = _keep(agents, repository.by_mcp_server(mcp_server))
        if query is not None:
            agents = _keep(agents, repository.search(query))

    if not agents:
        click.echo("No agents found")
        return

    click.echo(click.style(f"Available agents ({len(agents)}):", bold=True))
    for agent in agents:
        click.echo(f"  {click.style(agent.identifier, fg='cyan')} - {agent.description}")
        if verbose:
            tools = ", ".join(sorted(agent.tools)) if agent.tools else "(none)"
            click.echo(click.style(f"    Tools: {tools}", dim=True))
            if agent.model is not None:
                click.echo(click.style(f"    Model: {agent.model}", dim=True))
            if agent.integrations:
                servers = ", ".join(sorted(agent.integrations))
                click.echo(click.style(f"    MCP: {servers}", dim=True))
