import logging

import click

from claude_agents.cli.commands.install import install_cmd
from claude_agents.cli.commands.list_cmd import list_cmd
from claude_agents.cli.commands.uninstall import uninstall_cmd
from claude_agents.cli.commands.update import update_cmd
from claude_agents.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="claude-agents")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Install and manage Claude agent markdown files.

    Runs `list` when no command is given.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            raise click.ClickException(f"Invalid configuration: {e}") from e

    if ctx.invoked_subcommand is None:
        ctx.invoke(list_cmd)


cli.add_command(list_cmd)
cli.add_command(install_cmd)
cli.add_command(uninstall_cmd)
cli.add_command(update_cmd)


def main() -> None:
    """CLI entry point used by the `claude-agents` console script."""
    cli()
