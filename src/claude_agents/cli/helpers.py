"""Shared helpers for claude-agents commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import click

from claude_agents.context import AgentsContext
from claude_agents.errors import ParseError
from claude_agents.install.targets import InstallTarget


@contextmanager
def catalog_errors() -> Iterator[None]:
    """Convert catalog load failures into a clean CLI error (exit code 1)."""
    try:
        yield
    except ParseError as e:
        raise click.ClickException(f"Failed to load agent catalog: {e}") from e


def resolve_target_flags(ctx: AgentsContext, use_global: bool, use_local: bool) -> InstallTarget:
    """Pick the install target from --global/--local, falling back to config."""
    if use_global and use_local:
        raise click.UsageError("Cannot specify both --global and --local")
    if use_global:
        return InstallTarget.GLOBAL
    if use_local:
        return InstallTarget.LOCAL
    return ctx.config.default_target


def target_options(fn):  # type: ignore[no-untyped-def]
    """Add the --global/--local flag pair to a command."""
    fn = click.option(
        "--local",
        "-l",
        "use_local",
        is_flag=True,
        help="Use the project location (./.claude/agents/)",
    )(fn)
    fn = click.option(
        "--global",
        "-g",
        "use_global",
        is_flag=True,
        help="Use the global location (~/.claude/agents/)",
    )(fn)
    return fn
