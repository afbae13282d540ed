"""User-facing output helpers.

Diagnostics and prompts go to stderr so stdout stays clean for listings.
"""

import sys

import click


def user_output(message: str = "") -> None:
    """Write a diagnostic line to stderr."""
    click.echo(message, err=True)


def user_confirm(prompt: str) -> bool:
    """Ask a yes/no question on stderr, defaulting to no.

    Flushes stderr first so earlier diagnostics appear before the prompt.
    """
    sys.stderr.flush()
    return click.confirm(prompt, default=False, err=True)
