"""Interactive conflict prompt backed by click.confirm."""

import click

from claude_agents.gateway.conflict_prompt.abc import ConflictPrompt
from claude_agents.install.models import ConflictResolution, InstallConflict
from claude_agents.output import user_confirm


class ClickConflictPrompt(ConflictPrompt):
    """Production implementation that asks on the terminal.

    Ctrl-C or end of input at the prompt aborts the remaining installs.
    """

    def resolve(self, conflict: InstallConflict) -> ConflictResolution:
        prompt = (
            f"Agent '{conflict.agent.identifier}' already exists at {conflict.destination}. "
            "Overwrite?"
        )
        try:
            confirmed = user_confirm(prompt)
        except click.Abort:
            return "abort"
        if confirmed:
            return "overwrite"
        return "skip"
