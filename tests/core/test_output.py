"""Tests for output helpers and the click-backed conflict prompt."""

from io import StringIO
from pathlib import Path
from unittest.mock import patch

import click

from claude_agents.catalog.models import Agent
from claude_agents.gateway.conflict_prompt.real import ClickConflictPrompt
from claude_agents.install.models import InstallConflict
from claude_agents.output import user_confirm


def _conflict() -> InstallConflict:
    agent = Agent(
        identifier="alpha",
        name="alpha",
        description="Alpha agent",
        tools=frozenset(),
        model=None,
        integrations=frozenset(),
        content="body",
    )
    return InstallConflict(agent=agent, destination=Path("/agents/alpha.md"))


def test_user_confirm_flushes_stderr_before_prompting() -> None:
    flush_called_before_confirm = False

    def track_flush() -> None:
        nonlocal flush_called_before_confirm
        flush_called_before_confirm = True

    def mock_confirm(prompt: str, default: bool, err: bool) -> bool:
        assert flush_called_before_confirm, "stderr.flush() must be called before click.confirm()"
        return True

    with (
        patch("sys.stderr", new_callable=StringIO) as mock_stderr,
        patch("claude_agents.output.click.confirm", side_effect=mock_confirm),
    ):
        mock_stderr.flush = track_flush  # type: ignore[method-assign]
        result = user_confirm("Continue?")

    assert result is True


def test_user_confirm_defaults_to_no_on_stderr() -> None:
    with patch("claude_agents.output.click.confirm", return_value=False) as mock_confirm:
        assert user_confirm("Are you sure?") is False

    mock_confirm.assert_called_once_with("Are you sure?", default=False, err=True)


def test_click_conflict_prompt_overwrite() -> None:
    with patch(
        "claude_agents.gateway.conflict_prompt.real.user_confirm", return_value=True
    ) as mock_confirm:
        assert ClickConflictPrompt().resolve(_conflict()) == "overwrite"

    prompt = mock_confirm.call_args.args[0]
    assert "alpha" in prompt
    assert "/agents/alpha.md" in prompt


def test_click_conflict_prompt_skip() -> None:
    with patch("claude_agents.gateway.conflict_prompt.real.user_confirm", return_value=False):
        assert ClickConflictPrompt().resolve(_conflict()) == "skip"


def test_click_conflict_prompt_abort() -> None:
    with patch(
        "claude_agents.gateway.conflict_prompt.real.user_confirm", side_effect=click.Abort()
    ):
        assert ClickConflictPrompt().resolve(_conflict()) == "abort"
