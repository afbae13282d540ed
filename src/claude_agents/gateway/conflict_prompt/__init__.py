"""Resolution of install conflicts."""

from claude_agents.gateway.conflict_prompt.abc import ConflictPrompt as ConflictPrompt
from claude_agents.gateway.conflict_prompt.fake import FakeConflictPrompt as FakeConflictPrompt
from claude_agents.gateway.conflict_prompt.real import ClickConflictPrompt as ClickConflictPrompt
