"""Fake ConflictPrompt implementation for testing."""

from claude_agents.gateway.conflict_prompt.abc import ConflictPrompt
from claude_agents.install.models import ConflictResolution, InstallConflict


class FakeConflictPrompt(ConflictPrompt):
    """Answers conflicts from a fixed table and records every question.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        answers: dict[str, ConflictResolution] | None = None,
        default: ConflictResolution = "skip",
    ) -> None:
        """Create FakeConflictPrompt.

        Args:
            answers: Resolution per agent identifier.
            default: Resolution for identifiers not in ``answers``.
        """
        self._answers = answers if answers is not None else {}
        self._default = default
        self._conflicts: list[InstallConflict] = []

    @property
    def conflicts(self) -> list[InstallConflict]:
        """Conflicts presented so far, in order.

        This property is for test assertions only.
        """
        return list(self._conflicts)

    def resolve(self, conflict: InstallConflict) -> ConflictResolution:
        self._conflicts.append(conflict)
        return self._answers.get(conflict.agent.identifier, self._default)
