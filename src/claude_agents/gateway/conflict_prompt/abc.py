"""Conflict prompt gateway ABC.

Asks an operator how to handle an agent whose destination file already
exists. Injected into the install service so installs can run headless.
"""

from abc import ABC, abstractmethod

from claude_agents.install.models import ConflictResolution, InstallConflict


class ConflictPrompt(ABC):
    """Abstract gateway for resolving install conflicts."""

    @abstractmethod
    def resolve(self, conflict: InstallConflict) -> ConflictResolution:
        """Decide whether to overwrite the existing file.

        Args:
            conflict: The agent and its existing destination path

        Returns:
            "overwrite", "skip", or "abort" to stop the rest of the batch
        """
        ...
