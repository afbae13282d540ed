"""Install targets and their resolution to directories."""

import os
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path


class InstallTarget(Enum):
    """Where agents are installed.

    GLOBAL: the per-user Claude config directory (~/.claude/agents)
    LOCAL: the current project (./.claude/agents)
    """

    GLOBAL = "global"
    LOCAL = "local"

    @property
    def display_name(self) -> str:
        return self.value


class TargetResolver(ABC):
    """Resolves an InstallTarget to an absolute agents directory."""

    @abstractmethod
    def resolve(self, target: InstallTarget) -> Path:
        """Return the agents directory for ``target``.

        Called on every use; implementations must not cache.
        """
        ...


class RealTargetResolver(TargetResolver):
    """Resolves against the live environment.

    The global directory honors ``CLAUDE_CONFIG_DIR`` when set, matching how
    Claude Code locates its configuration.
    """

    def resolve(self, target: InstallTarget) -> Path:
        if target is InstallTarget.GLOBAL:
            config_dir = os.environ.get("CLAUDE_CONFIG_DIR")
            if config_dir:
                return Path(config_dir).expanduser().resolve() / "agents"
            return Path.home() / ".claude" / "agents"
        return Path.cwd().resolve() / ".claude" / "agents"


class FakeTargetResolver(TargetResolver):
    """Resolves to fixed directories supplied at construction.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, global_dir: Path, local_dir: Path) -> None:
        self._dirs = {InstallTarget.GLOBAL: global_dir, InstallTarget.LOCAL: local_dir}

    def resolve(self, target: InstallTarget) -> Path:
        return self._dirs[target]
