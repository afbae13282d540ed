"""Data models for agent installation."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from claude_agents.catalog.models import Agent
from claude_agents.errors import InstallError

ConflictResolution = Literal["overwrite", "skip", "abort"]


@dataclass(frozen=True)
class InstallConflict:
    """An agent whose destination file already exists."""

    agent: Agent
    destination: Path


@dataclass(frozen=True)
class Installed:
    pass


@dataclass(frozen=True)
class Overwritten:
    pass


@dataclass(frozen=True)
class Skipped:
    reason: str


@dataclass(frozen=True)
class Failed:
    error: InstallError


InstallStatus = Installed | Overwritten | Skipped | Failed


@dataclass(frozen=True)
class InstallResult:
    """Disposition of one requested agent."""

    agent: Agent
    status: InstallStatus


@dataclass(frozen=True)
class InstallSummary:
    """Per-disposition counts over a completed batch."""

    installed: int
    overwritten: int
    skipped: int
    failed: int

    @property
    def has_failures(self) -> bool:
        return self.failed > 0


def summarize_results(results: list[InstallResult]) -> InstallSummary:
    installed = overwritten = skipped = failed = 0
    for result in results:
        match result.status:
            case Installed():
                installed += 1
            case Overwritten():
                overwritten += 1
            case Skipped():
                skipped += 1
            case Failed():
                failed += 1
    return InstallSummary(
        installed=installed,
        overwritten=overwritten,
        skipped=skipped,
        failed=failed,
    )


@dataclass(frozen=True)
class Removed:
    pass


@dataclass(frozen=True)
class NotInstalled:
    pass


UninstallStatus = Removed | NotInstalled | Failed


@dataclass(frozen=True)
class UninstallResult:
    identifier: str
    status: UninstallStatus
