"""Install, update and remove agent files in a target directory.

Each installed agent is a single file ``<target-dir>/<identifier>.md``
containing exactly the agent body. Frontmatter is not re-emitted.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path

from claude_agents.catalog.models import Agent
from claude_agents.errors import (
    AlreadyExistsError,
    CopyFailedError,
    DirectoryCreationError,
    InstallError,
    PermissionDeniedError,
    RemoveFailedError,
    TargetNotFoundError,
)
from claude_agents.gateway.conflict_prompt.abc import ConflictPrompt
from claude_agents.install.models import (
    Failed,
    InstallConflict,
    Installed,
    InstallResult,
    NotInstalled,
    Overwritten,
    Removed,
    Skipped,
    UninstallResult,
)
from claude_agents.install.targets import InstallTarget, TargetResolver

logger = logging.getLogger(__name__)

AGENT_FILE_SUFFIX = ".md"
ABORTED_REASON = "aborted"


def agent_destination(target_dir: Path, identifier: str) -> Path:
    return target_dir / f"{identifier}{AGENT_FILE_SUFFIX}"


def _file_mode(destination: Path) -> int:
    """Permission bits for a rewritten ``destination``.

    An existing file keeps its mode; a new file gets ``0o666`` minus the umask,
    as ``open()`` would give it.
    """
    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_agent_file(destination: Path, content: str) -> None:
    """Replace ``destination`` with ``content``.

    Writes to a temporary sibling first and renames it into place, so a failed
    write never leaves a truncated agent file behind. The temporary file is
    created owner-only, so it is given the final mode before the rename.
    """
    mode = _file_mode(destination)
    fd, tmp_name = tempfile.mkstemp(
        dir=destination.parent, prefix=f".{destination.name}.", suffix=".tmp"
    )
    tmp_path = Path(tmp_name)
    try:
        os.chmod(tmp_path, mode)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.replace(tmp_path, destination)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


def _write_error(agent: Agent, destination: Path, error: OSError) -> InstallError:
    if isinstance(error, PermissionError):
        return PermissionDeniedError(destination)
    return CopyFailedError(agent.identifier, error)


class InstallService:
    """Writes agents into install targets.

    Holds no state between calls. Within one call agents are processed
    strictly in input order, one at a time.
    """

    def __init__(self, *, target_resolver: TargetResolver, conflict_prompt: ConflictPrompt) -> None:
        self._target_resolver = target_resolver
        self._conflict_prompt = conflict_prompt

    def target_dir(self, target: InstallTarget) -> Path:
        return self._target_resolver.resolve(target)

    def install(
        self,
        agents: list[Agent],
        target: InstallTarget,
        *,
        overwrite: bool,
        interactive: bool,
    ) -> list[InstallResult]:
        """Install agents into ``target``.

        Args:
            agents: Agents to install, processed in order
            target: Install target, resolved to a directory now
            overwrite: Replace existing files without asking
            interactive: Ask the conflict prompt about existing files when
                ``overwrite`` is False; otherwise existing files are skipped.
                An "abort" answer skips that agent and every later one.

        Returns:
            One result per agent, in input order.
        """
        return self.install_to_directory(
            agents,
            self._target_resolver.resolve(target),
            overwrite=overwrite,
            interactive=interactive,
        )

    def install_to_directory(
        self,
        agents: list[Agent],
        target_dir: Path,
        *,
        overwrite: bool,
        interactive: bool,
    ) -> list[InstallResult]:
        if not agents:
            return []

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            error = DirectoryCreationError(target_dir, e)
            logger.warning("%s", error)
            return [InstallResult(agent=agent, status=Failed(error)) for agent in agents]

        results: list[InstallResult] = []
        for position, agent in enumerate(agents):
            result = self._install_one(
                agent, target_dir, overwrite=overwrite, interactive=interactive
            )
            if result is None:
                logger.debug("Installation aborted at %s", agent.identifier)
                results.extend(
                    InstallResult(agent=remaining, status=Skipped(ABORTED_REASON))
                    for remaining in agents[position:]
                )
                break
            results.append(result)
        return results

    def _install_one(
        self, agent: Agent, target_dir: Path, *, overwrite: bool, interactive: bool
    ) -> InstallResult | None:
        """Install one agent; None means the operator aborted the batch."""
        destination = agent_destination(target_dir, agent.identifier)

        # A directory in the way cannot be replaced by a file rename
        if destination.is_dir():
            error: InstallError = AlreadyExistsError(agent.identifier, destination)
            logger.warning("%s", error)
            return InstallResult(agent=agent, status=Failed(error))

        exists = destination.exists() or destination.is_symlink()
        if exists and not overwrite:
            if not interactive:
                logger.debug("Skipping %s: %s already exists", agent.identifier, destination)
                return InstallResult(agent=agent, status=Skipped("already exists"))
            resolution = self._conflict_prompt.resolve(
                InstallConflict(agent=agent, destination=destination)
            )
            if resolution == "abort":
                return None
            if resolution == "skip":
                logger.debug("Skipping %s: user declined overwrite", agent.identifier)
                return InstallResult(agent=agent, status=Skipped("user declined"))

        try:
            write_agent_file(destination, agent.content)
        except OSError as e:
            error = _write_error(agent, destination, e)
            logger.warning("%s", error)
            return InstallResult(agent=agent, status=Failed(error))

        if exists:
            logger.debug("Overwrote %s", destination)
            return InstallResult(agent=agent, status=Overwritten())
        logger.debug("Installed %s", destination)
        return InstallResult(agent=agent, status=Installed())

    def list_installed(self, target: InstallTarget) -> list[str]:
        """Identifiers of agent files present in ``target``, sorted."""
        target_dir = self._target_resolver.resolve(target)
        if not target_dir.is_dir():
            return []
        return sorted(
            path.stem for path in target_dir.glob(f"*{AGENT_FILE_SUFFIX}") if path.is_file()
        )

    def uninstall(self, identifiers: list[str], target: InstallTarget) -> list[UninstallResult]:
        """Remove installed agent files, one result per identifier in input order."""
        target_dir = self._target_resolver.resolve(target)
        if not target_dir.is_dir():
            missing = TargetNotFoundError(target_dir)
            return [
                UninstallResult(identifier=identifier, status=Failed(missing))
                for identifier in identifiers
            ]

        results: list[UninstallResult] = []
        for identifier in identifiers:
            destination = agent_destination(target_dir, identifier)
            if not destination.is_file():
                results.append(UninstallResult(identifier=identifier, status=NotInstalled()))
                continue
            try:
                destination.unlink()
            except PermissionError:
                error: InstallError = PermissionDeniedError(destination)
                logger.warning("%s", error)
                results.append(UninstallResult(identifier=identifier, status=Failed(error)))
                continue
            except OSError as e:
                error = RemoveFailedError(identifier, e)
                logger.warning("%s", error)
                results.append(UninstallResult(identifier=identifier, status=Failed(error)))
                continue
            logger.debug("Removed %s", destination)
            results.append(UninstallResult(identifier=identifier, status=Removed()))
        return results

    def update(self, catalog: list[Agent], target: InstallTarget) -> list[InstallResult]:
        """Refresh installed agents whose content differs from the catalog.

        Only agents already installed in ``target`` are considered. Installed
        files with no catalog counterpart are left untouched.
        """
        target_dir = self._target_resolver.resolve(target)
        installed = set(self.list_installed(target))
        results: list[InstallResult] = []
        for agent in catalog:
            if agent.identifier not in installed:
                continue
            destination = agent_destination(target_dir, agent.identifier)
            try:
                current = destination.read_bytes()
                if current == agent.content.encode("utf-8"):
                    results.append(InstallResult(agent=agent, status=Skipped("up to date")))
                    continue
                write_agent_file(destination, agent.content)
            except OSError as e:
                error = _write_error(agent, destination, e)
                logger.warning("%s", error)
                results.append(InstallResult(agent=agent, status=Failed(error)))
                continue
            logger.debug("Updated %s", destination)
            results.append(InstallResult(agent=agent, status=Overwritten()))
        return results
