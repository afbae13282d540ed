"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from claude_agents.catalog.parser import AgentParser
from claude_agents.catalog.repository import AgentRepository
from claude_agents.config import AgentsConfig, default_config_dir, load_config
from claude_agents.gateway.catalog_source.abc import CatalogSource
from claude_agents.gateway.catalog_source.fake import FakeCatalogSource
from claude_agents.gateway.catalog_source.real import BundledCatalogSource, DirectoryCatalogSource
from claude_agents.gateway.conflict_prompt.abc import ConflictPrompt
from claude_agents.gateway.conflict_prompt.fake import FakeConflictPrompt
from claude_agents.gateway.conflict_prompt.real import ClickConflictPrompt
from claude_agents.install.service import InstallService
from claude_agents.install.targets import FakeTargetResolver, InstallTarget, RealTargetResolver


@dataclass(frozen=True)
class AgentsContext:
    """Immutable context holding all dependencies for claude-agents commands.

    Created at CLI entry point and passed to commands as ``ctx.obj``.
    """

    config: AgentsConfig
    repository: AgentRepository
    installer: InstallService

    @staticmethod
    def for_test(
        *,
        source: CatalogSource | None = None,
        conflict_prompt: ConflictPrompt | None = None,
        global_dir: Path,
        local_dir: Path,
        default_target: InstallTarget = InstallTarget.GLOBAL,
    ) -> "AgentsContext":
        """Create a context backed by fakes.

        Args:
            source: Catalog source; defaults to an empty FakeCatalogSource.
            conflict_prompt: Defaults to a FakeConflictPrompt that always skips.
            global_dir: Directory used for InstallTarget.GLOBAL.
            local_dir: Directory used for InstallTarget.LOCAL.
            default_target: Target used when no --global/--local flag is given.
        """
        resolved_source = source if source is not None else FakeCatalogSource()
        resolved_prompt = conflict_prompt if conflict_prompt is not None else FakeConflictPrompt()
        return AgentsContext(
            config=AgentsConfig(catalog_dir=None, default_target=default_target),
            repository=AgentRepository(AgentParser(resolved_source)),
            installer=InstallService(
                target_resolver=FakeTargetResolver(global_dir=global_dir, local_dir=local_dir),
                conflict_prompt=resolved_prompt,
            ),
        )


def create_context() -> AgentsContext:
    """Create the production context from user configuration."""
    config = load_config(default_config_dir())

    source: CatalogSource
    if config.catalog_dir is not None:
        source = DirectoryCatalogSource(config.catalog_dir)
    else:
        source = BundledCatalogSource()

    return AgentsContext(
        config=config,
        repository=AgentRepository(AgentParser(source)),
        installer=InstallService(
            target_resolver=RealTargetResolver(),
            conflict_prompt=ClickConflictPrompt(),
        ),
    )
