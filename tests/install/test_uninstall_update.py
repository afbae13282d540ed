"""Tests for InstallService list_installed, uninstall and update."""

from dataclasses import replace
from pathlib import Path

from claude_agents.catalog.models import Agent
from claude_agents.errors import TargetNotFoundError
from claude_agents.gateway.conflict_prompt.fake import FakeConflictPrompt
from claude_agents.install.models import (
    Failed,
    Installed,
    InstallResult,
    NotInstalled,
    Overwritten,
    Removed,
    Skipped,
    summarize_results,
)
from claude_agents.install.service import InstallService
from claude_agents.install.targets import FakeTargetResolver, InstallTarget


def _agent(identifier: str, content: str) -> Agent:
    return Agent(
        identifier=identifier,
        name=identifier,
        description=f"{identifier} agent",
        tools=frozenset(),
        model=None,
        integrations=frozenset(),
        content=content,
    )


def _service(target_dir: Path) -> InstallService:
    return InstallService(
        target_resolver=FakeTargetResolver(global_dir=target_dir, local_dir=target_dir),
        conflict_prompt=FakeConflictPrompt(),
    )


def test_list_installed(tmp_path: Path) -> None:
    target_dir = tmp_path / "agents"
    target_dir.mkdir()
    (target_dir / "zeta.md").write_text("z", encoding="utf-8")
    (target_dir / "alpha.md").write_text("a", encoding="utf-8")
    (target_dir / "README.txt").write_text("x", encoding="utf-8")
    (target_dir / "nested.md").mkdir()

    assert _service(target_dir).list_installed(InstallTarget.GLOBAL) == ["alpha", "zeta"]


def test_list_installed_missing_directory(tmp_path: Path) -> None:
    assert _service(tmp_path / "missing").list_installed(InstallTarget.GLOBAL) == []


def test_uninstall(tmp_path: Path) -> None:
    target_dir = tmp_path / "agents"
    target_dir.mkdir()
    (target_dir / "alpha.md").write_text("a", encoding="utf-8")

    results = _service(target_dir).uninstall(["alpha", "beta"], InstallTarget.LOCAL)

    assert [(result.identifier, result.status) for result in results] == [
        ("alpha", Removed()),
        ("beta", NotInstalled()),
    ]
    assert not (target_dir / "alpha.md").exists()


def test_uninstall_missing_target_directory(tmp_path: Path) -> None:
    results = _service(tmp_path / "missing").uninstall(["alpha"], InstallTarget.GLOBAL)

    assert isinstance(results[0].status, Failed)
    assert isinstance(results[0].status.error, TargetNotFoundError)


def test_update_rewrites_only_changed_installed_agents(tmp_path: Path) -> None:
    target_dir = tmp_path / "agents"
    service = _service(target_dir)
    alpha = _agent("alpha", "alpha v1\n")
    beta = _agent("beta", "beta v1\n")
    service.install([alpha, beta], InstallTarget.GLOBAL, overwrite=False, interactive=False)
    (target_dir / "custom.md").write_text("my own agent\n", encoding="utf-8")

    catalog = [replace(alpha, content="alpha v2\n"), beta, _agent("gamma", "gamma\n")]
    results = service.update(catalog, InstallTarget.GLOBAL)

    assert [(result.agent.identifier, result.status) for result in results] == [
        ("alpha", Overwritten()),
        ("beta", Skipped("up to date")),
    ]
    assert (target_dir / "alpha.md").read_text(encoding="utf-8") == "alpha v2\n"
    assert (target_dir / "custom.md").read_text(encoding="utf-8") == "my own agent\n"
    assert not (target_dir / "gamma.md").exists()


def test_update_with_nothing_installed(tmp_path: Path) -> None:
    results = _service(tmp_path / "agents").update([_agent("alpha", "a")], InstallTarget.GLOBAL)

    assert results == []


def test_summarize_results() -> None:
    agent = _agent("alpha", "a")
    results = [
        InstallResult(agent=agent, status=Installed()),
        InstallResult(agent=agent, status=Installed()),
        InstallResult(agent=agent, status=Overwritten()),
        InstallResult(agent=agent, status=Skipped("already exists")),
        InstallResult(agent=agent, status=Failed(TargetNotFoundError(Path("/x")))),
    ]

    summary = summarize_results(results)

    assert (summary.installed, summary.overwritten, summary.skipped, summary.failed) == (2, 1, 1, 1)
    assert summary.has_failures
