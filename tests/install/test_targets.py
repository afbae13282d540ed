"""Tests for install target resolution."""

from pathlib import Path

import pytest

from claude_agents.install.targets import InstallTarget, RealTargetResolver


def test_global_target_uses_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLAUDE_CONFIG_DIR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    resolved = RealTargetResolver().resolve(InstallTarget.GLOBAL)

    assert resolved == tmp_path / ".claude" / "agents"


def test_global_target_honors_claude_config_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config_dir = tmp_path / "claude-config"
    monkeypatch.setenv("CLAUDE_CONFIG_DIR", str(config_dir))

    resolved = RealTargetResolver().resolve(InstallTarget.GLOBAL)

    assert resolved == config_dir.resolve() / "agents"


def test_local_target_is_resolved_at_use(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    resolver = RealTargetResolver()
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()

    monkeypatch.chdir(first)
    assert resolver.resolve(InstallTarget.LOCAL) == first.resolve() / ".claude" / "agents"

    monkeypatch.chdir(second)
    assert resolver.resolve(InstallTarget.LOCAL) == second.resolve() / ".claude" / "agents"


def test_display_names() -> None:
    assert InstallTarget.GLOBAL.display_name == "global"
    assert InstallTarget.LOCAL.display_name == "local"
