"""User configuration for claude-agents.

Example ``~/.claude-agents/config.toml``:

    [catalog]
    # Read agents from this directory instead of the bundled set
    directory = "~/src/my-agents"

    [install]
    # "global" (~/.claude/agents) or "local" (./.claude/agents)
    default_target = "local"
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from claude_agents.install.targets import InstallTarget

CONFIG_DIR_ENV_VAR = "CLAUDE_AGENTS_CONFIG_DIR"


@dataclass(frozen=True)
class AgentsConfig:
    """In-memory representation of config.toml."""

    catalog_dir: Path | None  # None = bundled agents
    default_target: InstallTarget


def default_config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".claude-agents"


def load_config(config_dir: Path) -> AgentsConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Raises:
        ValueError: If ``install.default_target`` is not "global" or "local".
    """
    cfg_path = config_dir / "config.toml"
    if not cfg_path.exists():
        return AgentsConfig(catalog_dir=None, default_target=InstallTarget.GLOBAL)

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))

    catalog_dir = data.get("catalog", {}).get("directory")
    if catalog_dir is not None:
        catalog_dir = Path(str(catalog_dir)).expanduser()

    target_value = str(data.get("install", {}).get("default_target", "global"))
    try:
        default_target = InstallTarget(target_value)
    except ValueError:
        raise ValueError(
            f"{cfg_path}: install.default_target must be 'global' or 'local', "
            f"got {target_value!r}"
        ) from None

    return AgentsConfig(catalog_dir=catalog_dir, default_target=default_target)
