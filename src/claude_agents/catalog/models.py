"""Data models for the agent catalog."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Agent:
    """A parsed agent definition.

    Attributes:
        identifier: Document stem; unique within a catalog and used as the
            installed file name (``<identifier>.md``).
        name: Display name from frontmatter, defaults to identifier.
        description: Human-readable summary (required in frontmatter).
        tools: Tool names the agent may use.
        model: Model tier (e.g. "opus"), or None when unspecified.
        integrations: MCP servers the agent requires (frontmatter key ``mcp``).
        content: Body after the frontmatter, verbatim.
        origin: Where the document came from. Diagnostics only, not compared.
    """

    identifier: str
    name: str
    description: str
    tools: frozenset[str]
    model: str | None
    integrations: frozenset[str]
    content: str
    origin: str = field(default="", compare=False)
