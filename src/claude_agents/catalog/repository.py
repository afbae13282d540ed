"""Query layer over the agent catalog."""

from claude_agents.catalog.models import Agent
from claude_agents.catalog.parser import AgentParser


class AgentRepository:
    """Read-only queries over a cached agent catalog.

    Every query loads through the parser (which serializes access) and then
    filters in memory. Results preserve catalog order (sorted by identifier).

    Example:
        repository = AgentRepository(AgentParser(BundledCatalogSource()))
        architect = repository.get_agent("swift-architect")
    """

    def __init__(self, parser: AgentParser) -> None:
        self._parser = parser

    def load_agents(self) -> list[Agent]:
        return list(self._parser.load_all())

    def get_agent(self, identifier: str) -> Agent | None:
        return self._parser.find_by_identifier(identifier)

    def by_tool(self, tool: str) -> list[Agent]:
        """Agents whose tool set contains ``tool`` exactly."""
        return [agent for agent in self._parser.load_all() if tool in agent.tools]

    def by_model(self, model: str) -> list[Agent]:
        """Agents whose model matches ``model``, ignoring case."""
        wanted = model.lower()
        return [
            agent
            for agent in self._parser.load_all()
            if agent.model is not None and agent.model.lower() == wanted
        ]

    def by_mcp_server(self, server: str) -> list[Agent]:
        """Agents that require the MCP server ``server``."""
        return [agent for agent in self._parser.load_all() if server in agent.integrations]

    def search(self, query: str) -> list[Agent]:
        """Case-insensitive substring search over identifier, name and description."""
        needle = query.lower()
        return [
            agent
            for agent in self._parser.load_all()
            if needle in agent.identifier.lower()
            or needle in agent.name.lower()
            or needle in agent.description.lower()
        ]

    def all_tools(self) -> set[str]:
        return {tool for agent in self._parser.load_all() for tool in agent.tools}

    def all_models(self) -> set[str]:
        return {agent.model for agent in self._parser.load_all() if agent.model is not None}

    def all_mcp_servers(self) -> set[str]:
        return {server for agent in self._parser.load_all() for server in agent.integrations}

    def clear_cache(self) -> None:
        self._parser.clear_cache()
