"""Parse agent documents and cache the full catalog.

An agent document is markdown with YAML frontmatter:

    ---
    name: swift-architect
    description: Designs Swift module boundaries
    tools: Read, Edit, Bash
    model: opus
    mcp:
      - github
    ---
    You are a Swift architect...

Everything after the closing ``---`` line is the agent body and is kept
byte-for-byte, leading blank lines included.
"""

import logging
import threading
from collections.abc import Mapping

import yaml

from claude_agents.catalog.models import Agent
from claude_agents.errors import DuplicateAgentError, InvalidFormatError, MissingRequiredFieldError
from claude_agents.gateway.catalog_source.abc import CatalogDocument, CatalogSource

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"


def split_frontmatter(text: str) -> tuple[str, str] | None:
    """Split document text into (header, body).

    The header starts after a ``---`` first line and ends at the next ``---``
    line. Trailing whitespace on delimiter lines is tolerated.

    Returns:
        Tuple of (header_text, body_text), or None if the document has no
        complete frontmatter block.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return None

    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_DELIMITER:
            return "".join(lines[1:index]), "".join(lines[index + 1 :])
    return None


def _string_set(value: object, origin: str, field_name: str) -> frozenset[str]:
    """Normalize a comma-separated string or a YAML list into a set of names."""
    if value is None:
        return frozenset()
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, list):
        if any(isinstance(item, (list, dict)) for item in value):
            raise InvalidFormatError(origin, f"Field '{field_name}' entries must be scalars")
        items = [str(item) for item in value if item is not None]
    else:
        raise InvalidFormatError(origin, f"Field '{field_name}' must be a string or a list")
    return frozenset(item.strip() for item in items if item.strip())


def _optional_scalar(value: object, origin: str, field_name: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, (list, dict)):
        raise InvalidFormatError(origin, f"Field '{field_name}' must be a scalar")
    text = str(value).strip()
    return text or None


def build_agent(
    metadata: Mapping[str, object], body: str, *, identifier: str, origin: str
) -> Agent:
    """Build an Agent from parsed frontmatter.

    Recognized keys are ``name``, ``description``, ``tools``, ``model`` and
    ``mcp``. Other keys are ignored.
    """
    description = metadata.get("description")
    if description is None or (isinstance(description, str) and not description.strip()):
        raise MissingRequiredFieldError(origin, "description")
    if not isinstance(description, str):
        raise InvalidFormatError(origin, "Field 'description' must be a string")

    name = _optional_scalar(metadata.get("name"), origin, "name")

    return Agent(
        identifier=identifier,
        name=name if name is not None else identifier,
        description=description.strip(),
        tools=_string_set(metadata.get("tools"), origin, "tools"),
        model=_optional_scalar(metadata.get("model"), origin, "model"),
        integrations=_string_set(metadata.get("mcp"), origin, "mcp"),
        content=body,
        origin=origin,
    )


def parse_agent_document(document: CatalogDocument) -> Agent:
    """Parse a single raw document into an Agent.

    Raises:
        InvalidFormatError: Not UTF-8, no frontmatter block, invalid YAML,
            or a header that is not a mapping.
        MissingRequiredFieldError: ``description`` is absent or empty.
    """
    try:
        text = document.raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidFormatError(document.origin, f"Document is not valid UTF-8: {e}") from e

    parts = split_frontmatter(text)
    if parts is None:
        raise InvalidFormatError(document.origin, "No frontmatter found")
    header, body = parts

    try:
        metadata = yaml.safe_load(header)
    except yaml.YAMLError as e:
        raise InvalidFormatError(document.origin, f"Invalid YAML: {e}") from e

    # An empty header loads as None; report it as a missing description
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise InvalidFormatError(document.origin, "Frontmatter is not a valid YAML mapping")

    return build_agent(metadata, body, identifier=document.identifier, origin=document.origin)


class AgentParser:
    """Parses a catalog source and caches the result for the process lifetime.

    All operations hold a single lock, so concurrent callers share one
    physical load and never observe a partially built catalog. A load is
    all-or-nothing: if any document fails, the error propagates and the cache
    stays empty.
    """

    def __init__(self, source: CatalogSource) -> None:
        self._source = source
        self._lock = threading.Lock()
        self._agents: tuple[Agent, ...] | None = None
        self._by_identifier: dict[str, Agent] = {}

    def load_all(self) -> tuple[Agent, ...]:
        """Return every agent, sorted by identifier, loading on first use."""
        with self._lock:
            if self._agents is None:
                self._populate()
            assert self._agents is not None
            return self._agents

    def find_by_identifier(self, identifier: str) -> Agent | None:
        """Return the agent with the given identifier, or None if absent."""
        with self._lock:
            if self._agents is None:
                self._populate()
            return self._by_identifier.get(identifier)

    def clear_cache(self) -> None:
        """Discard cached agents; the next query re-reads the source."""
        with self._lock:
            self._agents = None
            self._by_identifier = {}

    def _populate(self) -> None:
        by_identifier: dict[str, Agent] = {}
        for document in self._source.list_documents():
            agent = parse_agent_document(document)
            existing = by_identifier.get(agent.identifier)
            if existing is not None:
                raise DuplicateAgentError(agent.identifier, existing.origin, agent.origin)
            by_identifier[agent.identifier] = agent

        self._agents = tuple(by_identifier[key] for key in sorted(by_identifier))
        self._by_identifier = by_identifier
        logger.debug("Loaded %d agents into catalog cache", len(self._agents))
