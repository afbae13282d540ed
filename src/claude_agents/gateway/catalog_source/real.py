"""Filesystem-backed catalog sources."""

import logging
from functools import cache
from pathlib import Path

from claude_agents.errors import AgentFileNotFoundError, DocumentReadError
from claude_agents.gateway.catalog_source.abc import CatalogDocument, CatalogSource

logger = logging.getLogger(__name__)


@cache
def get_bundled_agents_dir() -> Path:
    """Get path to the agent documents shipped as package data."""
    # __file__ is .../claude_agents/gateway/catalog_source/real.py
    return Path(__file__).parent.parent.parent / "data" / "agents"


class DirectoryCatalogSource(CatalogSource):
    """Reads ``*.md`` documents from a directory tree.

    Nested directories are scanned too, so two files with the same stem in
    different subdirectories produce a duplicate identifier for the parser
    to report.
    """

    def __init__(self, agents_dir: Path) -> None:
        self._agents_dir = agents_dir

    @property
    def agents_dir(self) -> Path:
        return self._agents_dir

    def list_documents(self) -> list[CatalogDocument]:
        if not self._agents_dir.is_dir():
            raise AgentFileNotFoundError(self._agents_dir)

        documents: list[CatalogDocument] = []
        for md_file in sorted(self._agents_dir.rglob("*.md")):
            if not md_file.is_file():
                continue
            try:
                raw = md_file.read_bytes()
            except OSError as e:
                raise DocumentReadError(str(md_file), e) from e
            documents.append(
                CatalogDocument(identifier=md_file.stem, raw=raw, origin=str(md_file))
            )
        logger.debug("Read %d agent documents from %s", len(documents), self._agents_dir)
        return documents


class BundledCatalogSource(DirectoryCatalogSource):
    """Catalog of agents bundled with the claude-agents package."""

    def __init__(self) -> None:
        super().__init__(get_bundled_agents_dir())
