"""Catalog source gateway ABC.

A catalog source enumerates raw agent documents. How the bytes are packaged
(bundled package data, a directory on disk, an in-memory dict) is the
implementation's concern; the parser only sees ``CatalogDocument`` values.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogDocument:
    """A raw agent document.

    Attributes:
        identifier: Agent identifier derived from the document stem.
        raw: Undecoded document bytes.
        origin: Human-readable identity for diagnostics (usually a path).
    """

    identifier: str
    raw: bytes
    origin: str


class CatalogSource(ABC):
    """Abstract gateway for reading agent documents."""

    @abstractmethod
    def list_documents(self) -> list[CatalogDocument]:
        """Read every agent document in the source.

        Returns:
            All documents, in no particular order.

        Raises:
            AgentFileNotFoundError: If the source location does not exist.
        """
        ...
