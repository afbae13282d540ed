"""Fake CatalogSource implementation for testing.

FakeCatalogSource is an in-memory implementation backed by a list of
(identifier, text) pairs. It counts physical reads so tests can observe
caching behavior.
"""

from claude_agents.gateway.catalog_source.abc import CatalogDocument, CatalogSource


class FakeCatalogSource(CatalogSource):
    """In-memory fake implementation backed by a list.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        documents: list[tuple[str, str]] | None = None,
        raw_documents: list[CatalogDocument] | None = None,
    ) -> None:
        """Create FakeCatalogSource with pre-seeded documents.

        Args:
            documents: (identifier, text) pairs; text is UTF-8 encoded and the
                origin is reported as "fake:<identifier>.md".
            raw_documents: Fully specified documents, appended after ``documents``.
        """
        self._documents: list[CatalogDocument] = [
            CatalogDocument(
                identifier=identifier,
                raw=text.encode("utf-8"),
                origin=f"fake:{identifier}.md",
            )
            for identifier, text in (documents or [])
        ]
        self._documents.extend(raw_documents or [])
        self._read_count = 0

    @property
    def read_count(self) -> int:
        """Number of times list_documents() was called.

        This property is for test assertions only.
        """
        return self._read_count

    def list_documents(self) -> list[CatalogDocument]:
        self._read_count += 1
        return list(self._documents)
