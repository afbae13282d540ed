"""Sources of raw agent documents."""

from claude_agents.gateway.catalog_source.abc import CatalogDocument as CatalogDocument
from claude_agents.gateway.catalog_source.abc import CatalogSource as CatalogSource
from claude_agents.gateway.catalog_source.fake import FakeCatalogSource as FakeCatalogSource
from claude_agents.gateway.catalog_source.real import (
    BundledCatalogSource as BundledCatalogSource,
)
from claude_agents.gateway.catalog_source.real import (
    DirectoryCatalogSource as DirectoryCatalogSource,
)
