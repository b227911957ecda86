"""Factory functions for creating pre-configured SummaryPipeline instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roomcost.config import CatalogSettings
from roomcost.engine import SummaryEngine
from roomcost.services.catalog_client import CatalogClient
from roomcost.services.paginator import PaginatedFetcher
from roomcost.services.pipeline import SummaryPipeline

if TYPE_CHECKING:
    import httpx


def create_default_pipeline(
    settings: CatalogSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> SummaryPipeline:
    """Create a SummaryPipeline wired to the configured catalog.

    This is the recommended way to create a pipeline for typical usage.
    Settings default to ``CatalogSettings.from_env()``.

    Returns:
        A SummaryPipeline ready to run.

    Raises:
        ConfigurationError: If settings are read from the environment and
            ROOMCOST_CATALOG_URL is missing.

    Example::

        from roomcost import create_default_pipeline

        result = create_default_pipeline().run()
        result.summary.to_records()
    """
    if settings is None:
        settings = CatalogSettings.from_env()

    client = CatalogClient(
        settings.base_url,
        token=settings.token,
        timeout=settings.timeout_seconds,
        transport=transport,
    )
    fetcher = PaginatedFetcher(
        client,
        page_size=settings.page_size,
        max_pages=settings.max_pages,
    )
    return SummaryPipeline(
        client=client,
        fetcher=fetcher,
        engine=SummaryEngine(),
        bom_endpoint=settings.bom_endpoint,
        legacy_endpoint=settings.legacy_endpoint,
    )
