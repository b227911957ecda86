"""Dependency injection for FastAPI endpoints."""

from __future__ import annotations

import logging

from roomcost.config import CatalogSettings, load_env_files
from roomcost.factory import create_default_pipeline
from roomcost.services.pipeline import SummaryPipeline

logger = logging.getLogger(__name__)


def create_pipeline() -> SummaryPipeline:
    """Create a SummaryPipeline with configuration from the environment.

    Loads ``.env`` files, then reads ROOMCOST_CATALOG_URL and the optional
    ROOMCOST_* settings.  Raises ConfigurationError if the URL is not set.
    """
    load_env_files()
    settings = CatalogSettings.from_env()
    logger.info(
        "Catalog at %s (page size %d, max %d pages)",
        settings.base_url, settings.page_size, settings.max_pages,
    )
    return create_default_pipeline(settings)
