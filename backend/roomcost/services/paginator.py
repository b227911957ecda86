"""Sequential retrieval of every record in a paginated catalog collection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from roomcost.exceptions import PaginationExhaustedError

if TYPE_CHECKING:
    from roomcost.services.catalog_client import CatalogClient

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100
DEFAULT_MAX_PAGES = 1000


class PaginatedFetcher:
    """Walks a paginated collection page by page into one list.

    Pages are requested one at a time starting at page 1.  The loop stops
    only when the current page number reaches the ``pageCount`` the catalog
    reports; an empty page is not treated as the end.  ``max_pages`` bounds
    the walk so inconsistent metadata raises instead of looping forever.
    """

    def __init__(
        self,
        client: CatalogClient,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> None:
        if page_size < 1:
            msg = f"page_size must be positive, got {page_size}"
            raise ValueError(msg)
        if max_pages < 1:
            msg = f"max_pages must be positive, got {max_pages}"
            raise ValueError(msg)
        self._client = client
        self._page_size = page_size
        self._max_pages = max_pages

    def fetch_all(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Return every record of ``endpoint`` in page order.

        Raises
        ------
        CatalogFetchError
            If any page fails; records from earlier pages are discarded.
        PaginationExhaustedError
            If ``max_pages`` pages were fetched without reaching the
            reported page count.
        """
        records: list[dict[str, Any]] = []
        for page in range(1, self._max_pages + 1):
            result = self._client.get_page(
                endpoint, page=page, page_size=self._page_size, params=params
            )
            records.extend(result.data)
            page_count = result.pagination.page_count
            logger.debug(
                "%s page %d/%d: %d records",
                endpoint, page, page_count, len(result.data),
            )
            if page >= page_count:
                logger.info("Fetched %d records from %s", len(records), endpoint)
                return records

        msg = (
            f"{endpoint} still reported more pages after {self._max_pages} "
            f"requests of {self._page_size} records"
        )
        raise PaginationExhaustedError(msg)
