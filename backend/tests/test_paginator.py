"""Tests for the paginated fetcher."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from roomcost.exceptions import (
    AggregationError,
    CatalogFetchError,
    PaginationExhaustedError,
)
from roomcost.services.catalog_client import CatalogClient
from roomcost.services.paginator import PaginatedFetcher

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


class FakeCatalog:
    """Serves fixed pages and records the page numbers requested."""

    def __init__(self, pages: list[list[dict[str, Any]]], page_count: int | None = None) -> None:
        self.pages = pages
        self.page_count = len(pages) if page_count is None else page_count
        self.requested: list[int] = []
        self.fail_on: int | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        page = int(request.url.params["pagination[page]"])
        self.requested.append(page)
        if page == self.fail_on:
            return httpx.Response(503)
        data = self.pages[page - 1] if page <= len(self.pages) else []
        return httpx.Response(
            200,
            json={
                "data": data,
                "meta": {"pagination": {"page": page, "pageCount": self.page_count}},
            },
        )


def _fetcher(catalog: FakeCatalog, **kwargs: Any) -> PaginatedFetcher:
    client = CatalogClient("https://catalog.test/api", transport=httpx.MockTransport(catalog))
    return PaginatedFetcher(client, **kwargs)


def _records(start: int, count: int) -> list[dict[str, Any]]:
    return [{"id": i} for i in range(start, start + count)]


class TestFetchAll:
    def test_three_pages_three_requests(self) -> None:
        catalog = FakeCatalog([_records(1, 2), _records(3, 2), _records(5, 1)])
        result = _fetcher(catalog).fetch_all("/items")
        assert catalog.requested == [1, 2, 3]
        assert len(result) == 5
        assert [r["id"] for r in result] == [1, 2, 3, 4, 5]

    def test_empty_middle_page_does_not_stop(self) -> None:
        catalog = FakeCatalog([_records(1, 2), [], _records(3, 1)])
        result = _fetcher(catalog).fetch_all("/items")
        assert catalog.requested == [1, 2, 3]
        assert len(result) == 3

    def test_zero_page_count_stops_after_first_page(self) -> None:
        catalog = FakeCatalog([[]], page_count=0)
        result = _fetcher(catalog).fetch_all("/items")
        assert catalog.requested == [1]
        assert result == []

    def test_page_size_sent(self) -> None:
        sizes: list[str] = []
        catalog = FakeCatalog([_records(1, 1)])

        def handler(request: httpx.Request) -> httpx.Response:
            sizes.append(request.url.params["pagination[pageSize]"])
            return catalog(request)

        client = CatalogClient("https://catalog.test/api", transport=httpx.MockTransport(handler))
        PaginatedFetcher(client, page_size=25).fetch_all("/items")
        assert sizes == ["25"]

    def test_failure_aborts_whole_fetch(self) -> None:
        catalog = FakeCatalog([_records(1, 2), _records(3, 2), _records(5, 2)])
        catalog.fail_on = 2
        with pytest.raises(CatalogFetchError):
            _fetcher(catalog).fetch_all("/items")
        assert catalog.requested == [1, 2]

    def test_unreachable_page_count_raises_exhausted(self) -> None:
        catalog = FakeCatalog([_records(1, 1)], page_count=10_000)
        with pytest.raises(PaginationExhaustedError):
            _fetcher(catalog, max_pages=5).fetch_all("/items")
        assert catalog.requested == [1, 2, 3, 4, 5]

    def test_errors_are_aggregation_errors(self) -> None:
        assert issubclass(CatalogFetchError, AggregationError)
        assert issubclass(PaginationExhaustedError, AggregationError)

    @pytest.mark.parametrize("kwargs", [{"page_size": 0}, {"max_pages": 0}])
    def test_invalid_bounds_rejected(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            _fetcher(FakeCatalog([]), **kwargs)
