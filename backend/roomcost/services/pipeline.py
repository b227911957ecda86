"""Summary pipeline — fetches catalog data and runs the SummaryEngine."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from roomcost.exceptions import CatalogFetchError
from roomcost.models.bom import BOMItem, LegacyRoomCost

if TYPE_CHECKING:
    from collections.abc import Iterable

    from roomcost.engine import SummaryEngine
    from roomcost.models.summary import CostSummary
    from roomcost.services.bom_import import BomDraft
    from roomcost.services.catalog_client import CatalogClient
    from roomcost.services.paginator import PaginatedFetcher

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class PipelineResult:
    """Result of one summary run."""

    summary: CostSummary
    items_fetched: int
    legacy_fetched: int
    processing_time_seconds: float


def _parse_records(
    model: type[M], records: list[dict[str, Any]], endpoint: str
) -> list[M]:
    parsed: list[M] = []
    for index, record in enumerate(records):
        try:
            parsed.append(model.model_validate(record))
        except ValidationError as exc:
            msg = f"Record {index} from {endpoint} is not a valid {model.__name__}: {exc}"
            raise CatalogFetchError(msg) from exc
    return parsed


class SummaryPipeline:
    """Orchestrates catalog fetch → SummaryEngine in a single call.

    Args:
        client: Catalog client used for item creation.
        fetcher: Paginated fetcher wrapping the same client.
        engine: The engine that computes the summary.
        bom_endpoint: Collection holding itemized BOM entries.
        legacy_endpoint: Collection holding published room totals, or None
            to summarize itemized data only.
    """

    def __init__(
        self,
        client: CatalogClient,
        fetcher: PaginatedFetcher,
        engine: SummaryEngine,
        bom_endpoint: str,
        legacy_endpoint: str | None = None,
    ) -> None:
        self._client = client
        self._fetcher = fetcher
        self._engine = engine
        self._bom_endpoint = bom_endpoint
        self._legacy_endpoint = legacy_endpoint

    def run(self) -> PipelineResult:
        """Fetch every BOM item and legacy total, then summarize.

        Raises
        ------
        CatalogFetchError
            If any page cannot be fetched or any record cannot be parsed.
        PaginationExhaustedError
            If either collection never reaches its reported last page.
        """
        start = time.monotonic()

        records = self._fetcher.fetch_all(self._bom_endpoint)
        items = _parse_records(BOMItem, records, self._bom_endpoint)

        legacy: list[LegacyRoomCost] = []
        if self._legacy_endpoint:
            legacy_records = self._fetcher.fetch_all(self._legacy_endpoint)
            legacy = _parse_records(LegacyRoomCost, legacy_records, self._legacy_endpoint)

        summary = self._engine.summarize(items, legacy)
        elapsed = time.monotonic() - start
        logger.info(
            "Summarized %d room types from %d items and %d legacy totals in %.2fs",
            len(summary.rooms), len(items), len(legacy), elapsed,
        )
        return PipelineResult(
            summary=summary,
            items_fetched=len(items),
            legacy_fetched=len(legacy),
            processing_time_seconds=elapsed,
        )

    def import_items(self, drafts: Iterable[BomDraft]) -> int:
        """Create each draft in the BOM collection and return the count.

        Creation stops at the first failure, which propagates as
        CatalogFetchError; rows created before it remain in the catalog.
        """
        created = 0
        for draft in drafts:
            self._client.create(self._bom_endpoint, draft.model_dump())
            created += 1
        logger.info("Imported %d BOM items into %s", created, self._bom_endpoint)
        return created
