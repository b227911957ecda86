"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from roomcost.engine import ENGINE_VERSION
from roomcost.exceptions import (
    AggregationError,
    BomImportError,
    ConfigurationError,
    RoomCostError,
)

if TYPE_CHECKING:
    from roomcost.services.pipeline import PipelineResult, SummaryPipeline

logger = logging.getLogger(__name__)


def create_app(*, pipeline: SummaryPipeline | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    pipeline
        Optional pre-built pipeline for dependency injection (e.g. tests).
        If not provided, one is created from environment variables on the
        first request that needs the catalog.
    """
    app = FastAPI(title="Room Cost Summary", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.pipeline = pipeline

    def _get_pipeline() -> SummaryPipeline:
        pl: SummaryPipeline | None = app.state.pipeline
        if pl is not None:
            return pl
        from roomcost.api.deps import create_pipeline

        try:
            pl = create_pipeline()
        except ConfigurationError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        app.state.pipeline = pl
        return pl

    def _run_summary() -> PipelineResult:
        pl = _get_pipeline()
        try:
            return pl.run()
        except AggregationError as exc:
            logger.exception("Room cost aggregation failed")
            raise HTTPException(
                status_code=502,
                detail=f"Room cost aggregation failed: {exc}",
            ) from exc
        except RoomCostError as exc:
            logger.exception("Unexpected error during room cost aggregation")
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/room-costs
    # ------------------------------------------------------------------

    @app.get("/api/room-costs")
    def room_costs() -> list[dict[str, Any]]:
        return _run_summary().summary.to_records()

    # ------------------------------------------------------------------
    # GET /api/room-costs/summary
    # ------------------------------------------------------------------

    @app.get("/api/room-costs/summary")
    def room_costs_summary() -> dict[str, Any]:
        result = _run_summary()
        summary = result.summary
        return {
            "summary": summary.model_dump(mode="json"),
            "grand_total": summary.grand_total,
            "summary_dict": summary.to_summary_dict(),
            "export_dict": summary.to_export_dict(),
            "items_fetched": result.items_fetched,
            "legacy_fetched": result.legacy_fetched,
            "processing_time_seconds": result.processing_time_seconds,
        }

    # ------------------------------------------------------------------
    # POST /api/bom/import
    # ------------------------------------------------------------------

    @app.post("/api/bom/import")
    async def import_bom(file: UploadFile) -> dict[str, Any]:
        from roomcost.services.bom_import import parse_bom_workbook

        filename = file.filename or ""
        if not filename.lower().endswith(".xlsx"):
            raise HTTPException(
                status_code=400,
                detail="Invalid file type. Only .xlsx workbooks are accepted.",
            )

        content = await file.read()
        try:
            parsed = parse_bom_workbook(content)
        except BomImportError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        pl = _get_pipeline()
        try:
            created = pl.import_items(parsed.drafts)
        except RoomCostError as exc:
            logger.exception("BOM import failed")
            raise HTTPException(
                status_code=502,
                detail=f"BOM import failed: {exc}",
            ) from exc

        return {
            "sheet_name": parsed.sheet_name,
            "rows_parsed": len(parsed.drafts),
            "items_created": created,
            "skipped_rows": parsed.skipped_rows,
        }

    return app
