"""Dashboard views: IoT vs. latest SMHI comparison, and the combined graph series."""

import asyncio

import structlog
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from api.auth import compare_auth
from api.dependencies import get_log, get_record_store, get_settings
from config import Settings
from processor.aligner import combine_by_position, compare_against_latest
from storage.record_store import FetchResult, RecordStore

router = APIRouter()


async def load_series(records: RecordStore, settings: Settings) -> tuple[FetchResult, FetchResult]:
    """Fetch the IoT and SMHI partitions concurrently."""
    iot, smhi = await asyncio.gather(
        asyncio.to_thread(records.fetch_all_in_partition, settings.iot_prefix),
        asyncio.to_thread(records.fetch_all_in_partition, settings.smhi_prefix),
    )
    return iot, smhi


def cors_headers(request: Request) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": request.headers.get("origin", "*"),
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "*",
    }


@router.get("/compare", dependencies=[Depends(compare_auth)])
async def compare(
    records: RecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
    log: structlog.BoundLogger = Depends(get_log),
):
    """Every IoT reading against the most recent SMHI reading."""
    try:
        iot, smhi = await load_series(records, settings)
        rows = compare_against_latest(iot.observations, smhi.observations)
    except Exception as e:
        log.error("compare_failed", error_type=type(e).__name__, error=str(e))
        return JSONResponse(
            status_code=500,
            content={"error": "Unexpected error occurred", "details": str(e)},
        )

    log.info(
        "compare_served",
        rows=len(rows),
        iot_skipped=iot.skipped_count,
        smhi_skipped=smhi.skipped_count,
    )
    return JSONResponse(content=[row.to_dict() for row in rows])


@router.get("/combine")
async def combine(
    request: Request,
    records: RecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
    log: structlog.BoundLogger = Depends(get_log),
):
    """IoT and SMHI temperatures side by side for the graph, paired by position."""
    headers = cors_headers(request)
    try:
        iot, smhi = await load_series(records, settings)
        rows = combine_by_position(iot.observations, smhi.observations)
    except Exception as e:
        log.error("combine_failed", error_type=type(e).__name__, error=str(e))
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to process data", "details": str(e)},
            headers=headers,
        )

    log.info("combine_served", rows=len(rows), smhi_available=len(smhi.observations))
    return JSONResponse(content=[row.to_dict() for row in rows], headers=headers)


@router.options("/combine")
async def combine_preflight(request: Request):
    return Response(status_code=204, headers=cors_headers(request))
