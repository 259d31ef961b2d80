"""Raw listing of every stored record, tagged with its key."""

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.auth import records_auth
from api.dependencies import get_log, get_record_store
from storage.record_store import RecordStore

router = APIRouter()


@router.get("/records", dependencies=[Depends(records_auth)])
def list_records(
    records: RecordStore = Depends(get_record_store),
    log: structlog.BoundLogger = Depends(get_log),
):
    try:
        stored, skipped = records.fetch_raw()
    except Exception as e:
        log.error("records_listing_failed", error_type=type(e).__name__, error=str(e))
        return JSONResponse(status_code=500, content={"error": str(e)})

    if not stored and not skipped:
        return JSONResponse(status_code=404, content={"error": "No objects found in the bucket."})

    log.info("records_served", count=len(stored), skipped=len(skipped))
    return JSONResponse(content=[record.to_dict() for record in stored])
