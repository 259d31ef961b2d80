"""On-demand SMHI ingestion."""

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_ingester, get_log
from ingest.smhi_client import UpstreamUnavailable
from ingest.smhi_ingester import SmhiIngester
from storage.object_store import ObjectWriteError

router = APIRouter(prefix="/ingest")


@router.post("/smhi")
def ingest_smhi(
    ingester: SmhiIngester = Depends(get_ingester),
    log: structlog.BoundLogger = Depends(get_log),
):
    """Fetch the latest SMHI observation and store it. Nothing is written on failure."""
    try:
        key = ingester.ingest_once()
    except UpstreamUnavailable as e:
        return JSONResponse(status_code=500, content={"error": str(e)})
    except ObjectWriteError as e:
        log.error("smhi_write_failed", error=str(e))
        return JSONResponse(status_code=500, content={"error": "Unexpected error occurred"})

    return {"message": "SMHI data successfully written to S3", "key": str(key)}
