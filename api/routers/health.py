"""Health and readiness check endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_object_store
from storage.object_store import ObjectStoreClient

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness probe: returns 200 if the process is alive."""
    return {"status": "ok"}


@router.get("/ready")
def ready(object_store: ObjectStoreClient = Depends(get_object_store)):
    """Readiness probe: checks that the bucket is reachable."""
    if not object_store.ping():
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "bucket": "unreachable"},
        )
    return {"status": "ready", "bucket": object_store.bucket}
