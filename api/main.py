"""FastAPI application factory with lifespan management."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.auth import AuthError
from api.routers import dashboard, health, ingestion, records
from config import Settings, configure_logging
from ingest.smhi_client import SmhiClient
from ingest.smhi_ingester import SmhiIngester
from storage.object_store import ObjectStoreClient
from storage.record_store import RecordStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the service graph once at startup; collaborators already on app.state are kept."""
    settings = getattr(app.state, "settings", None) or Settings()
    object_store = getattr(app.state, "object_store", None) or ObjectStoreClient(settings)
    smhi_client = getattr(app.state, "smhi_client", None) or SmhiClient(settings)
    records_store = RecordStore(object_store, settings)

    # Store in app state for dependency injection
    app.state.settings = settings
    app.state.log = configure_logging("api", settings.log_level, settings.log_json)
    app.state.object_store = object_store
    app.state.smhi_client = smhi_client
    app.state.records = records_store
    app.state.ingester = SmhiIngester(settings, smhi_client, records_store)

    yield

    smhi_client.close()
    object_store.close()


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=exc.headers,
    )


def create_app(
    settings: Settings | None = None,
    object_store: ObjectStoreClient | None = None,
    smhi_client: SmhiClient | None = None,
) -> FastAPI:
    app = FastAPI(
        title="IoT / SMHI Temperature Dashboard API",
        version="1.0.0",
        description="Compares IoT device temperatures with SMHI station observations",
        lifespan=lifespan,
    )

    if settings is not None:
        app.state.settings = settings
    if object_store is not None:
        app.state.object_store = object_store
    if smhi_client is not None:
        app.state.smhi_client = smhi_client

    app.add_exception_handler(AuthError, auth_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(dashboard.router)
    app.include_router(records.router)
    app.include_router(ingestion.router)

    return app


app = create_app()
