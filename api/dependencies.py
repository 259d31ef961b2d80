"""FastAPI dependency injection."""

import structlog
from fastapi import Request

from config import Settings
from ingest.smhi_ingester import SmhiIngester
from storage.object_store import ObjectStoreClient
from storage.record_store import RecordStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_object_store(request: Request) -> ObjectStoreClient:
    return request.app.state.object_store


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.records


def get_ingester(request: Request) -> SmhiIngester:
    return request.app.state.ingester


def get_log(request: Request) -> structlog.BoundLogger:
    return request.app.state.log
