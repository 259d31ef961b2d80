"""Shared test fixtures."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings
from ingest.smhi_client import SmhiClient
from storage.object_store import ListingError, ObjectFetchError, ObjectWriteError
from storage.record_store import RecordStore

SMHI_PAYLOAD = {
    "station": {"key": "72420", "name": "Test Station A"},
    "parameter": {"key": "1", "name": "Lufttemperatur", "unit": "degree celsius"},
    "value": [{"date": 1700000000000, "value": "4.2", "quality": "G"}],
}


class FakeObjectStore:
    """In-memory stand-in for ObjectStoreClient. Listing order is insertion order."""

    def __init__(self, bucket: str = "test-bucket"):
        self.bucket = bucket
        self.objects: dict[str, bytes] = {}
        self.failing_keys: set[str] = set()
        self.fail_listing = False
        self.fail_writes = False
        self.reachable = True
        self.closed = False
        self.writes: list[str] = []

    def add_json(self, key: str, document):
        self.objects[key] = json.dumps(document).encode("utf-8")

    def list_keys(self, prefix: str = "") -> list[str]:
        if self.fail_listing:
            raise ListingError(f"Could not list '{prefix}'")
        return [key for key in self.objects if key.startswith(prefix)]

    def get_bytes(self, key: str) -> bytes:
        if key in self.failing_keys or key not in self.objects:
            raise ObjectFetchError(f"Could not fetch {key}")
        return self.objects[key]

    def put_bytes(self, key: str, body: bytes, content_type: str = "application/json"):
        if self.fail_writes:
            raise ObjectWriteError(f"Could not write {key}")
        self.objects[key] = body
        self.writes.append(key)

    def ping(self) -> bool:
        return self.reachable

    def close(self):
        self.closed = True


@pytest.fixture
def settings():
    """Test settings with local defaults and known credentials."""
    return Settings(
        s3_bucket_name="test-bucket",
        compare_username="compare-user",
        compare_password="compare-pass",
        records_username="records-user",
        records_password="records-pass",
        smhi_base_url="https://smhi.test",
        log_level="WARNING",
    )


@pytest.fixture
def object_store():
    return FakeObjectStore()


@pytest.fixture
def record_store(object_store, settings):
    return RecordStore(object_store, settings)


@pytest.fixture
def smhi_handler():
    """Mutable holder for the response the mocked SMHI API returns."""
    state = {"status": 200, "json": SMHI_PAYLOAD, "requests": []}

    def handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return httpx.Response(state["status"], json=state["json"])

    state["handler"] = handler
    return state


@pytest.fixture
def smhi_client(settings, smhi_handler):
    return SmhiClient(settings, transport=httpx.MockTransport(smhi_handler["handler"]))


@pytest.fixture
def client(settings, object_store, smhi_client):
    app = create_app(settings=settings, object_store=object_store, smhi_client=smhi_client)
    with TestClient(app) as test_client:
        yield test_client
