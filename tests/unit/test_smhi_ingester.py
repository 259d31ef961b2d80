"""Tests for the SMHI client and ingester."""

import httpx
import pytest

from ingest.schemas import Observation
from ingest.smhi_client import SmhiClient, UpstreamUnavailable
from ingest.smhi_ingester import SmhiIngester, to_observation
from storage.object_store import ObjectWriteError


@pytest.fixture
def ingester(settings, smhi_client, record_store):
    return SmhiIngester(settings, smhi_client, record_store)


class TestSmhiClient:
    def test_requests_latest_hour_for_station(self, smhi_client, smhi_handler):
        smhi_client.fetch_latest()
        request = smhi_handler["requests"][0]
        assert str(request.url) == (
            "https://smhi.test/api/version/latest/parameter/1/station/72420/period/latest-hour/data.json"
        )

    def test_bad_status_is_upstream_unavailable(self, smhi_client, smhi_handler):
        smhi_handler["status"] = 503
        with pytest.raises(UpstreamUnavailable):
            smhi_client.fetch_latest()

    def test_malformed_payload_is_upstream_unavailable(self, smhi_client, smhi_handler):
        smhi_handler["json"] = {"unexpected": True}
        with pytest.raises(UpstreamUnavailable):
            smhi_client.fetch_latest()

    def test_network_error_is_upstream_unavailable(self, settings):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = SmhiClient(settings, transport=httpx.MockTransport(handler))
        with pytest.raises(UpstreamUnavailable):
            client.fetch_latest()


class TestIngestOnce:
    def test_writes_one_record_at_station_time_key(self, ingester, object_store):
        key = ingester.ingest_once()
        assert str(key) == "shmi-data/72420/1700000000000.json"
        assert object_store.writes == ["shmi-data/72420/1700000000000.json"]

    def test_stored_observation_shape(self, ingester, record_store):
        key = ingester.ingest_once()
        stored = record_store.fetch_and_parse(str(key))
        assert stored == Observation(
            device_id="SMHI-72420",
            temperature=4.2,
            humidity=None,
            timestamp=1700000000000,
            location="Test Station A",
        )

    def test_rerun_is_idempotent(self, ingester, object_store):
        first = ingester.ingest_once()
        content = object_store.objects[str(first)]
        second = ingester.ingest_once()
        assert first == second
        assert object_store.objects[str(second)] == content
        assert len(object_store.objects) == 1

    @pytest.mark.parametrize(
        "payload",
        [
            {"station": {"key": "72420", "name": "A"}, "value": []},
            {"station": {"key": "72420", "name": "A"}, "value": None},
            {"station": {"key": "72420", "name": "A"}},
        ],
    )
    def test_empty_values_write_nothing(self, ingester, object_store, smhi_handler, payload):
        smhi_handler["json"] = payload
        with pytest.raises(UpstreamUnavailable):
            ingester.ingest_once()
        assert object_store.writes == []

    def test_upstream_failure_writes_nothing(self, ingester, object_store, smhi_handler):
        smhi_handler["status"] = 500
        with pytest.raises(UpstreamUnavailable):
            ingester.ingest_once()
        assert object_store.objects == {}

    def test_write_failure_propagates(self, ingester, object_store):
        object_store.fail_writes = True
        with pytest.raises(ObjectWriteError):
            ingester.ingest_once()


class TestToObservation:
    def test_uses_first_value(self, smhi_client, smhi_handler):
        smhi_handler["json"] = {
            "station": {"key": "72420", "name": "A"},
            "value": [{"date": 2000, "value": "1.5"}, {"date": 1000, "value": "9.9"}],
        }
        observation = to_observation(smhi_client.fetch_latest())
        assert observation.timestamp == 2000
        assert observation.temperature == 1.5
