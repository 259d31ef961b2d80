"""SMHI ingestion: stores the latest station observation as one record per observation time."""

from config import Settings
from ingest.base_job import BaseJob
from ingest.schemas import Observation, RecordKey, SmhiObservationSet, smhi_device_id
from ingest.smhi_client import SmhiClient, UpstreamUnavailable
from storage.object_store import ObjectStoreClient
from storage.record_store import RecordStore


def to_observation(payload: SmhiObservationSet) -> Observation:
    """Shape the first value of an SMHI observation set into a stored Observation."""
    if not payload.value:
        raise UpstreamUnavailable("Invalid or empty data from SMHI API")
    sample = payload.value[0]
    return Observation(
        device_id=smhi_device_id(payload.station.key),
        temperature=sample.value,
        humidity=None,  # the temperature parameter carries no humidity
        timestamp=sample.date,
        location=payload.station.name,
    )


class SmhiIngester(BaseJob):
    """
    One invocation = one upstream fetch and at most one write.

    The key is derived from station and observation time, so re-running
    against the same upstream observation rewrites identical content.
    """

    def __init__(self, settings: Settings, client: SmhiClient, records: RecordStore):
        super().__init__(settings, "smhi-ingester")
        self._client = client
        self._records = records
        self._prefix = settings.smhi_prefix

    def ingest_once(self) -> RecordKey:
        payload = self._client.fetch_latest()
        observation = to_observation(payload)
        key = RecordKey.for_sample(self._prefix, payload.station.key, observation.timestamp)
        self._records.put(key, observation)
        self.log.info(
            "smhi_observation_stored",
            key=str(key),
            temperature=observation.temperature,
        )
        return key

    def run_once(self):
        self.ingest_once()

    def get_interval(self) -> float:
        return float(self.settings.ingest_interval_sec)

    def _cleanup(self):
        self._client.close()
        super()._cleanup()


if __name__ == "__main__":
    settings = Settings()
    records = RecordStore(ObjectStoreClient(settings), settings)
    ingester = SmhiIngester(settings, SmhiClient(settings), records)
    ingester.run()
