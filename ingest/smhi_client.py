"""HTTP client for the SMHI meteorological observations API."""

import httpx
from pydantic import ValidationError

from config import Settings, configure_logging
from ingest.schemas import SmhiObservationSet


class UpstreamUnavailable(Exception):
    """SMHI could not be reached or answered with an unusable payload."""


class SmhiClient:
    """Fetches the latest observation set for one station and parameter, single attempt."""

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None):
        self.log = configure_logging("smhi-client", settings.log_level, settings.log_json)
        self._parameter = settings.smhi_parameter
        self._station = settings.smhi_station_id
        self._period = settings.smhi_period
        self._http = httpx.Client(
            base_url=settings.smhi_base_url,
            timeout=settings.smhi_timeout_sec,
            transport=transport,
        )

    @property
    def station_id(self) -> str:
        return self._station

    def data_path(self) -> str:
        return (
            f"/api/version/latest/parameter/{self._parameter}"
            f"/station/{self._station}/period/{self._period}/data.json"
        )

    def fetch_latest(self) -> SmhiObservationSet:
        path = self.data_path()
        try:
            response = self._http.get(path)
            response.raise_for_status()
            return SmhiObservationSet.model_validate_json(response.content)
        except httpx.HTTPStatusError as e:
            self.log.error("smhi_bad_status", path=path, status=e.response.status_code)
            raise UpstreamUnavailable(
                f"SMHI answered {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            self.log.error("smhi_unreachable", path=path, error=str(e))
            raise UpstreamUnavailable(f"SMHI request failed: {e}") from e
        except ValidationError as e:
            self.log.error("smhi_malformed_payload", path=path, errors=e.error_count())
            raise UpstreamUnavailable("Invalid data from SMHI API") from e

    def close(self):
        self._http.close()
