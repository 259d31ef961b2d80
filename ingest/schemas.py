"""Canonical record schemas: single source of truth for data shapes across the service."""

from pydantic import BaseModel, Field


class Observation(BaseModel):
    """One temperature sample, as persisted in the bucket."""

    device_id: str
    temperature: float
    humidity: float | None = None
    timestamp: int = Field(description="Unix epoch in milliseconds")
    location: str | None = None


def smhi_device_id(station_key: str) -> str:
    return f"SMHI-{station_key}"


class RecordKey(BaseModel):
    """Storage address of one observation: partition prefix plus a source-specific path."""

    model_config = {"frozen": True}

    prefix: str
    path: str

    @classmethod
    def for_sample(cls, prefix: str, source_key: str, timestamp_ms: int) -> "RecordKey":
        """Key unique per (source, observation time): ``{prefix}{source}/{ms}.json``."""
        return cls(prefix=prefix, path=f"{source_key}/{timestamp_ms}.json")

    def __str__(self) -> str:
        return f"{self.prefix}{self.path}"


# ─── SMHI open data payload ───────────────────────────────────────


class SmhiValue(BaseModel):
    date: int = Field(description="Unix epoch in milliseconds")
    value: float
    quality: str | None = None


class SmhiStation(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    key: str
    name: str


class SmhiObservationSet(BaseModel):
    """Subset of the SMHI ``data.json`` response the ingester relies on."""

    station: SmhiStation
    value: list[SmhiValue] | None = None
