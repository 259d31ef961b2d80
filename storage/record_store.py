"""Observation records kept as one JSON object per key, read back best-effort."""

import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from config import Settings, configure_logging
from ingest.schemas import Observation, RecordKey
from storage.object_store import ObjectFetchError, ObjectStoreClient


@dataclass(frozen=True)
class ParseFailure:
    key: str
    reason: str


@dataclass
class FetchResult:
    """Parsed observations in listing order, plus the keys that were skipped."""

    observations: list[Observation] = field(default_factory=list)
    skipped: list[ParseFailure] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


@dataclass
class RawRecord:
    key: str
    data: Any

    def to_dict(self) -> dict:
        return {"key": self.key, "data": self.data}


class RecordStore:
    """
    Owns the mapping from record keys to stored bytes.

    Reads are best-effort per key: an object that cannot be fetched, is not
    JSON, or does not validate as an Observation is logged and skipped, never
    raised. Only a failed listing (ListingError) propagates. No sorting is
    done here; results follow the listing order.
    """

    def __init__(self, object_store: ObjectStoreClient, settings: Settings):
        self.log = configure_logging("record-store", settings.log_level, settings.log_json)
        self._objects = object_store

    def list_partition(self, prefix: str) -> list[str]:
        return self._objects.list_keys(prefix)

    def fetch_and_parse(self, key: str) -> Observation | ParseFailure:
        try:
            body = self._objects.get_bytes(key)
            return Observation.model_validate_json(body)
        except ObjectFetchError as e:
            return ParseFailure(key=key, reason=str(e))
        except ValidationError as e:
            return ParseFailure(key=key, reason=f"invalid observation: {e.error_count()} error(s)")

    def fetch_all_in_partition(self, prefix: str) -> FetchResult:
        result = FetchResult()
        for key in self.list_partition(prefix):
            parsed = self.fetch_and_parse(key)
            if isinstance(parsed, ParseFailure):
                self.log.warning("object_skipped", key=parsed.key, reason=parsed.reason)
                result.skipped.append(parsed)
            else:
                result.observations.append(parsed)

        self.log.info(
            "partition_fetched",
            prefix=prefix,
            count=len(result.observations),
            skipped=result.skipped_count,
        )
        return result

    def fetch_raw(self, prefix: str = "") -> tuple[list[RawRecord], list[ParseFailure]]:
        """Every stored JSON document under prefix, verbatim and tagged with its key."""
        records: list[RawRecord] = []
        skipped: list[ParseFailure] = []
        for key in self.list_partition(prefix):
            try:
                data = json.loads(self._objects.get_bytes(key))
            except (ObjectFetchError, ValueError) as e:
                self.log.warning("object_skipped", key=key, reason=str(e))
                skipped.append(ParseFailure(key=key, reason=str(e)))
                continue
            records.append(RawRecord(key=key, data=data))
        return records, skipped

    def put(self, key: RecordKey, observation: Observation):
        self._objects.put_bytes(str(key), observation.model_dump_json().encode("utf-8"))
        self.log.info("record_stored", key=str(key))
