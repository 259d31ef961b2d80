"""Reduction of a series of observations to its most recent entry."""

from typing import Iterable

from ingest.schemas import Observation
from processor.timestamps import normalize_timestamp


def select_latest(observations: Iterable[Observation]) -> Observation | None:
    """
    Observation with the greatest normalized timestamp, or None when empty.

    Scans left to right and only replaces on a strictly greater timestamp, so
    the first of several equal timestamps wins.
    """
    latest: Observation | None = None
    latest_ts = 0
    for obs in observations:
        ts = normalize_timestamp(obs.timestamp)
        if latest is None or ts > latest_ts:
            latest, latest_ts = obs, ts
    return latest
