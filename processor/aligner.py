"""Pairing of the IoT series with the SMHI series for the dashboard views.

Two policies, kept separate because clients see both:

* ``compare_against_latest`` broadcasts the single most recent SMHI
  temperature against every IoT sample.
* ``combine_by_position`` zips the two series by list index, not by time.
  The i-th IoT sample is paired with the i-th SMHI sample in listing order.

In both, the IoT series drives the output: one row per IoT observation, in
the order given.
"""

from dataclasses import dataclass
from typing import Sequence

from ingest.schemas import Observation
from processor.latest import select_latest
from processor.timestamps import to_seconds


@dataclass
class ComparisonRow:
    timestamp: int
    iot_temperature: float
    smhi_temperature: float | None
    difference: float | None

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "iotTemperature": self.iot_temperature,
            "smhiTemperature": self.smhi_temperature,
            "difference": self.difference,
        }


@dataclass
class CombinedRow:
    timestamp: int
    iot_temperature: float
    smhi_temperature: float | None

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "iotTemperature": self.iot_temperature,
            "smhiTemperature": self.smhi_temperature,
        }


def compare_against_latest(
    iot: Sequence[Observation], smhi: Sequence[Observation]
) -> list[ComparisonRow]:
    latest = select_latest(smhi)
    rows = []
    for record in iot:
        smhi_temp = latest.temperature if latest is not None else None
        rows.append(
            ComparisonRow(
                timestamp=record.timestamp,
                iot_temperature=record.temperature,
                smhi_temperature=smhi_temp,
                difference=record.temperature - smhi_temp if smhi_temp is not None else None,
            )
        )
    return rows


def combine_by_position(
    iot: Sequence[Observation], smhi: Sequence[Observation]
) -> list[CombinedRow]:
    # SMHI records are stored in ms; the graph view works in seconds.
    smhi_seconds = [
        obs.model_copy(update={"timestamp": to_seconds(obs.timestamp)}) for obs in smhi
    ]
    rows = []
    for i, record in enumerate(iot):
        paired = smhi_seconds[i] if i < len(smhi_seconds) else None
        rows.append(
            CombinedRow(
                timestamp=record.timestamp,
                iot_temperature=record.temperature,
                smhi_temperature=paired.temperature if paired is not None else None,
            )
        )
    return rows
