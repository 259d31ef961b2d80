"""Local IoT device simulator: writes temperature/humidity samples into the IoT partition."""

import math
import random
import time
from dataclasses import dataclass, field

from config import Settings
from ingest.base_job import BaseJob
from ingest.schemas import Observation, RecordKey
from storage.object_store import ObjectStoreClient
from storage.record_store import RecordStore

# Ranges the field devices report in
TEMPERATURE_RANGE = (20.0, 36.0)
HUMIDITY_RANGE = (30.0, 71.0)


@dataclass
class DeviceState:
    device_id: str
    baseline_temp: float
    baseline_humidity: float
    location: str | None = None
    _start_time: float = field(default_factory=time.time)

    def simulate(self, now: float) -> tuple[float, float]:
        elapsed = now - self._start_time
        # Daily cycle plus sensor noise
        temp = self.baseline_temp + 3.0 * math.sin(2 * math.pi * elapsed / 86400)
        temp += random.gauss(0, 0.3)
        humidity = self.baseline_humidity - 5.0 * math.sin(2 * math.pi * elapsed / 86400)
        humidity += random.gauss(0, 1.0)
        return (
            round(_clamp(temp, *TEMPERATURE_RANGE), 2),
            round(_clamp(humidity, *HUMIDITY_RANGE), 2),
        )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class IoTSimulator(BaseJob):
    def __init__(self, settings: Settings, records: RecordStore):
        super().__init__(settings, "iot-simulator")
        self._records = records
        self._prefix = settings.iot_prefix
        self._interval = settings.iot_publish_interval_ms / 1000.0
        self.devices = self._init_devices(settings.iot_num_devices)
        self.log.info("devices_initialized", count=len(self.devices))

    def _init_devices(self, count: int) -> list[DeviceState]:
        return [
            DeviceState(
                device_id=f"device-{i:03d}",
                baseline_temp=random.uniform(22.0, 28.0),
                baseline_humidity=random.uniform(40.0, 60.0),
            )
            for i in range(count)
        ]

    def sample(self, device: DeviceState, now: float) -> tuple[RecordKey, Observation]:
        temperature, humidity = device.simulate(now)
        timestamp_ms = int(now * 1000)
        observation = Observation(
            device_id=device.device_id,
            temperature=temperature,
            humidity=humidity,
            timestamp=timestamp_ms,
            location=device.location,
        )
        return RecordKey.for_sample(self._prefix, device.device_id, timestamp_ms), observation

    def run_once(self):
        now = time.time()
        for device in self.devices:
            key, observation = self.sample(device, now)
            self._records.put(key, observation)

    def get_interval(self) -> float:
        return self._interval


if __name__ == "__main__":
    settings = Settings()
    simulator = IoTSimulator(settings, RecordStore(ObjectStoreClient(settings), settings))
    simulator.run()
