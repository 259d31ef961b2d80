"""Tests for the local IoT device simulator."""

import time

from ingest.iot_simulator import HUMIDITY_RANGE, TEMPERATURE_RANGE, IoTSimulator


class TestIoTSimulator:
    def test_one_record_per_device_per_tick(self, settings, record_store, object_store):
        simulator = IoTSimulator(settings.model_copy(update={"iot_num_devices": 3}), record_store)
        simulator.run_once()
        assert len(object_store.writes) == 3
        assert all(key.startswith("iot-data/device-") for key in object_store.writes)

    def test_samples_stay_in_device_ranges(self, settings, record_store):
        simulator = IoTSimulator(settings, record_store)
        device = simulator.devices[0]
        for i in range(50):
            _, observation = simulator.sample(device, time.time() + i * 3600)
            assert TEMPERATURE_RANGE[0] <= observation.temperature <= TEMPERATURE_RANGE[1]
            assert HUMIDITY_RANGE[0] <= observation.humidity <= HUMIDITY_RANGE[1]

    def test_stored_records_are_readable(self, settings, record_store):
        IoTSimulator(settings, record_store).run_once()
        result = record_store.fetch_all_in_partition("iot-data/")
        assert len(result.observations) == 1
        assert result.skipped_count == 0
