"""Centralized configuration using pydantic-settings. All values are env-configurable."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DASHBOARD_", frozen=True)

    # AWS / S3
    aws_region: str = "eu-north-1"
    s3_bucket_name: str = "monitor-temp-bucket"
    s3_endpoint_url: str | None = None
    s3_connect_timeout_sec: float = 3.0
    s3_read_timeout_sec: float = 5.0

    # Partitions
    iot_prefix: str = "iot-data/"
    smhi_prefix: str = "shmi-data/"

    # Basic auth, one pair per protected endpoint
    compare_username: str = ""
    compare_password: str = ""
    records_username: str = ""
    records_password: str = ""

    # SMHI open data API
    smhi_base_url: str = "https://opendata-download-metobs.smhi.se"
    smhi_parameter: int = 1  # air temperature, hourly
    smhi_station_id: str = "72420"
    smhi_period: str = "latest-hour"
    smhi_timeout_sec: float = 10.0

    # Jobs
    ingest_interval_sec: int = 3600
    iot_num_devices: int = 1
    iot_publish_interval_ms: int = 60_000

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_json: bool = True
