"""S3 object store client: list, get and put of whole objects, single attempt per call."""

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from config import Settings, configure_logging


class ObjectStoreError(Exception):
    pass


class ListingError(ObjectStoreError):
    """The key listing of a prefix could not be performed."""


class ObjectFetchError(ObjectStoreError):
    pass


class ObjectWriteError(ObjectStoreError):
    pass


class ObjectStoreClient:
    """
    Thin wrapper over a boto3 S3 client bound to one bucket.

    Retries are disabled: every call is one attempt, bounded by the
    connect/read timeouts from settings. botocore errors are re-raised as
    ObjectStoreError subclasses so callers never depend on botocore.
    """

    def __init__(self, settings: Settings, client=None):
        self.log = configure_logging("object-store", settings.log_level, settings.log_json)
        self._bucket = settings.s3_bucket_name
        self._client = client or boto3.client(
            "s3",
            region_name=settings.aws_region,
            endpoint_url=settings.s3_endpoint_url,
            config=Config(
                connect_timeout=settings.s3_connect_timeout_sec,
                read_timeout=settings.s3_read_timeout_sec,
                retries={"total_max_attempts": 1},
            ),
        )
        self.log.info("object_store_created", bucket=self._bucket, region=settings.aws_region)

    @property
    def bucket(self) -> str:
        return self._bucket

    def list_keys(self, prefix: str = "") -> list[str]:
        """All keys under prefix, in the order S3 returns them."""
        keys: list[str] = []
        try:
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
                for obj in page.get("Contents", []):
                    keys.append(obj["Key"])
        except (BotoCoreError, ClientError) as e:
            raise ListingError(f"Could not list '{prefix}' in bucket {self._bucket}: {e}") from e
        return keys

    def get_bytes(self, key: str) -> bytes:
        """Read the whole object body into memory."""
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=key)
            return response["Body"].read()
        except (BotoCoreError, ClientError) as e:
            raise ObjectFetchError(f"Could not fetch {key}: {e}") from e

    def put_bytes(self, key: str, body: bytes, content_type: str = "application/json"):
        try:
            self._client.put_object(
                Bucket=self._bucket, Key=key, Body=body, ContentType=content_type
            )
        except (BotoCoreError, ClientError) as e:
            raise ObjectWriteError(f"Could not write {key}: {e}") from e

    def ping(self) -> bool:
        try:
            self._client.head_bucket(Bucket=self._bucket)
            return True
        except (BotoCoreError, ClientError):
            return False

    def close(self):
        self._client.close()
        self.log.info("object_store_closed")
