from .object_store import (
    ListingError,
    ObjectFetchError,
    ObjectStoreClient,
    ObjectStoreError,
    ObjectWriteError,
)
from .record_store import FetchResult, ParseFailure, RawRecord, RecordStore

__all__ = [
    "ObjectStoreClient",
    "ObjectStoreError",
    "ListingError",
    "ObjectFetchError",
    "ObjectWriteError",
    "RecordStore",
    "FetchResult",
    "ParseFailure",
    "RawRecord",
]
