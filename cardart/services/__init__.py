from cardart.services.bulk_data import (
    decode_bulk_payload,
    download_bulk_data,
    find_descriptor,
    get_bulk_data_info,
)
from cardart.services.cache import BulkDataCache, cache_key
from cardart.services.fetcher import fetch_with_retry

__all__ = [
    "BulkDataCache",
    "cache_key",
    "decode_bulk_payload",
    "download_bulk_data",
    "fetch_with_retry",
    "find_descriptor",
    "get_bulk_data_info",
]
