"""
Scryfall bulk data discovery and download.

Bulk data: https://scryfall.com/docs/api/bulk-data

The discovery endpoint lists one descriptor per dataset type. The
dataset itself is a single JSON array; depending on how it is served
the body may still be gzip compressed, so decoding tries gzip first and
falls back to plain JSON.
"""

import gzip
import json
import logging
import zlib
from typing import Any

import httpx
from pydantic import ValidationError

from cardart.config import Settings, settings
from cardart.errors import DecodeFailure, MissingDatasetFailure
from cardart.models.bulk_data import BulkDataDescriptor
from cardart.models.card import RawCard
from cardart.services.fetcher import fetch_with_retry

logger = logging.getLogger(__name__)


def find_descriptor(document: dict[str, Any], dataset_type: str) -> BulkDataDescriptor:
    """
    Pick the descriptor of one dataset type out of a discovery response.

    Args:
        document: Parsed JSON from the bulk-data endpoint
        dataset_type: Descriptor "type" to look for (e.g., "oracle_cards")

    Returns:
        The matching descriptor

    Raises:
        MissingDatasetFailure: If no entry has the requested type
        DecodeFailure: If the document or the entry is malformed
    """
    entries = document.get("data") if isinstance(document, dict) else None
    if not isinstance(entries, list):
        raise DecodeFailure("Bulk data discovery response has no 'data' list")

    for entry in entries:
        if isinstance(entry, dict) and entry.get("type") == dataset_type:
            try:
                return BulkDataDescriptor.model_validate(entry)
            except ValidationError as e:
                raise DecodeFailure(f"Malformed {dataset_type} descriptor: {e}") from e

    raise MissingDatasetFailure(dataset_type)


async def get_bulk_data_info(
    client: httpx.AsyncClient,
    config: Settings = settings,
) -> BulkDataDescriptor:
    """Fetch the discovery endpoint and return the configured dataset's descriptor."""
    logger.info("Fetching bulk data information...")
    response = await fetch_with_retry(
        client,
        config.bulk_data_url,
        max_attempts=config.max_attempts,
        retry_delay=config.retry_delay,
    )
    try:
        document = response.json()
    except ValueError as e:
        raise DecodeFailure(f"Bulk data discovery response is not JSON: {e}") from e

    descriptor = find_descriptor(document, config.dataset_type)

    logger.info("Found %s: %s", config.dataset_type, descriptor.name)
    logger.info("Updated: %s", descriptor.updated_at)
    logger.info("Size: %.2f MB", descriptor.size_mb)
    return descriptor


def decode_bulk_payload(payload: bytes) -> list[RawCard]:
    """
    Decode a downloaded bulk file into a list of raw cards.

    Tries gzip-compressed JSON first, then plain JSON.

    Raises:
        DecodeFailure: If neither decoding works or the result is not a list
    """
    try:
        cards = json.loads(gzip.decompress(payload))
        logger.info("Decompressed gzipped bulk data")
    except (OSError, EOFError, zlib.error, ValueError) as gzip_error:
        logger.debug("Gzip decompression failed (%s), trying plain JSON", gzip_error)
        try:
            cards = json.loads(payload)
            logger.info("Parsed bulk data as plain JSON")
        except ValueError as json_error:
            raise DecodeFailure(
                "Unable to parse downloaded data as gzip or plain JSON "
                f"(gzip: {gzip_error}; json: {json_error})"
            ) from json_error

    if not isinstance(cards, list):
        raise DecodeFailure(f"Expected a JSON array of cards, got {type(cards).__name__}")

    return cards


async def download_bulk_data(
    client: httpx.AsyncClient,
    descriptor: BulkDataDescriptor,
    config: Settings = settings,
) -> list[RawCard]:
    """
    Download and decode the dataset a descriptor points at.

    The whole body is held in memory.
    """
    logger.info("Downloading bulk data from %s", descriptor.download_uri)
    response = await fetch_with_retry(
        client,
        descriptor.download_uri,
        max_attempts=config.max_attempts,
        retry_delay=config.retry_delay,
        timeout=config.download_timeout,
    )
    payload = response.content
    logger.info("Downloaded %d bytes", len(payload))

    cards = decode_bulk_payload(payload)
    logger.info("Loaded %d cards", len(cards))
    return cards
