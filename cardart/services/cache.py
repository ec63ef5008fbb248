"""
On-disk cache of downloaded bulk datasets.

One file per upstream version, named after the descriptor's updated_at
timestamp. A cache that cannot be read or written never fails the run:
reads fall through to a fresh download, writes only log a warning.
"""

import json
import logging
import re
from pathlib import Path

from cardart.models.bulk_data import BulkDataDescriptor
from cardart.models.card import RawCard

logger = logging.getLogger(__name__)

CACHE_FILE_PREFIX = "oracle-cards"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def cache_key(descriptor: BulkDataDescriptor) -> str:
    """
    Filesystem-safe cache file name for a dataset version.

    Example:
        "2024-05-01T09:05:17.123+00:00" -> "oracle-cards-2024-05-01T09-05-17-123-00-00.json"
    """
    return f"{CACHE_FILE_PREFIX}-{_UNSAFE_CHARS.sub('-', descriptor.updated_at)}.json"


class BulkDataCache:
    """File cache for raw bulk datasets, keyed by version timestamp."""

    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = cache_dir

    def path_for(self, descriptor: BulkDataDescriptor) -> Path:
        return self.cache_dir / cache_key(descriptor)

    def lookup(self, descriptor: BulkDataDescriptor) -> list[RawCard] | None:
        """
        Return the cached dataset for this version, or None on any miss.

        Missing, unreadable, corrupt and non-list files are all misses.
        """
        path = self.path_for(descriptor)
        logger.info("Checking for cached data at %s", path)

        try:
            with open(path, encoding="utf-8") as f:
                cards = json.load(f)
        except FileNotFoundError:
            logger.info("No cached data found, will download fresh data")
            return None
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable cache file %s: %s", path, e)
            return None

        if not isinstance(cards, list):
            logger.warning("Ignoring cache file %s: expected a list of cards", path)
            return None

        logger.info("Using cached data with %d cards", len(cards))
        return cards

    def store(self, descriptor: BulkDataDescriptor, cards: list[RawCard]) -> Path | None:
        """
        Save a dataset under its version key.

        Returns:
            Path written, or None if the write failed (logged, not raised)
        """
        path = self.path_for(descriptor)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(cards, f)
        except OSError as e:
            logger.warning("Failed to cache data to %s: %s", path, e)
            return None

        logger.info("Cached data saved to %s", path.name)
        return path
