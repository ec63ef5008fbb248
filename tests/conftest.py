from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from cardart.config import Settings
from cardart.models.bulk_data import BulkDataDescriptor

BULK_DATA_URL = "https://api.scryfall.com/bulk-data"
DOWNLOAD_URL = "https://data.scryfall.io/oracle-cards/oracle-cards-20240501090517.json"


def make_legalities(**legal: str) -> dict[str, str]:
    """Scryfall legalities with every tracked format not_legal unless given."""
    legalities = {
        "standard": "not_legal",
        "pauper": "not_legal",
        "pioneer": "not_legal",
        "modern": "not_legal",
        "legacy": "not_legal",
        "vintage": "not_legal",
        "commander": "legal",
    }
    legalities.update(legal)
    return legalities


def image_uris(name: str) -> dict[str, str]:
    base = f"https://cards.scryfall.io/{{}}/front/{name}.jpg"
    return {
        "small": base.format("small"),
        "normal": base.format("normal"),
        "large": base.format("large"),
        "png": base.format("png"),
        "art_crop": base.format("art_crop"),
        "border_crop": base.format("border_crop"),
    }


@pytest.fixture
def bolt() -> dict[str, Any]:
    """Single-faced card with art, legal in Modern and Legacy."""
    return {
        "object": "card",
        "id": "e3285e6b-3e79-4d7c-bf96-d920f973b122",
        "name": "Lightning Bolt",
        "scryfall_uri": "https://scryfall.com/card/clu/141/lightning-bolt",
        "layout": "normal",
        "image_uris": image_uris("bolt"),
        "legalities": make_legalities(modern="legal", legacy="legal"),
    }


@pytest.fixture
def delver() -> dict[str, Any]:
    """Transform card: art only on the faces."""
    return {
        "object": "card",
        "id": "28059d09-2c7d-4c61-af55-8942107a7c1f",
        "name": "Delver of Secrets // Insectile Aberration",
        "scryfall_uri": "https://scryfall.com/card/isd/51/delver-of-secrets",
        "layout": "transform",
        "card_faces": [
            {"name": "Delver of Secrets", "image_uris": image_uris("delver")},
            {"name": "Insectile Aberration", "image_uris": image_uris("aberration")},
        ],
        "legalities": make_legalities(pauper="legal", modern="legal", legacy="legal"),
    }


@pytest.fixture
def artless() -> dict[str, Any]:
    """Card with no images at all, legal in Standard."""
    return {
        "object": "card",
        "id": "00000000-0000-0000-0000-000000000001",
        "name": "Artless Wonder",
        "scryfall_uri": "https://scryfall.com/card/tst/1/artless-wonder",
        "layout": "normal",
        "legalities": make_legalities(standard="legal"),
    }


@pytest.fixture
def back_art_only() -> dict[str, Any]:
    """Multi-face card whose art crop is only on the second face."""
    return {
        "object": "card",
        "id": "00000000-0000-0000-0000-000000000002",
        "name": "Front // Back",
        "scryfall_uri": "https://scryfall.com/card/tst/2/front-back",
        "layout": "modal_dfc",
        "card_faces": [
            {"name": "Front"},
            {"name": "Back", "image_uris": image_uris("back")},
        ],
        "legalities": make_legalities(pioneer="legal", vintage="legal"),
    }


@pytest.fixture
def restricted_only() -> dict[str, Any]:
    """Card with art that is only restricted or banned."""
    return {
        "object": "card",
        "id": "00000000-0000-0000-0000-000000000003",
        "name": "Ancestral Recall",
        "scryfall_uri": "https://scryfall.com/card/lea/47/ancestral-recall",
        "layout": "normal",
        "image_uris": image_uris("recall"),
        "legalities": make_legalities(vintage="restricted", legacy="banned"),
    }


@pytest.fixture
def raw_cards(
    bolt: dict[str, Any],
    delver: dict[str, Any],
    artless: dict[str, Any],
    back_art_only: dict[str, Any],
    restricted_only: dict[str, Any],
) -> list[dict[str, Any]]:
    return [bolt, delver, artless, back_art_only, restricted_only]


@pytest.fixture
def descriptor() -> BulkDataDescriptor:
    return BulkDataDescriptor(
        type="oracle_cards",
        name="Oracle Cards",
        updated_at="2024-05-01T09:05:17.123+00:00",
        size=167_772_160,
        download_uri=DOWNLOAD_URL,
    )


@pytest.fixture
def discovery_document(descriptor: BulkDataDescriptor) -> dict[str, Any]:
    """Bulk data discovery response containing oracle and default cards."""
    return {
        "object": "list",
        "has_more": False,
        "data": [
            {
                "object": "bulk_data",
                "id": "27bf3214-1271-490b-bdfe-c0be6c23d02e",
                "type": "default_cards",
                "name": "Default Cards",
                "updated_at": descriptor.updated_at,
                "size": 500_000_000,
                "download_uri": "https://data.scryfall.io/default-cards/default-cards.json",
                "content_type": "application/json",
                "content_encoding": "gzip",
            },
            {
                "object": "bulk_data",
                "id": "d3e6a5a7-2c4e-4b0f-9f7e-1c8a5c0b6a11",
                "type": "oracle_cards",
                "name": descriptor.name,
                "description": "One Scryfall card object for each Oracle ID",
                "updated_at": descriptor.updated_at,
                "size": descriptor.size,
                "download_uri": descriptor.download_uri,
                "content_type": "application/json",
                "content_encoding": "gzip",
            },
        ],
    }


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        bulk_data_url=BULK_DATA_URL,
        data_dir=tmp_path / "public" / "data",
        cache_dir=tmp_path / ".cache",
        reports_dir=tmp_path / "reports",
        retry_delay=0.0,
        progress_interval=2,
    )


class RecordingObserver:
    """Pipeline observer that keeps every event for assertions."""

    def __init__(self) -> None:
        self.progress: list[tuple[int, int]] = []
        self.counts: list[dict[str, int]] = []
        self.unusable: list[tuple[int, dict[str, int]]] = []

    def on_progress(self, processed: int, total: int) -> None:
        self.progress.append((processed, total))

    def on_format_counts(self, counts: Mapping[str, int]) -> None:
        self.counts.append(dict(counts))

    def on_unusable_art(self, total: int, by_format: Mapping[str, int]) -> None:
        self.unusable.append((total, dict(by_format)))


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()
