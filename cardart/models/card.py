"""
Card shapes read from Scryfall and written for the game client.

Raw cards stay plain dicts straight from the bulk JSON. The processed
shapes are TypedDicts so they serialize without conversion.
"""

from typing import Any, NotRequired, TypedDict

RawCard = dict[str, Any]


class ImageUris(TypedDict):
    """The two image crops the client uses."""

    art_crop: str | None
    border_crop: str | None


class ProcessedFace(TypedDict):
    name: str | None
    image_uris: ImageUris | None


class ProcessedCard(TypedDict):
    """
    Reduced card written to cards.json.

    image_uris and card_faces are omitted, not nulled, when the source
    card has none. formats lists every format the card is legal in.
    """

    id: str | None
    name: str | None
    scryfall_uri: str | None
    layout: str | None
    image_uris: NotRequired[ImageUris]
    card_faces: NotRequired[list[ProcessedFace]]
    formats: list[str]
