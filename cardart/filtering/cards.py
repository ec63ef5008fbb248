"""
Per-card eligibility and projection.

A card is usable by the game client when it has an art crop to show.
Only the card itself and its FIRST face are checked: a multi-face card
whose art crop sits on a later face is treated as having no usable art.
"""

from typing import Any

from cardart.models.card import ImageUris, ProcessedCard, ProcessedFace, RawCard
from cardart.models.formats import LEGAL_STATUS, GameFormat


def _has_art_crop(image_uris: Any) -> bool:
    return isinstance(image_uris, dict) and bool(image_uris.get("art_crop"))


def _card_faces(card: RawCard) -> list[dict[str, Any]]:
    faces = card.get("card_faces")
    return faces if isinstance(faces, list) else []


def has_usable_art(card: RawCard) -> bool:
    """True if the card, or else its first face, has an art crop image."""
    if _has_art_crop(card.get("image_uris")):
        return True

    faces = _card_faces(card)
    if faces:
        return _has_art_crop(faces[0].get("image_uris"))

    return False


def count_faces_with_art(card: RawCard) -> int:
    """Number of faces carrying an art crop. Used only for diagnostics."""
    return sum(1 for face in _card_faces(card) if _has_art_crop(face.get("image_uris")))


def is_legal_in(card: RawCard, fmt: GameFormat) -> bool:
    """
    Check a card's legality in one format.

    Only the exact status "legal" counts; "restricted", "banned",
    "not_legal" and missing entries are all not legal.
    """
    legalities = card.get("legalities")
    if not isinstance(legalities, dict):
        return False
    return legalities.get(fmt.legality_key) == LEGAL_STATUS


def legal_formats(card: RawCard) -> list[GameFormat]:
    """Formats the card is legal in, in GameFormat order."""
    return [fmt for fmt in GameFormat if is_legal_in(card, fmt)]


def _reduce_image_uris(image_uris: dict[str, Any]) -> ImageUris:
    return ImageUris(
        art_crop=image_uris.get("art_crop"),
        border_crop=image_uris.get("border_crop"),
    )


def project_card(card: RawCard, formats: list[GameFormat]) -> ProcessedCard:
    """
    Reduce a raw card to what the game client needs.

    Args:
        card: Raw Scryfall card (not modified)
        formats: Formats the card is legal in

    Returns:
        Processed card with only art/border crops kept and legalities
        replaced by the list of format names.
    """
    processed = ProcessedCard(
        id=card.get("id"),
        name=card.get("name"),
        scryfall_uri=card.get("scryfall_uri"),
        layout=card.get("layout"),
        formats=[fmt.value for fmt in formats],
    )

    image_uris = card.get("image_uris")
    if isinstance(image_uris, dict):
        processed["image_uris"] = _reduce_image_uris(image_uris)

    faces = _card_faces(card)
    if faces:
        processed["card_faces"] = [
            ProcessedFace(
                name=face.get("name"),
                image_uris=(
                    _reduce_image_uris(face["image_uris"])
                    if isinstance(face.get("image_uris"), dict)
                    else None
                ),
            )
            for face in faces
        ]

    return processed
