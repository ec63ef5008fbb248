"""
Card filtering for the game client.

Decides which Scryfall cards the client can use (art crop present, legal
in at least one tracked format) and reduces them to the client's shape.
"""

from cardart.filtering.cards import (
    count_faces_with_art,
    has_usable_art,
    is_legal_in,
    legal_formats,
    project_card,
)
from cardart.filtering.pool import (
    DEFAULT_PROGRESS_INTERVAL,
    FilterResult,
    FormatTally,
    filter_cards,
)

__all__ = [
    "DEFAULT_PROGRESS_INTERVAL",
    "FilterResult",
    "FormatTally",
    "count_faces_with_art",
    "filter_cards",
    "has_usable_art",
    "is_legal_in",
    "legal_formats",
    "project_card",
]
