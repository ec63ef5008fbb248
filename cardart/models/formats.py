"""
Game formats tracked by the card data job.

The order of GameFormat members is the order formats appear in every
output: processed card format lists, counts and reports.
"""

from enum import Enum


class GameFormat(str, Enum):
    """Constructed formats the game client offers."""

    STANDARD = "Standard"
    PAUPER = "Pauper"
    PIONEER = "Pioneer"
    MODERN = "Modern"
    LEGACY = "Legacy"
    VINTAGE = "Vintage"

    @property
    def legality_key(self) -> str:
        """Key of this format in a Scryfall card's legalities mapping."""
        return FORMAT_LEGALITY_KEYS[self]


FORMAT_LEGALITY_KEYS: dict[GameFormat, str] = {
    GameFormat.STANDARD: "standard",
    GameFormat.PAUPER: "pauper",
    GameFormat.PIONEER: "pioneer",
    GameFormat.MODERN: "modern",
    GameFormat.LEGACY: "legacy",
    GameFormat.VINTAGE: "vintage",
}

# Scryfall legality status that counts as playable. "restricted" does not.
LEGAL_STATUS = "legal"
