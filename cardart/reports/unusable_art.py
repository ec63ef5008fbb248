"""
Diagnostics for legal cards the game client cannot show.

A card lands here when it is legal in at least one tracked format but
has no usable art crop. The report never affects which cards go into
the production file; it exists so missing art can be investigated.
"""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from cardart.filtering.cards import count_faces_with_art, has_usable_art, legal_formats
from cardart.models.card import RawCard
from cardart.models.formats import GameFormat
from cardart.observer import NullObserver, PipelineObserver


@dataclass(frozen=True, slots=True)
class UnusableArtRecord:
    """A legal card without usable art, with every format it is legal in."""

    id: str | None
    name: str | None
    layout: str | None
    formats: tuple[GameFormat, ...]
    has_image_uris: bool
    has_card_faces: bool
    scryfall_uri: str | None


@dataclass(frozen=True, slots=True)
class FormatDiagnostic:
    """Per-format detail for one unusable card."""

    id: str | None
    name: str | None
    layout: str | None
    has_image_uris: bool
    has_card_faces: bool
    card_faces_with_images: int
    scryfall_uri: str | None


@dataclass
class UnusableArtReport:
    """
    All unusable-but-legal cards from one dataset.

    Attributes:
        cards: One record per card, in dataset order
        by_format: Detail entries per format; every format has a list
        layout_breakdown: (layout, count) pairs, most frequent first,
            ties kept in order of first appearance
    """

    cards: list[UnusableArtRecord] = field(default_factory=list)
    by_format: dict[GameFormat, list[FormatDiagnostic]] = field(
        default_factory=lambda: {fmt: [] for fmt in GameFormat}
    )
    layout_breakdown: list[tuple[str | None, int]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.cards)

    def format_breakdown(self) -> dict[str, int]:
        """Number of unusable cards per format name, in GameFormat order."""
        return {fmt.value: len(self.by_format[fmt]) for fmt in GameFormat}


def build_unusable_art_report(
    cards: Sequence[RawCard],
    observer: PipelineObserver | None = None,
) -> UnusableArtReport:
    """
    Collect legal cards without usable art.

    Args:
        cards: Raw Scryfall cards
        observer: Receives the summary once the report is built

    Returns:
        UnusableArtReport over the whole dataset
    """
    report = UnusableArtReport()

    for card in cards:
        if has_usable_art(card):
            continue

        formats = legal_formats(card)
        if not formats:
            continue

        has_image_uris = card.get("image_uris") is not None
        has_card_faces = bool(card.get("card_faces"))

        detail = FormatDiagnostic(
            id=card.get("id"),
            name=card.get("name"),
            layout=card.get("layout"),
            has_image_uris=has_image_uris,
            has_card_faces=has_card_faces,
            card_faces_with_images=count_faces_with_art(card),
            scryfall_uri=card.get("scryfall_uri"),
        )
        for fmt in formats:
            report.by_format[fmt].append(detail)

        report.cards.append(
            UnusableArtRecord(
                id=card.get("id"),
                name=card.get("name"),
                layout=card.get("layout"),
                formats=tuple(formats),
                has_image_uris=has_image_uris,
                has_card_faces=has_card_faces,
                scryfall_uri=card.get("scryfall_uri"),
            )
        )

    # most_common keeps first-seen order for equal counts
    report.layout_breakdown = Counter(record.layout for record in report.cards).most_common()

    (observer or NullObserver()).on_unusable_art(report.total, report.format_breakdown())
    return report
