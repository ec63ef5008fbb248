"""
Whole-dataset filtering into the production card list.

Per-format counts are accumulated in a FormatTally owned by the
FilterResult, so nothing survives between runs.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from cardart.filtering.cards import has_usable_art, legal_formats, project_card
from cardart.models.card import ProcessedCard, RawCard
from cardart.models.formats import GameFormat
from cardart.observer import NullObserver, PipelineObserver

DEFAULT_PROGRESS_INTERVAL = 5000


@dataclass
class FormatTally:
    """Running count of processed cards per format."""

    counts: dict[GameFormat, int] = field(default_factory=lambda: {fmt: 0 for fmt in GameFormat})

    def add(self, formats: Iterable[GameFormat]) -> None:
        for fmt in formats:
            self.counts[fmt] += 1

    def as_dict(self) -> dict[str, int]:
        """Counts keyed by format name, in GameFormat order."""
        return {fmt.value: self.counts[fmt] for fmt in GameFormat}


@dataclass
class FilterResult:
    """Outcome of filtering a dataset."""

    cards: list[ProcessedCard] = field(default_factory=list)
    tally: FormatTally = field(default_factory=FormatTally)
    processed: int = 0
    skipped_no_art: int = 0
    skipped_not_legal: int = 0

    @property
    def format_counts(self) -> dict[str, int]:
        return self.tally.as_dict()


def filter_cards(
    cards: Sequence[RawCard],
    observer: PipelineObserver | None = None,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> FilterResult:
    """
    Keep cards with usable art that are legal in at least one format.

    Args:
        cards: Raw Scryfall cards
        observer: Receives progress every progress_interval cards and
            the final per-format counts
        progress_interval: Cards between progress reports

    Returns:
        FilterResult with processed cards in input order and per-format counts
    """
    observer = observer or NullObserver()
    result = FilterResult()
    total = len(cards)

    for card in cards:
        result.processed += 1
        if progress_interval > 0 and result.processed % progress_interval == 0:
            observer.on_progress(result.processed, total)

        if not has_usable_art(card):
            result.skipped_no_art += 1
            continue

        formats = legal_formats(card)
        if not formats:
            result.skipped_not_legal += 1
            continue

        result.cards.append(project_card(card, formats))
        result.tally.add(formats)

    if progress_interval <= 0 or result.processed % progress_interval != 0:
        observer.on_progress(result.processed, total)
    observer.on_format_counts(result.format_counts)
    return result
