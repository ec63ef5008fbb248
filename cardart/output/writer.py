"""
Persistence of the production card file and diagnostic reports.

Every artifact is rewritten from scratch on each run. Write errors are
fatal here, unlike the bulk data cache.

Artifacts are rendered first, written to temporary files next to their
targets, and only moved into place once every temporary write succeeded.
A failed write leaves all previous outputs as they were.
"""

import json
import logging
import os
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from cardart.errors import PersistenceFailure
from cardart.models.bulk_data import BulkDataDescriptor
from cardart.models.card import ProcessedCard
from cardart.models.card_data_file import CardDataFile, CardDataMetadata
from cardart.reports.rendering import render_markdown, report_to_dict
from cardart.reports.unusable_art import UnusableArtReport

logger = logging.getLogger(__name__)

CARD_FILE_NAME = "cards.json"
METADATA_FILE_NAME = "metadata.json"
REPORT_MARKDOWN_NAME = "unusable-art-cards.md"
REPORT_JSON_NAME = "unusable-art-cards.json"

STAGING_SUFFIX = ".tmp"


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T09:05:17.123Z."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _staging_path(path: Path) -> Path:
    return path.with_name(f".{path.name}{STAGING_SUFFIX}")


def _stage_file(path: Path, text: str) -> Path:
    """Write text to a temporary file beside path and return the temporary path."""
    staged = _staging_path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        staged.write_text(text, encoding="utf-8")
    except OSError as e:
        raise PersistenceFailure(path, str(e)) from e
    return staged


def _discard(staged: list[Path]) -> None:
    for path in staged:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove staged file %s: %s", path, e)


def write_files(files: dict[Path, str]) -> None:
    """
    Replace several files together.

    Args:
        files: Final path -> full text content

    Raises:
        PersistenceFailure: If any file cannot be staged or moved into place.
            Staging failures leave every target untouched.
    """
    staged: list[Path] = []
    try:
        for path, text in files.items():
            staged.append(_stage_file(path, text))
    except PersistenceFailure:
        _discard(staged)
        raise

    for staged_path, path in zip(staged, files, strict=True):
        try:
            os.replace(staged_path, path)
        except OSError as e:
            _discard(staged)
            raise PersistenceFailure(path, str(e)) from e


@dataclass(frozen=True, slots=True)
class OutputSummary:
    """Where the production files went and how large the card file is."""

    card_path: Path
    metadata_path: Path
    file_size: int

    @property
    def file_size_mb(self) -> float:
        return self.file_size / 1024 / 1024


def render_card_data(
    data_dir: Path,
    cards: list[ProcessedCard],
    format_counts: dict[str, int],
    descriptor: BulkDataDescriptor,
    now: datetime | None = None,
) -> tuple[dict[Path, str], OutputSummary]:
    """
    Render cards.json and its metadata.json sidecar without writing them.

    Returns:
        (files keyed by target path, OutputSummary)
    """
    timestamp = utc_timestamp(now)

    card_file = CardDataFile(
        cards=list(cards),
        format_counts=format_counts,
        last_updated=timestamp,
        bulk_data_updated=descriptor.updated_at,
        total_cards=len(cards),
    )
    card_body = card_file.model_dump_json(by_alias=True)
    file_size = len(card_body.encode("utf-8"))

    metadata = CardDataMetadata(
        last_updated=timestamp,
        bulk_data_updated=descriptor.updated_at,
        format_counts=format_counts,
        total_cards=len(cards),
        file_size=file_size,
    )

    summary = OutputSummary(
        card_path=data_dir / CARD_FILE_NAME,
        metadata_path=data_dir / METADATA_FILE_NAME,
        file_size=file_size,
    )
    files = {
        summary.card_path: card_body,
        summary.metadata_path: metadata.model_dump_json(by_alias=True, indent=2),
    }
    return files, summary


def render_unusable_art_report(
    reports_dir: Path,
    report: UnusableArtReport,
    now: datetime | None = None,
) -> dict[Path, str]:
    """Render the Markdown and JSON unusable art reports without writing them."""
    generated_at = utc_timestamp(now)
    data: dict[str, Any] = report_to_dict(report, generated_at)
    return {
        reports_dir / REPORT_MARKDOWN_NAME: render_markdown(report, generated_at),
        reports_dir / REPORT_JSON_NAME: json.dumps(data, indent=2),
    }


def write_run_outputs(
    data_dir: Path,
    reports_dir: Path,
    cards: list[ProcessedCard],
    format_counts: dict[str, int],
    descriptor: BulkDataDescriptor,
    report: UnusableArtReport,
    now: datetime | None = None,
) -> OutputSummary:
    """
    Write the reports and the production files of one run as a single unit.

    Either all four artifacts are replaced or none is.

    Raises:
        PersistenceFailure: If any artifact cannot be written
    """
    logger.info("Saving unusable art report and optimized card file...")
    files = render_unusable_art_report(reports_dir, report, now)
    card_files, summary = render_card_data(data_dir, cards, format_counts, descriptor, now)
    files.update(card_files)

    write_files(files)

    for path in files:
        logger.info("Saved %s", path)
    logger.info("Saved %d cards, file size: %.2f MB", len(cards), summary.file_size_mb)
    return summary
