"""
Update the game client's card data from Scryfall.

Downloads the oracle cards bulk dataset (or reuses the cached copy of
the same version), keeps cards with usable art that are legal in a
tracked format, and writes cards.json, metadata.json and the unusable
art reports.

Usage:
    python -m cardart.jobs.update_card_data [--no-cache] [--data-dir DIR]
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import httpx

from cardart.config import Settings, settings
from cardart.filtering.pool import filter_cards
from cardart.models.bulk_data import BulkDataDescriptor
from cardart.models.card import RawCard
from cardart.observer import LoggingObserver, PipelineObserver
from cardart.output.writer import OutputSummary, write_run_outputs
from cardart.reports.unusable_art import build_unusable_art_report
from cardart.services.bulk_data import download_bulk_data, get_bulk_data_info
from cardart.services.cache import BulkDataCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """What one update run produced."""

    descriptor: BulkDataDescriptor
    from_cache: bool
    total_cards: int
    format_counts: dict[str, int]
    unusable_art_cards: int
    output: OutputSummary


def create_client(config: Settings = settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"User-Agent": config.user_agent, "Accept": "application/json"},
        follow_redirects=True,
        timeout=config.request_timeout,
    )


async def load_cards(
    client: httpx.AsyncClient,
    descriptor: BulkDataDescriptor,
    cache: BulkDataCache,
    config: Settings = settings,
    *,
    use_cache: bool = True,
) -> tuple[list[RawCard], bool]:
    """
    Get the dataset for a descriptor from the cache, or download and cache it.

    Returns:
        (cards, from_cache)
    """
    if use_cache:
        cached = cache.lookup(descriptor)
        if cached is not None:
            return cached, True

    cards = await download_bulk_data(client, descriptor, config)
    cache.store(descriptor, cards)
    return cards, False


async def run_update(
    config: Settings | None = None,
    observer: PipelineObserver | None = None,
    *,
    use_cache: bool = True,
    client: httpx.AsyncClient | None = None,
) -> RunSummary:
    """
    Run the full card data update.

    Nothing is written to the output or report directories until the
    whole dataset has been filtered.

    Args:
        config: Settings to use. Defaults to the environment settings.
        observer: Receives progress and diagnostics. Defaults to logging.
        use_cache: If False, always download even when a cached copy exists
        client: HTTP client to reuse; one is created and closed otherwise

    Returns:
        RunSummary of the produced data

    Raises:
        IngestError: On any fetch, decode or write failure
    """
    config = config or settings
    observer = observer or LoggingObserver()
    cache = BulkDataCache(config.cache_dir)

    logger.info("Starting card data update process...")

    owns_client = client is None
    http = client or create_client(config)
    try:
        descriptor = await get_bulk_data_info(http, config)
        cards, from_cache = await load_cards(http, descriptor, cache, config, use_cache=use_cache)
    finally:
        if owns_client:
            await http.aclose()

    logger.info("Analyzing cards with unusable art...")
    report = build_unusable_art_report(cards, observer)

    logger.info("Processing format data...")
    result = filter_cards(cards, observer, progress_interval=config.progress_interval)
    logger.info("Legal cards excluded due to unusable art: %d", report.total)

    output = write_run_outputs(
        config.data_dir,
        config.reports_dir,
        result.cards,
        result.format_counts,
        descriptor,
        report,
    )

    logger.info("Card data update completed successfully")
    return RunSummary(
        descriptor=descriptor,
        from_cache=from_cache,
        total_cards=len(result.cards),
        format_counts=result.format_counts,
        unusable_art_cards=report.total,
        output=output,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Update card data from Scryfall bulk data")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help=f"Output directory for cards.json (default: {settings.data_dir})",
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        help=f"Directory for cached bulk data (default: {settings.cache_dir})",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        help=f"Directory for unusable art reports (default: {settings.reports_dir})",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Download even if this dataset version is cached",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings = settings) -> Settings:
    """Apply command line directory overrides to the settings."""
    overrides = {
        name: value
        for name, value in (
            ("data_dir", args.data_dir),
            ("cache_dir", args.cache_dir),
            ("reports_dir", args.reports_dir),
        )
        if value is not None
    }
    return base.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point. Exits with status 1 if the update fails."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        asyncio.run(run_update(settings_from_args(args), use_cache=not args.no_cache))
    except Exception:
        logger.exception("Error during update process")
        sys.exit(1)


if __name__ == "__main__":
    main()
