"""
Progress and diagnostics reporting for the card data pipeline.

Pipeline steps never log their progress directly; they call a
PipelineObserver. LoggingObserver is the one used by the job.
"""

import logging
from collections.abc import Mapping
from typing import Protocol

logger = logging.getLogger(__name__)


class PipelineObserver(Protocol):
    """Callbacks the filter and report steps report through."""

    def on_progress(self, processed: int, total: int) -> None: ...

    def on_format_counts(self, counts: Mapping[str, int]) -> None: ...

    def on_unusable_art(self, total: int, by_format: Mapping[str, int]) -> None: ...


class NullObserver:
    """Observer that ignores everything."""

    def on_progress(self, processed: int, total: int) -> None:
        pass

    def on_format_counts(self, counts: Mapping[str, int]) -> None:
        pass

    def on_unusable_art(self, total: int, by_format: Mapping[str, int]) -> None:
        pass


class LoggingObserver:
    """Observer that writes pipeline events to the logging module."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def on_progress(self, processed: int, total: int) -> None:
        self.log.info("Processed %d/%d cards...", processed, total)

    def on_format_counts(self, counts: Mapping[str, int]) -> None:
        for format_name, count in counts.items():
            self.log.info("%s: %d cards", format_name, count)

    def on_unusable_art(self, total: int, by_format: Mapping[str, int]) -> None:
        self.log.info("Found %d cards with unusable art that are legal in formats", total)
        for format_name, count in by_format.items():
            if count > 0:
                self.log.info("%s: %d unusable cards", format_name, count)
