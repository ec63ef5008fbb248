from cardart.reports.rendering import render_markdown, report_to_dict
from cardart.reports.unusable_art import (
    FormatDiagnostic,
    UnusableArtRecord,
    UnusableArtReport,
    build_unusable_art_report,
)

__all__ = [
    "FormatDiagnostic",
    "UnusableArtRecord",
    "UnusableArtReport",
    "build_unusable_art_report",
    "render_markdown",
    "report_to_dict",
]
