"""Markdown and JSON renditions of the unusable art report."""

from dataclasses import asdict
from typing import Any

from cardart.models.formats import GameFormat
from cardart.reports.unusable_art import UnusableArtRecord, UnusableArtReport


def _flag(value: bool) -> str:
    return "true" if value else "false"


def render_markdown(report: UnusableArtReport, generated_at: str) -> str:
    """Human readable report: per-format details, layouts, then the full list."""
    lines = [
        "# Unusable Art Cards Report",
        f"Generated: {generated_at}",
        "",
        "## Summary",
        f"Total cards with unusable art that are legal in formats: {report.total}",
        "",
        "## Cards by Format",
        "",
    ]

    for fmt in GameFormat:
        entries = report.by_format[fmt]
        if not entries:
            continue
        lines.append(f"### {fmt.value} ({len(entries)} cards)")
        lines.append("")
        for entry in entries:
            lines.extend(
                [
                    f"- **{entry.name}** ({entry.layout})",
                    f"  - ID: {entry.id}",
                    f"  - Has main image_uris: {_flag(entry.has_image_uris)}",
                    f"  - Has card_faces: {_flag(entry.has_card_faces)}",
                    f"  - Card faces with images: {entry.card_faces_with_images}",
                    f"  - [View on Scryfall]({entry.scryfall_uri})",
                    "",
                ]
            )

    lines.append("## Layout Analysis")
    lines.append("")
    for layout, count in report.layout_breakdown:
        lines.append(f"- **{layout}**: {count} cards")

    lines.append("")
    lines.append("## Complete List")
    lines.append("")
    for record in report.cards:
        legal_in = ", ".join(fmt.value for fmt in record.formats)
        lines.append(f"- **{record.name}** ({record.layout}) - Legal in: {legal_in}")
        lines.append(f"  - [View on Scryfall]({record.scryfall_uri})")

    return "\n".join(lines) + "\n"


def _record_to_dict(record: UnusableArtRecord) -> dict[str, Any]:
    return {
        "name": record.name,
        "id": record.id,
        "layout": record.layout,
        "formats": [fmt.value for fmt in record.formats],
        "has_image_uris": record.has_image_uris,
        "has_card_faces": record.has_card_faces,
        "scryfall_uri": record.scryfall_uri,
    }


def report_to_dict(report: UnusableArtReport, generated_at: str) -> dict[str, Any]:
    """Machine readable report structure."""
    return {
        "generatedAt": generated_at,
        "summary": {
            "totalCards": report.total,
            "formatBreakdown": report.format_breakdown(),
            "layoutBreakdown": {str(layout): count for layout, count in report.layout_breakdown},
        },
        "cardsByFormat": {
            fmt.value: [asdict(entry) for entry in report.by_format[fmt]] for fmt in GameFormat
        },
        "allCards": [_record_to_dict(record) for record in report.cards],
    }
