from cardart.output.writer import (
    CARD_FILE_NAME,
    METADATA_FILE_NAME,
    REPORT_JSON_NAME,
    REPORT_MARKDOWN_NAME,
    OutputSummary,
    render_card_data,
    render_unusable_art_report,
    utc_timestamp,
    write_files,
    write_run_outputs,
)

__all__ = [
    "CARD_FILE_NAME",
    "METADATA_FILE_NAME",
    "OutputSummary",
    "REPORT_JSON_NAME",
    "REPORT_MARKDOWN_NAME",
    "render_card_data",
    "render_unusable_art_report",
    "utc_timestamp",
    "write_files",
    "write_run_outputs",
]
