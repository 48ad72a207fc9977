"""Output formatters for scored documents."""

from termweight.output.formatters import (
    format_csv,
    format_json,
    format_text,
    to_records,
)

__all__ = [
    "format_csv",
    "format_json",
    "format_text",
    "to_records",
]
