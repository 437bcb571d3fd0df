"""Functional core - pure entry logic with no I/O."""

from .entry import (
    CLOCK_EMOJIS,
    clock_emoji,
    collect_entry_text,
    format_date,
    format_entry_line,
)

__all__ = [
    "CLOCK_EMOJIS",
    "clock_emoji",
    "collect_entry_text",
    "format_date",
    "format_entry_line",
]
