"""Pure entry formatting logic - no I/O dependencies."""

from datetime import date, datetime
from typing import Sequence

from ..errors import UsageError

USAGE = "journal <your entry text>"

# Indexed by hour % 12, so midnight and noon share a face.
CLOCK_EMOJIS = (
    "🕛",
    "🕐",
    "🕑",
    "🕒",
    "🕓",
    "🕔",
    "🕕",
    "🕖",
    "🕗",
    "🕘",
    "🕙",
    "🕚",
)


def collect_entry_text(args: Sequence[str]) -> str:
    """Join command-line arguments into a single entry string."""
    if not args:
        raise UsageError(f"No journal entry provided. Usage: {USAGE}")
    return " ".join(args)


def format_date(moment: date, pattern: str) -> str:
    """
    Render a date through a token pattern.

    Tokens: YYYY (4-digit year), MM (month), DD (day), YY (2-digit year).
    Substitution is literal and ordered; YYYY must go before YY or the
    short-year pass would eat half of every full-year token. Anything
    else in the pattern passes through untouched.
    """
    return (
        pattern.replace("YYYY", f"{moment.year:04d}")
        .replace("MM", f"{moment.month:02d}")
        .replace("DD", f"{moment.day:02d}")
        .replace("YY", f"{moment.year % 100:02d}")
    )


def clock_emoji(hour: int) -> str:
    """Clock face for an hour of the day (0-23)."""
    return CLOCK_EMOJIS[hour % 12]


def format_entry_line(moment: datetime, text: str) -> str:
    """Build the line appended to the journal, newline included."""
    return f"JOURNAL CLI {moment.hour:02d}:{moment.minute:02d} {clock_emoji(moment.hour)} -> {text}\n"
