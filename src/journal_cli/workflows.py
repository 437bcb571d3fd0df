"""Workflow layer between the CLI and the journal store."""

from datetime import datetime
from pathlib import Path

from .adapters.file_journal import FileJournalStore
from .config import Config
from .core.entry import format_date, format_entry_line
from .ports.journal_store import JournalStore


def get_journal(config: Config) -> FileJournalStore:
    """Open the journal directory from config, validating it exists."""
    return FileJournalStore(config.journal_home)


def add_entry(
    journal: JournalStore,
    journal_format: str,
    entry_text: str,
    now: datetime | None = None,
) -> Path:
    """Append one entry line to today's journal file and return its path."""
    now = now or datetime.now()
    stem = format_date(now, journal_format)
    line = format_entry_line(now, entry_text)
    return journal.append_line(stem, line)
