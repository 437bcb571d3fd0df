"""Journal storage interface."""

from pathlib import Path
from typing import Protocol


class JournalStore(Protocol):
    """Interface for appending entries to dated journal files."""

    def path_for(self, stem: str) -> Path:
        """Get the location of the journal file for a filename stem."""
        ...

    def exists(self, stem: str) -> bool:
        """Check if the journal file for a stem exists."""
        ...

    def append_line(self, stem: str, line: str) -> Path:
        """Append one line to an existing journal file. Returns its path."""
        ...
