"""File-based journal storage adapter."""

import logging
import os
from pathlib import Path

from ..config import HOME_ENV
from ..errors import JournalIOError, JournalPathError, TargetMissingError

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each day gets a markdown file that
    something else has already created; this store only appends.
    """

    def __init__(self, journal_dir: Path | str):
        self.journal_dir = Path(journal_dir)
        if not self.journal_dir.exists():
            raise JournalPathError(f"{HOME_ENV} path does not exist: {journal_dir}")
        if not self.journal_dir.is_dir():
            raise JournalPathError(f"{HOME_ENV} is not a directory: {journal_dir}")

    def path_for(self, stem: str) -> Path:
        """Get the file path for a filename stem."""
        return self.journal_dir / f"{stem}.md"

    def exists(self, stem: str) -> bool:
        """Check if a journal file exists for a stem."""
        return self.path_for(stem).exists()

    def append_line(self, stem: str, line: str) -> Path:
        """
        Append one line to an existing journal file.

        The file is opened append-only without O_CREAT, so a file that
        vanishes between the existence check and the open is reported
        rather than recreated. The line goes out in a single write.
        """
        path = self.path_for(stem)
        logger.debug(f"Resolved journal file: {path}")

        if not self.exists(stem):
            raise TargetMissingError(f"Journal file does not exist: {path}")

        try:
            fd = os.open(path, os.O_WRONLY | os.O_APPEND)
        except OSError as e:
            logger.debug(f"Failed to open journal file {path}: {e}")
            raise JournalIOError(f"Failed to open journal file {path}: {e}") from e

        with os.fdopen(fd, "ab", buffering=0) as f:
            try:
                f.write(line.encode("utf-8", errors="surrogateescape"))
            except OSError as e:
                logger.debug(f"Failed to write to journal file {path}: {e}")
                raise JournalIOError(f"Failed to write to journal file: {e}") from e

        logger.debug(f"Appended to {path}: {line.rstrip()}")
        return path
