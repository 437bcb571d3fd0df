"""Errors raised while adding a journal entry."""


class JournalError(Exception):
    """Base class for every failure that ends an invocation."""


class ConfigError(JournalError):
    """A required environment variable is missing."""


class JournalPathError(JournalError):
    """The journal home is missing or not a directory."""


class UsageError(JournalError):
    """No entry text was supplied."""


class TargetMissingError(JournalError):
    """Today's journal file does not exist."""


class JournalIOError(JournalError):
    """Opening or writing the journal file failed."""
