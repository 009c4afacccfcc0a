"""Module: errors.py

Date: 2026-10-18

Exception types raised by sprm.

Usage errors abort the whole run before any file is touched. File operation
errors belong to a single file argument; the driver reports them and moves on.
"""


class SprmError(Exception):
    """Base class for all sprm errors."""


class UsageError(SprmError):
    """Raised for invalid command-line usage (conflicting flags, no files)."""


class PromptReadError(SprmError):
    """Raised when the confirmation answer cannot be read from the input stream."""


class FileOperationError(SprmError):
    """Base class for failures of a single rename or copy.

    Attributes:
        path: The file argument the failure belongs to.

    """

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class SourceNotFoundError(FileOperationError):
    """Raised when the source path does not exist."""


class NotRegularFileError(FileOperationError):
    """Raised when a copy source is a directory, device, FIFO or similar."""


class RenameError(FileOperationError):
    """Raised when the filesystem rejects a rename."""


class CopyError(FileOperationError):
    """Raised when reading, writing or closing during a copy fails."""
