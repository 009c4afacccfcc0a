"""
Service protocol definitions for sprm.

Date: 2026-10-18

Protocols describe the seams the CLI driver depends on, so tests can pass
canned input or a fake operator without touching stdin or the disk.

All protocols are runtime-checkable, meaning isinstance() works with them.

Usage:
    from sprm.services.interfaces import LineReaderProtocol

    class CannedReader:
        def read_line(self) -> str | None:
            return "y\\n"

    reader: LineReaderProtocol = CannedReader()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sprm.core.rename.data_classes import FileAction, OperationOutcome

__all__ = [
    "LineReaderProtocol",
    "FileOperatorProtocol",
]


@runtime_checkable
class LineReaderProtocol(Protocol):
    """Source of operator answers for interactive confirmation."""

    def read_line(self) -> str | None:
        """Read one line of input.

        Returns:
            The line (trailing newline optional), or None at end of input.

        Raises:
            PromptReadError: If the input cannot be read.
        """
        ...


@runtime_checkable
class FileOperatorProtocol(Protocol):
    """Performs the rename or copy computed for one file argument."""

    def apply(
        self, original_path: str, new_path: str, mode: FileAction, interactive: bool
    ) -> OperationOutcome:
        """Rename or copy original_path to new_path.

        Args:
            original_path: Existing file.
            new_path: Destination path.
            mode: FileAction.RENAME or FileAction.COPY.
            interactive: Ask for confirmation first.

        Returns:
            OperationOutcome describing what happened. Failures are reported
            through OperationOutcome.error rather than raised.
        """
        ...
