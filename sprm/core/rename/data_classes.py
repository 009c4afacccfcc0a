"""sprm.core.rename.data_classes.

Data classes for the rename and copy workflow.

This module contains the immutable inputs of a run (RunConfig and the
per-file TransformRequest) and the results produced for every file argument
(TransformResult and OperationOutcome).

Date: 2026-10-18
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class FileAction(Enum):
    """What happened, or was meant to happen, to one file argument."""

    RENAME = "rename"
    COPY = "copy"
    SKIPPED = "skipped"


def _as_char_set(chars: str | Iterable[str] | None) -> frozenset[str]:
    if not chars:
        return frozenset()
    char_set = frozenset(chars)
    if any(len(c) != 1 for c in char_set):
        raise ValueError(f"strip_chars must hold single characters, got {sorted(char_set)!r}")
    return char_set


@dataclass(frozen=True)
class TransformRequest:
    """Input of the name transformer for a single path.

    Attributes:
        original_path: Path as given on the command line.
        space_replacement: Text that replaces each space in the stem ("" removes them).
        strip_chars: Characters deleted from the stem. A plain string is
            accepted and converted to a frozenset.

    """

    original_path: str
    space_replacement: str = ""
    strip_chars: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "strip_chars", _as_char_set(self.strip_chars))


@dataclass(frozen=True)
class TransformResult:
    """Output of the name transformer."""

    original_path: str
    new_path: str

    @property
    def changed(self) -> bool:
        return self.new_path != self.original_path


@dataclass
class OperationOutcome:
    """Result of applying one rename or copy.

    Attributes:
        old_path: Source path.
        new_path: Destination path.
        action: RENAME or COPY when the operation was attempted, SKIPPED otherwise.
        bytes_copied: Number of bytes written by a successful copy.
        error: The FileOperationError that made the operation fail, if any.
        skip_reason: Why the operation was skipped ("declined", "dry run", ...).

    """

    old_path: str
    new_path: str
    action: FileAction
    bytes_copied: int | None = None
    error: Exception | None = None
    skip_reason: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def skipped(self) -> bool:
        return self.action is FileAction.SKIPPED


@dataclass(frozen=True)
class RunConfig:
    """Options of one sprm invocation, built once from the parsed arguments.

    Attributes:
        mode: FileAction.RENAME (default) or FileAction.COPY (--backup).
        space_replacement: "", "-" (--dash) or "_" (--underscore).
        strip_chars: Characters removed from every stem (--strip).
        interactive: Ask before each rename or copy.
        verbose: Print one line per processed file.
        dry_run: Report what would be done without touching any file.
        strict: Exit with a non-zero status when any file failed.
        log_file: Optional path of a debug log file.

    """

    mode: FileAction = FileAction.RENAME
    space_replacement: str = ""
    strip_chars: frozenset[str] = field(default_factory=frozenset)
    interactive: bool = False
    verbose: bool = False
    dry_run: bool = False
    strict: bool = False
    log_file: str | None = None

    def __post_init__(self) -> None:
        if self.mode is FileAction.SKIPPED:
            raise ValueError("mode must be FileAction.RENAME or FileAction.COPY")
        object.__setattr__(self, "strip_chars", _as_char_set(self.strip_chars))

    def request_for(self, path: str) -> TransformRequest:
        """Build the transform request for one file argument."""
        return TransformRequest(
            original_path=path,
            space_replacement=self.space_replacement,
            strip_chars=self.strip_chars,
        )
