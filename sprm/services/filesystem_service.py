"""Filesystem operations service implementation.

Date: 2026-10-18

This module provides FileOperator, the FileOperatorProtocol implementation
that renames or copies a file to its normalized name. Each call handles one
file argument on its own: it checks the source, optionally asks for
confirmation, runs the operation once and reports the result as an
OperationOutcome. Filesystem failures are wrapped in FileOperationError
subclasses and returned in the outcome so the caller can carry on with the
next file.

Usage:
    from sprm.services.filesystem_service import FileOperator

    operator = FileOperator(verbose=True)
    outcome = operator.apply("My File.txt", "My-File.txt", FileAction.RENAME, False)
    if not outcome.success:
        print(f"Error: {outcome.error}")
"""

from __future__ import annotations

import os
import shutil
import stat
import sys
from typing import TYPE_CHECKING, TextIO

from sprm.config import APP_NAME, PROMPT_TEMPLATE
from sprm.core.errors import (
    CopyError,
    FileOperationError,
    NotRegularFileError,
    RenameError,
    SourceNotFoundError,
)
from sprm.core.rename.data_classes import FileAction, OperationOutcome
from sprm.services.prompt_service import StdinLineReader, ask_yes_no
from sprm.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from sprm.services.interfaces import LineReaderProtocol

logger = get_cached_logger(__name__)

SKIP_UNCHANGED = "name unchanged"
SKIP_DRY_RUN = "dry run"
SKIP_DECLINED = "declined"


class FileOperator:
    """Rename or copy service with optional confirmation.

    Implements FileOperatorProtocol for dependency injection.

    Attributes:
        reader: Source of answers for interactive confirmation.
        out: Stream for prompts, verbose lines and dry-run lines.
        verbose: Print one line per executed operation.
        dry_run: Report the operation instead of performing it.

    """

    def __init__(
        self,
        reader: LineReaderProtocol | None = None,
        out: TextIO | None = None,
        verbose: bool = False,
        dry_run: bool = False,
    ) -> None:
        self.reader = reader if reader is not None else StdinLineReader()
        self._out = out
        self.verbose = verbose
        self.dry_run = dry_run

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def apply(
        self, original_path: str, new_path: str, mode: FileAction, interactive: bool = False
    ) -> OperationOutcome:
        """Rename or copy original_path to new_path.

        Args:
            original_path: Existing file.
            new_path: Destination computed by the name transformer.
            mode: FileAction.RENAME or FileAction.COPY.
            interactive: Ask for confirmation before acting.

        Returns:
            OperationOutcome. On failure, action is the attempted mode and
            error holds the FileOperationError.

        """
        if mode not in (FileAction.RENAME, FileAction.COPY):
            raise ValueError(f"Unsupported mode: {mode!r}")

        try:
            self._check_source(original_path, mode)
        except FileOperationError as e:
            logger.warning("[%s] %s", mode.value, e)
            return OperationOutcome(original_path, new_path, mode, error=e)

        if self._is_same_file(original_path, new_path):
            logger.debug("Nothing to do for %s", original_path, extra={"dev_only": True})
            return self._skipped(original_path, new_path, SKIP_UNCHANGED)

        if self.dry_run:
            self._print(f"would {mode.value}: {original_path} -> {new_path}")
            return self._skipped(original_path, new_path, SKIP_DRY_RUN)

        if interactive and not self.confirm(original_path, new_path, mode):
            logger.info("Declined %s of %s", mode.value, original_path)
            return self._skipped(original_path, new_path, SKIP_DECLINED)

        try:
            if mode is FileAction.COPY:
                copied = self.copy_file(original_path, new_path)
            else:
                self.rename_file(original_path, new_path)
                copied = None
        except FileOperationError as e:
            logger.warning("[%s] %s", mode.value, e)
            return OperationOutcome(original_path, new_path, mode, error=e)

        if self.verbose:
            if mode is FileAction.COPY:
                self._print(f"copied file: {original_path} -> {new_path} ({copied} bytes)")
            else:
                self._print(f"renamed file: {original_path} -> {new_path}")

        return OperationOutcome(original_path, new_path, mode, bytes_copied=copied)

    def confirm(self, original_path: str, new_path: str, mode: FileAction) -> bool:
        prompt = PROMPT_TEMPLATE.format(
            app=APP_NAME, verb=mode.value, src=original_path, dst=new_path
        )
        return ask_yes_no(prompt, self.reader, self.out)

    def rename_file(self, source: str, target: str) -> None:
        """Rename a file with a single os.rename call.

        Raises:
            RenameError: The filesystem refused (cross-device, permission,
                target is a directory, ...).

        """
        try:
            os.rename(source, target)
        except OSError as e:
            raise RenameError(
                f"cannot rename '{source}' to '{target}': {e.strerror or e}", source
            ) from e
        logger.info("Renamed %s -> %s", source, target)

    def copy_file(self, source: str, target: str) -> int:
        """Copy the bytes of a regular file, creating or truncating target.

        Returns:
            Number of bytes copied.

        Raises:
            SourceNotFoundError: source does not exist.
            NotRegularFileError: source is not a regular file.
            CopyError: reading, writing or closing failed.

        """
        self._check_source(source, FileAction.COPY)

        try:
            # Leaving the with block closes target; a failing close raises here too
            with open(source, "rb") as fsrc, open(target, "wb") as fdst:
                shutil.copyfileobj(fsrc, fdst)
                copied = fdst.tell()
        except OSError as e:
            raise CopyError(
                f"cannot copy '{source}' to '{target}': {e.strerror or e}", source
            ) from e

        logger.info("Copied %s -> %s (%d bytes)", source, target, copied)
        return copied

    def _check_source(self, path: str, mode: FileAction) -> os.stat_result:
        # Copies read through symlinks; renames move the link itself
        follow = mode is FileAction.COPY
        try:
            st = os.stat(path, follow_symlinks=follow)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise SourceNotFoundError(f"'{path}': no such file or directory", path) from e
        except OSError as e:
            error_cls = CopyError if mode is FileAction.COPY else RenameError
            raise error_cls(f"cannot access '{path}': {e.strerror or e}", path) from e

        if mode is FileAction.COPY and not stat.S_ISREG(st.st_mode):
            raise NotRegularFileError(f"'{path}' is not a regular file", path)
        return st

    @staticmethod
    def _is_same_file(source: str, target: str) -> bool:
        if os.path.abspath(source) == os.path.abspath(target):
            return True
        try:
            return os.path.lexists(target) and os.path.samefile(source, target)
        except OSError:
            return False

    def _skipped(self, original_path: str, new_path: str, reason: str) -> OperationOutcome:
        return OperationOutcome(original_path, new_path, FileAction.SKIPPED, skip_reason=reason)

    def _print(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()
