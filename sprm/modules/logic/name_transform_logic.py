"""Pure name transformation logic.

Date: 2026-10-18

Computes the normalized path of a file: characters from the strip set are
deleted from the stem, then every space in the stem is replaced. The directory
part and the extension are carried over untouched.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from sprm.core.rename.data_classes import TransformRequest, TransformResult
from sprm.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class NameTransformLogic:
    """Stateless stem/extension handling used for every file argument."""

    @staticmethod
    def split_extension(base_name: str) -> tuple[str, str]:
        """Split a base name into (stem, extension).

        The extension starts at the last dot and keeps it. Leading dots do not
        count, so ".gitignore" is all stem while ".my file.txt" has ".txt".

        Args:
            base_name: Filename without directory

        Returns:
            Tuple of stem and extension ("" when there is none)

        """
        return os.path.splitext(base_name)

    @staticmethod
    def strip_characters(stem: str, strip_chars: Iterable[str]) -> str:
        """Delete every occurrence of every character in strip_chars."""
        chars = "".join(strip_chars)
        if not chars:
            return stem
        return stem.translate(str.maketrans("", "", chars))

    @staticmethod
    def replace_spaces(stem: str, replacement: str) -> str:
        return stem.replace(" ", replacement)

    @staticmethod
    def apply(request: TransformRequest) -> TransformResult:
        """Compute the new path for a request.

        Args:
            request: Original path plus the strip and space rules

        Returns:
            TransformResult holding the original and the new path

        """
        original_path = request.original_path
        base_name = os.path.basename(original_path)
        directory = original_path[: len(original_path) - len(base_name)]

        stem, extension = NameTransformLogic.split_extension(base_name)

        # Strip first, so a removed character next to a space leaves one space to replace
        stem = NameTransformLogic.strip_characters(stem, request.strip_chars)
        stem = NameTransformLogic.replace_spaces(stem, request.space_replacement)

        new_path = f"{directory}{stem}{extension}"
        if new_path != original_path:
            logger.debug("Transform: %s -> %s", original_path, new_path, extra={"dev_only": True})

        return TransformResult(original_path=original_path, new_path=new_path)


def transform(
    original_path: str, space_replacement: str = "", strip_chars: Iterable[str] = ""
) -> str:
    """Return the normalized path for original_path.

    Convenience wrapper around NameTransformLogic.apply().
    """
    request = TransformRequest(
        original_path=original_path,
        space_replacement=space_replacement,
        strip_chars=frozenset(strip_chars),
    )
    return NameTransformLogic.apply(request).new_path
