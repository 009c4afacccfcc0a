"""Yes/no confirmation prompts.

Date: 2026-10-18

The answer is read through a LineReaderProtocol so that interactive mode can
be driven by canned input. Only answers starting with "y" or "Y" confirm;
empty input, end of input and unreadable input all decline.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from sprm.config import AFFIRMATIVE_PREFIX
from sprm.core.errors import PromptReadError
from sprm.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from sprm.services.interfaces import LineReaderProtocol

logger = get_cached_logger(__name__)


class StdinLineReader:
    """Reads answers from a text stream, sys.stdin by default.

    The stream is looked up on every read, so a replaced sys.stdin is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read_line(self) -> str | None:
        stream = self._stream if self._stream is not None else sys.stdin
        if stream is None:
            raise PromptReadError("standard input is not available")
        try:
            line = stream.readline()
        except (OSError, ValueError, UnicodeDecodeError) as e:
            raise PromptReadError(f"cannot read answer: {e}") from e
        return line or None


class CannedLineReader:
    """Replays a fixed list of answers, then reports end of input."""

    def __init__(self, answers: list[str]) -> None:
        self._answers = list(answers)

    def read_line(self) -> str | None:
        if not self._answers:
            return None
        return self._answers.pop(0)


def is_affirmative(answer: str | None) -> bool:
    """Check whether an answer confirms.

    Args:
        answer: The raw line, or None at end of input

    Returns:
        True iff the first character is "y" in any case

    """
    if not answer:
        return False
    return answer[0].lower() == AFFIRMATIVE_PREFIX


def ask_yes_no(prompt: str, reader: LineReaderProtocol, out: TextIO | None = None) -> bool:
    """Print a prompt and read one answer.

    Args:
        prompt: Question shown without a trailing newline
        reader: Source of the answer
        out: Stream for the prompt, sys.stdout by default

    Returns:
        True if the operator confirmed, False otherwise

    """
    out = out if out is not None else sys.stdout
    if prompt:
        out.write(prompt)
        out.flush()

    try:
        answer = reader.read_line()
    except PromptReadError as e:
        logger.warning("Treating unreadable answer as 'no': %s", e)
        return False

    confirmed = is_affirmative(answer)
    logger.debug("Prompt answer %r -> %s", answer, confirmed, extra={"dev_only": True})
    return confirmed
