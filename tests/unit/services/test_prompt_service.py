"""
Tests for the yes/no prompt service.

Date: 2026-10-18
"""

from __future__ import annotations

import io
import logging

import pytest

from sprm.core.errors import PromptReadError
from sprm.services.interfaces import LineReaderProtocol
from sprm.services.prompt_service import (
    CannedLineReader,
    StdinLineReader,
    ask_yes_no,
    is_affirmative,
)


class _BrokenReader:
    def read_line(self) -> str | None:
        raise PromptReadError("stdin closed")


class TestIsAffirmative:
    @pytest.mark.parametrize("answer", ["y\n", "Y\n", "yes\n", "YES", "yep", "y"])
    def test_affirmative(self, answer):
        assert is_affirmative(answer) is True

    @pytest.mark.parametrize("answer", ["n\n", "no\n", "\n", "", None, " y\n", "ok\n"])
    def test_negative(self, answer):
        assert is_affirmative(answer) is False


class TestReaders:
    def test_readers_implement_protocol(self):
        assert isinstance(StdinLineReader(), LineReaderProtocol)
        assert isinstance(CannedLineReader([]), LineReaderProtocol)

    def test_stdin_reader_reads_one_line(self):
        reader = StdinLineReader(io.StringIO("y\nn\n"))

        assert reader.read_line() == "y\n"
        assert reader.read_line() == "n\n"
        assert reader.read_line() is None

    def test_stdin_reader_uses_current_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("yes\n"))
        assert StdinLineReader().read_line() == "yes\n"

    def test_closed_stream_raises_prompt_read_error(self):
        stream = io.StringIO("y\n")
        stream.close()

        with pytest.raises(PromptReadError):
            StdinLineReader(stream).read_line()

    def test_canned_reader_runs_out(self):
        reader = CannedLineReader(["y\n"])

        assert reader.read_line() == "y\n"
        assert reader.read_line() is None


class TestAskYesNo:
    def test_writes_prompt_and_confirms(self):
        out = io.StringIO()

        assert ask_yes_no("Proceed? ", CannedLineReader(["y\n"]), out) is True
        assert out.getvalue() == "Proceed? "

    def test_end_of_input_declines(self):
        assert ask_yes_no("Proceed? ", CannedLineReader([]), io.StringIO()) is False

    def test_unreadable_input_declines_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert ask_yes_no("Proceed? ", _BrokenReader(), io.StringIO()) is False

        assert "stdin closed" in caplog.text
