"""
Test module for NameTransformLogic.

Date: 2026-10-18
"""

import pytest

from sprm.core.rename.data_classes import TransformRequest
from sprm.modules.logic.name_transform_logic import NameTransformLogic, transform


class TestSplitExtension:
    """Stem/extension split."""

    @pytest.mark.parametrize(
        ("base_name", "expected"),
        [
            ("My File.TXT", ("My File", ".TXT")),
            ("archive.tar.gz", ("archive.tar", ".gz")),
            ("README", ("README", "")),
            (".gitignore", (".gitignore", "")),
            (".my file.txt", (".my file", ".txt")),
            ("..hidden", ("..hidden", "")),
            ("trailing.", ("trailing", ".")),
        ],
    )
    def test_split(self, base_name, expected):
        assert NameTransformLogic.split_extension(base_name) == expected


class TestTransform:
    """End-to-end path transformation."""

    def test_dash_keeps_directory_and_extension(self):
        assert transform("/tmp/My File.TXT", space_replacement="-") == "/tmp/My-File.TXT"

    def test_strip_then_remove_spaces(self):
        assert transform("a (1).jpg", space_replacement="", strip_chars="()") == "a1.jpg"

    def test_underscore(self):
        assert transform("some dir/my  song.mp3", "_") == "some dir/my__song.mp3"

    def test_default_removes_spaces(self):
        assert transform("a b c") == "abc"

    def test_directory_spaces_untouched(self):
        assert transform("My Docs/My File.txt", "-") == "My Docs/My-File.txt"

    def test_extension_excluded_from_strip_and_spaces(self):
        assert transform("x y.t x t", "-", strip_chars="t") == "x-y.t x t"

    def test_no_extension_transformed_wholly(self):
        assert transform("Read Me (draft)", "_", "()") == "Read_Me_draft"

    def test_dotfile_is_not_all_extension(self):
        assert transform(".git ignore", "-", "") == ".git-ignore"
        assert transform(".gitignore", "-", "i") == ".gtgnore"

    def test_strip_all_occurrences_of_each_character(self):
        assert transform("a!b!c?d.txt", strip_chars="!?") == "abcd.txt"

    def test_strip_before_replace_leaves_single_separator(self):
        assert transform("a (b.txt", "-", "(") == "a-b.txt"
        assert transform("a ( b.txt", "-", "(") == "a--b.txt"

    def test_strip_space_character(self):
        assert transform("a b.txt", "-", " ") == "ab.txt"

    def test_strip_chars_are_literal(self):
        assert transform("a.b*c[d].txt", strip_chars=".*[]") == "abcd.txt"

    def test_empty_rules_are_noop(self):
        assert transform("clean_name.txt", "", "") == "clean_name.txt"

    @pytest.mark.parametrize(
        "path",
        ["/tmp/My File.TXT", "a (1).jpg", ".my file.tar.gz", "no ext here", "dir/x  y"],
    )
    def test_idempotent(self, path):
        once = transform(path, "-", "()")
        assert transform(once, "-", "()") == once

    def test_pure(self):
        request = TransformRequest("a b.txt", "_", frozenset("x"))
        assert NameTransformLogic.apply(request) == NameTransformLogic.apply(request)


class TestApply:
    """NameTransformLogic.apply() result object."""

    def test_result_fields(self):
        result = NameTransformLogic.apply(TransformRequest("dir/a b.txt", "-"))

        assert result.original_path == "dir/a b.txt"
        assert result.new_path == "dir/a-b.txt"
        assert result.changed is True

    def test_unchanged(self):
        result = NameTransformLogic.apply(TransformRequest("dir/ab.txt", "-"))

        assert result.new_path == "dir/ab.txt"
        assert result.changed is False
