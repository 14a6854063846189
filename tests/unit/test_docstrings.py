"""Unit tests for docstring extraction and indentation normalization."""

import pytest

from coffeedoc.core.docstrings import extract_docstring, normalize_docstring
from coffeedoc.core.nodes import Comment, Identifier, OtherNode


class TestNormalizeDocstring:
    """Tests for normalize_docstring."""

    def test_strips_common_indentation(self):
        """Test that the first line's indentation is removed from every line."""
        assert normalize_docstring("  Hello\n  World") == "Hello\nWorld"

    def test_drops_leading_blank_lines(self):
        """Test that empty and whitespace-only leading lines are dropped."""
        text = "\n   \n\t\n    Summary\n    Details"
        assert normalize_docstring(text) == "Summary\nDetails"

    def test_preserves_relative_indentation(self):
        """Test that deeper lines keep their extra indentation."""
        text = "\n    Usage:\n\n        run(1, 2)\n    Done"
        assert normalize_docstring(text) == "Usage:\n\n    run(1, 2)\nDone"

    def test_under_indented_lines_lose_only_their_spaces(self):
        """Test that lines with less indentation are not cut into."""
        text = "    first\n  second\nthird"
        assert normalize_docstring(text) == "first\nsecond\nthird"

    def test_tabs_are_not_indentation(self):
        """Test that only spaces count toward and are removed as indentation."""
        text = "  one\n\t  two\n  three"
        assert normalize_docstring(text) == "one\n\t  two\nthree"

    def test_trailing_lines_are_kept(self):
        """Test that only leading blank lines are dropped."""
        assert normalize_docstring("\n  text\n  ") == "text\n"

    @pytest.mark.parametrize("text", ["", "\n", "   ", "  \n \n\t"])
    def test_blank_comment_is_none(self, text):
        """Test that a comment holding only blank lines yields None."""
        assert normalize_docstring(text) is None

    @pytest.mark.parametrize(
        "text",
        [
            "  Hello\n  World",
            "\n    Usage:\n\n        run(1, 2)\n    Done\n",
            "    first\n  second\nthird",
            "no indentation\n   at all",
            "\n\n      deep\n   shallow\n         deeper\n",
            " \t mixed\n   lines",
        ],
    )
    def test_idempotent(self, text):
        """Test that normalizing normalized text changes nothing."""
        once = normalize_docstring(text)
        assert normalize_docstring(once) == once


class TestExtractDocstring:
    """Tests for extract_docstring."""

    def test_extracts_from_comment(self):
        """Test that a comment node's text is normalized."""
        node = Comment(text="\n  Module docs\n  more\n")
        assert extract_docstring(node) == "Module docs\nmore\n"

    def test_none_node(self):
        """Test that an absent node has no docstring."""
        assert extract_docstring(None) is None

    @pytest.mark.parametrize(
        "node",
        [Identifier(name="x"), OtherNode(kind="literal")],
    )
    def test_non_comment_node(self, node):
        """Test that nodes other than comments have no docstring."""
        assert extract_docstring(node) is None

    def test_empty_comment(self):
        """Test that an empty comment has no docstring."""
        assert extract_docstring(Comment(text="")) is None

    def test_does_not_touch_node(self):
        """Test that extraction leaves the comment text as it was."""
        node = Comment(text="  raw text")
        extract_docstring(node)
        assert node.text == "  raw text"
