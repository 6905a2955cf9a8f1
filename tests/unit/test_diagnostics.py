"""Tests for the caret pointer and list phrasing helpers."""

from eql.core.diagnostics import format_list, format_pointer, grapheme_length


class TestGraphemeLength:
    def test_ascii(self) -> None:
        assert grapheme_length("Science") == 7

    def test_combining_sequence(self) -> None:
        assert grapheme_length("e\u0301") == 1

    def test_conjoining_jamo(self) -> None:
        assert grapheme_length("\u1100\u1161\u11a8") == 1

    def test_empty(self) -> None:
        assert grapheme_length("") == 0


class TestFormatPointer:
    def test_first_column(self) -> None:
        assert format_pointer("Add", 1) == ("", "^^^")

    def test_padding(self) -> None:
        assert format_pointer("12345", 4) == ("   ", "^^^^^")

    def test_pointer_counts_graphemes(self) -> None:
        assert format_pointer("\u1100\u1161\u11a8", 2) == (" ", "^")

    def test_empty_text(self) -> None:
        assert format_pointer("", 3) == ("  ", "")


class TestFormatList:
    def test_empty(self) -> None:
        assert format_list([]) == ""

    def test_one(self) -> None:
        assert format_list(["Sales"]) == "Sales"

    def test_two(self) -> None:
        assert format_list(["Sales", "HR"]) == "Sales and HR"

    def test_three_uses_oxford_comma(self) -> None:
        assert format_list(["a", "b", "c"]) == "a, b, and c"

    def test_custom_linker(self) -> None:
        assert format_list(["a", "b", "c"], ", ", "or") == "a, b, or c"

    def test_items_are_stringified(self) -> None:
        assert format_list([1, 2]) == "1 and 2"
