"""Tests for diagnostic rendering of parse errors."""

from eql.core import ir
from eql.core.errors import EqlError, LexError, ManifestError, ParseError, ParseErrorKind
from eql.core.lexer import tokenize


class TestHierarchy:
    def test_all_errors_share_a_base(self) -> None:
        assert issubclass(LexError, EqlError)
        assert issubclass(ParseError, EqlError)
        assert issubclass(ManifestError, EqlError)

    def test_message_attribute(self) -> None:
        error = ManifestError("bad config")
        assert error.message == "bad config"
        assert str(error) == "bad config"


class TestParseErrorDisplay:
    """``str(error)`` reproduces the source with caret pointers."""

    def test_unexpected_on_keyword_line(self, parse_error) -> None:
        error = parse_error("Show HR!")
        assert str(error).splitlines() == [
            "Error on Show operation on line 1, column 8:",
            "  Show HR!",
            "  ^^^^   ^",
            'Unexpected punctuation token "!"',
            'Expected punctuation token "." or punctuation token "?" instead',
            'punctuation token "!" is not a valid modifier for the operation',
        ]

    def test_unexpected_on_later_line(self, parse_error) -> None:
        error = parse_error("Show\nHR!")
        assert str(error).splitlines() == [
            "Error on Show operation on line 1, column 1:",
            "  Show",
            "  ^^^^",
            'Unexpected punctuation token "!" on line 2, column 3:',
            "  HR!",
            "    ^",
            'Expected punctuation token "." or punctuation token "?" instead',
            'punctuation token "!" is not a valid modifier for the operation',
        ]

    def test_empty_list(self, parse_error) -> None:
        error = parse_error("Add to?")
        assert str(error).splitlines() == [
            "Error on Add operation on line 1, column 5:",
            "  Add to?",
            "  ^^^ ^^",
            'Unexpected word token "to"',
            "Expected any whitespace token or any word token instead",
            'You must specify at least one name before list terminator word token "to"',
        ]

    def test_unterminated(self, parse_error) -> None:
        error = parse_error("Create Science")
        assert str(error).splitlines() == [
            "Error on Create operation on line 1, column 1:",
            "  Create Science",
            "  ^^^^^^",
            'Expected punctuation token ".", punctuation token "!", '
            'or punctuation token "?"',
            "You didn't terminate your operation!",
        ]

    def test_top_level(self, parse_error) -> None:
        error = parse_error("Create Sales.\n  Hello.")
        assert str(error).splitlines() == [
            "Error on line 2, column 3:",
            "    Hello.",
            "    ^^^^^",
            'Expected word token "Add", word token "Create", word token "Remove", '
            'or word token "Show" instead',
            "You must input an operation!",
        ]

    def test_reserved_word_hint(self, parse_error) -> None:
        message = str(parse_error("Create Science to HR."))
        assert 'Unexpected word token "to"' in message
        assert message.endswith('Can\'t use word token "to" in lists, it\'s reserved!')

    def test_invalid_list_hint(self, parse_error) -> None:
        message = str(parse_error("Create Science and and HR."))
        assert message.endswith("The department list you entered is invalid!")


class TestParseErrorConstruction:
    def test_minimal(self) -> None:
        token = tokenize("Show")[0]
        error = ParseError(ParseErrorKind.UNTERMINATED, ir.OperationKind.SHOW, token)
        assert error.expected_tokens is None
        assert str(error) == "Error on Show operation on line 1, column 1:\n  Show\n  ^^^^"
