"""Tests for comma/"and" separated list parsing."""

import pytest

from eql.core.constants import LINKER_FROM, LINKER_TO, SEPARATOR, TERMINATORS
from eql.core.errors import ParseErrorKind
from eql.core.lexer import TokenValue, tokenize
from eql.core.parser_impl import ListError, parse_list
from eql.core.parser_impl.lists import join_element


class TestParseList:
    """Successful list parses."""

    def test_usual_case(self) -> None:
        tokens = tokenize("Moraru   Mihaela  , Mircea Ioan and Amalia Brad.")
        elements, i = parse_list(tokens, (SEPARATOR,))
        assert elements == ["Moraru Mihaela", "Mircea Ioan", "Amalia Brad"]
        assert i == len(tokens) - 1
        assert tokens[i].value == SEPARATOR

    def test_single_element(self) -> None:
        tokens = tokenize("Science!")
        assert parse_list(tokens, TERMINATORS) == (["Science"], 1)

    def test_runs_to_end_without_terminator(self) -> None:
        tokens = tokenize("Science and Engineering")
        elements, i = parse_list(tokens, TERMINATORS)
        assert elements == ["Science", "Engineering"]
        assert i == len(tokens)

    def test_stops_at_custom_terminator(self) -> None:
        tokens = tokenize("Mihai and Andrei to Science.")
        elements, i = parse_list(tokens, (LINKER_TO,))
        assert elements == ["Mihai", "Andrei"]
        assert tokens[i].value == LINKER_TO

    def test_oxford_comma(self) -> None:
        tokens = tokenize("Science, Engineering, and Physics.")
        elements, _ = parse_list(tokens, TERMINATORS)
        assert elements == ["Science", "Engineering", "Physics"]

    def test_elements_across_lines(self) -> None:
        tokens = tokenize("Science\n and\n Human  Resources.")
        elements, _ = parse_list(tokens, TERMINATORS)
        assert elements == ["Science", "Human Resources"]

    def test_ideographs_join_without_space(self) -> None:
        tokens = tokenize("孫德明 and 李.")
        elements, _ = parse_list(tokens, TERMINATORS)
        assert elements == ["孫德明", "李"]


class TestParseListErrors:
    """Malformed and empty lists."""

    def _error(self, source: str, terminators=TERMINATORS) -> ListError:
        with pytest.raises(ListError) as exc_info:
            parse_list(tokenize(source), terminators)
        return exc_info.value

    def test_empty_before_terminator(self) -> None:
        error = self._error(" .")
        assert error.kind is ParseErrorKind.EMPTY_LIST
        assert error.unexpected_token.value == SEPARATOR

    def test_no_tokens(self) -> None:
        error = self._error("")
        assert error.kind is ParseErrorKind.EMPTY_LIST
        assert error.unexpected_token is None

    def test_leading_separator(self) -> None:
        error = self._error(", Science.")
        assert error.kind is ParseErrorKind.EMPTY_LIST
        assert error.unexpected_token.value == TokenValue.punctuation(",")

    @pytest.mark.parametrize(
        "source",
        ["Mama, and, Tata.", "Mama and and Tata.", "Mama,, Tata.", "Mama and, Tata."],
    )
    def test_consecutive_separators(self, source: str) -> None:
        assert self._error(source).kind is ParseErrorKind.MALFORMED_LIST

    @pytest.mark.parametrize("source", ["Mama, Tata and.", "Mama, Tata,."])
    def test_dangling_separator(self, source: str) -> None:
        error = self._error(source)
        assert error.kind is ParseErrorKind.MALFORMED_LIST
        assert error.unexpected_token.value in (
            TokenValue.word("and"),
            TokenValue.punctuation(","),
        )

    def test_reserved_word(self) -> None:
        error = self._error("Science to Engineering.")
        assert error.kind is ParseErrorKind.MALFORMED_LIST
        assert error.unexpected_token.value == LINKER_TO

    def test_reserved_word_is_fine_as_terminator(self) -> None:
        elements, _ = parse_list(tokenize("Michael from Physics."), (LINKER_FROM, *TERMINATORS))
        assert elements == ["Michael"]

    def test_disallowed_punctuation(self) -> None:
        error = self._error("Mihai and Andrei.", (LINKER_TO,))
        assert error.kind is ParseErrorKind.MALFORMED_LIST
        assert error.unexpected_token.value == SEPARATOR


class TestJoinElement:
    def test_collapses_whitespace(self) -> None:
        assert join_element(tokenize("Human \t Resources")) == "Human Resources"

    def test_drops_trailing_whitespace(self) -> None:
        tokens = tokenize("Human Resources ,")[:-1]
        assert join_element(tokens) == "Human Resources"
