"""Shared pytest fixtures for eql tests."""

from collections.abc import Callable

import pytest

from eql.core import ir
from eql.core.errors import ParseError
from eql.core.parser import tokenize_then_parse


@pytest.fixture
def parse_one() -> Callable[[str], ir.BaseOperation]:
    """Return a helper that parses source holding exactly one statement."""

    def _parse_one(source: str) -> ir.BaseOperation:
        operations = tokenize_then_parse(source)
        assert len(operations) == 1, operations
        return operations[0]

    return _parse_one


@pytest.fixture
def parse_error() -> Callable[[str], ParseError]:
    """Return a helper that parses source expected to fail and returns the error."""

    def _parse_error(source: str) -> ParseError:
        with pytest.raises(ParseError) as exc_info:
            tokenize_then_parse(source)
        return exc_info.value

    return _parse_error
