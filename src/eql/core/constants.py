"""
Reserved vocabulary of the statement grammar.

Keywords select the operation, linkers join lists and list roles, and
terminators end a statement while selecting its modifier.
"""

from .ir import Modifier
from .lexer import WHITESPACE, TokenKind, TokenValue

KEYWORD_ADD = TokenValue.word("Add")
KEYWORD_CREATE = TokenValue.word("Create")
KEYWORD_REMOVE = TokenValue.word("Remove")
KEYWORD_SHOW = TokenValue.word("Show")
KEYWORDS = (KEYWORD_ADD, KEYWORD_CREATE, KEYWORD_REMOVE, KEYWORD_SHOW)

LINKER_AND = TokenValue.word("and")
LINKER_TO = TokenValue.word("to")
LINKER_FROM = TokenValue.word("from")

RESERVED = frozenset(
    {
        KEYWORD_ADD,
        KEYWORD_CREATE,
        KEYWORD_REMOVE,
        KEYWORD_SHOW,
        LINKER_AND,
        LINKER_TO,
        LINKER_FROM,
    }
)

SEPARATOR = TokenValue.punctuation(".")
SEPARATOR_OVERWRITE = TokenValue.punctuation("!")
SEPARATOR_FAIL_SILENTLY = TokenValue.punctuation("?")
SEPARATOR_VALUES = TokenValue.punctuation(",")
TERMINATORS = (SEPARATOR, SEPARATOR_OVERWRITE, SEPARATOR_FAIL_SILENTLY)

TERMINATOR_MODIFIERS = {
    SEPARATOR: Modifier.NONE,
    SEPARATOR_OVERWRITE: Modifier.OVERWRITE,
    SEPARATOR_FAIL_SILENTLY: Modifier.FAIL_SILENTLY,
}

# What may start or continue a list element.
LIST_ELEMENT = (WHITESPACE, TokenValue(TokenKind.WORD))
