"""
Text helpers shared by lexer and parser diagnostics.

Columns are counted in grapheme clusters, so a caret line drawn with
these helpers stays aligned under text that uses combining sequences.
"""

from __future__ import annotations

from collections.abc import Sequence

from uniseg.graphemecluster import grapheme_clusters


def grapheme_length(text: str) -> int:
    """Number of user-perceived characters in ``text``."""
    return sum(1 for _ in grapheme_clusters(text))


def format_pointer(text: str, column: int) -> tuple[str, str]:
    """
    Build the caret line segments that underline ``text`` at ``column``.

    Args:
        text: Display text of the token being pointed at
        column: 1-indexed column of the token's first grapheme

    Returns:
        Tuple of (padding, pointer): ``column - 1`` spaces and one ``^``
        per grapheme of ``text``
    """
    return " " * max(column - 1, 0), "^" * grapheme_length(text)


def format_list(items: Sequence[object], sep: str = ", ", linker: str = "and") -> str:
    """
    Join items the way a sentence would list them.

    ``["a"]`` -> ``a``, ``["a", "b"]`` -> ``a and b``,
    ``["a", "b", "c"]`` -> ``a, b, and c``.
    """
    if not items:
        return ""
    *rest, last = items
    if not rest:
        return str(last)
    comma = "" if len(rest) == 1 else ","
    return f"{sep.join(str(item) for item in rest)}{comma} {linker} {last}"
