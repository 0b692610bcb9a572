"""Glob pattern lexer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from globlex.ast import Ast
    from globlex.options import Options

__version__ = "0.1.0"


def lex(pattern: str, options: Options | None = None) -> Ast:
    """Tokenize a glob pattern with the built-in rules."""
    from globlex.lexer import tokenize

    return tokenize(pattern, options)
