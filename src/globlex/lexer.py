"""Glob lexer: converts a pattern into an ordered sequence of nodes."""

from __future__ import annotations

from collections.abc import Callable

from globlex.ast import Ast
from globlex.cursor import Cursor
from globlex.errors import LexError
from globlex.options import Options
from globlex.rules import RuleSet, default_rules
from globlex.state import LexerState


class Lexer:
    """Tokenize one glob pattern.

    Rules are tried in order at each position; the first rule that consumes
    input wins and its node (if any) is appended. Rules that return without
    consuming are skipped, which is how advisory rules such as "prefix" only
    update state.
    """

    def __init__(
        self,
        pattern: str,
        options: Options | None = None,
        rules: RuleSet | None = None,
    ) -> None:
        self.options = options if options is not None else Options()
        self.cursor = Cursor(pattern)
        self.state = LexerState()
        self.ast = Ast(pattern, self.state)
        self._rules = rules if rules is not None else default_rules()

    def tokenize(self) -> Ast:
        """Tokenize the full pattern and return the AST."""
        while not self.cursor.at_end():
            self._step()
        return self.ast

    def _step(self) -> None:
        start = self.cursor.offset
        for name, rule in self._rules:
            node = rule(self)
            if self.cursor.offset > start:
                if node is not None:
                    self.ast.nodes.append(node)
                return
            if node is not None:
                raise self._error(f"rule {name!r} produced a node without consuming input")

        ch = self.cursor.peek()
        raise self._error(f"no rule matches {ch!r}")

    def _error(self, message: str) -> LexError:
        return LexError(message, self.cursor.current_pos(), self.cursor.source)


def tokenize(
    pattern: str,
    options: Options | None = None,
    extend: Callable[[RuleSet], None] | None = None,
) -> Ast:
    """Tokenize *pattern* and return its AST.

    *extend* receives a fresh copy of the default rules before scanning
    starts and may add, replace, or remove rules.
    """
    rules = default_rules()
    if extend is not None:
        extend(rules)
    return Lexer(pattern, options, rules).tokenize()
