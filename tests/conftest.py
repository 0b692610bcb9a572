"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from globlex.ast import Ast, Node
from globlex.lexer import tokenize
from globlex.options import Options
from globlex.tokens import NodeKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes a pattern and returns its nodes."""

    def _lex(pattern: str, **options: bool) -> list[Node]:
        return tokenize(pattern, Options(**options)).nodes

    return _lex


@pytest.fixture
def lex_ast():
    """Return a helper that tokenizes a pattern and returns the full AST."""

    def _lex(pattern: str, **options: bool) -> Ast:
        return tokenize(pattern, Options(**options))

    return _lex


def assert_kinds(nodes: list[Node], expected: list[NodeKind]) -> None:
    """Assert that the node kinds match the expected list."""
    actual = [n.kind for n in nodes]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(nodes: list[Node], expected: list[str]) -> None:
    """Assert that the node values match the expected list."""
    actual = [n.value for n in nodes]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_nodes(nodes: list[Node], kind: NodeKind) -> list[Node]:
    """Return all nodes of the given kind."""
    return [n for n in nodes if n.kind == kind]
