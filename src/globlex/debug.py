"""Human-readable and JSON dumps of a tokenized pattern."""

from __future__ import annotations

import sys
from dataclasses import asdict, fields
from typing import Any, TextIO

from globlex.ast import Ast, Bracket, Dot, EnclosingContext, Globstar, Node, Qmark
from globlex.tokens import Span


def dump_ast(ast: Ast, *, file: TextIO = sys.stderr) -> None:
    """Print one line per node, then the wrap strings and state flags."""
    file.write(f"Pattern {ast.pattern!r}\n")
    for node in ast.nodes:
        file.write(f"  {_describe(node)} {_span(node.span)}\n")
    if ast.prefix_override is not None:
        file.write(f"  prefix {ast.prefix_override!r}\n")
    if ast.suffix_append:
        file.write(f"  append {ast.suffix_append!r}\n")
    flags = [f.name for f in fields(ast.state) if getattr(ast.state, f.name) is True]
    file.write(f"  state slashes={ast.state.separator_count} {' '.join(flags)}".rstrip())
    file.write("\n")


def _describe(node: Node) -> str:
    label = f"{type(node).__name__}({node.value!r})"
    if isinstance(node, Dot) and node.dotfiles:
        label += " dotfile"
    elif isinstance(node, Globstar):
        inside = [name for name in ("brace", "paren") if getattr(node.inside, name)]
        if inside:
            label += f" in {','.join(inside)}"
    elif isinstance(node, Bracket):
        label += f" negated={node.negated!r} inner={node.inner!r} close={node.close!r}"
        if node.escaped:
            label += " escaped"
    elif isinstance(node, Qmark) and node.parsed:
        label += f" after {node.parsed!r}"
    return label


def _span(span: Span) -> str:
    start, end = span.start, span.end
    return f"{start.line}:{start.column}-{end.line}:{end.column}"


def ast_to_dict(ast: Ast) -> dict[str, Any]:
    """Convert an AST into plain data for JSON output."""
    return {
        "pattern": ast.pattern,
        "nodes": [node_to_dict(node) for node in ast.nodes],
        "prefix": ast.prefix_override,
        "append": ast.suffix_append,
        "state": asdict(ast.state),
    }


def node_to_dict(node: Node) -> dict[str, Any]:
    data: dict[str, Any] = {"kind": node.kind.value}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, Span):
            value = {"start": value.start.offset, "end": value.end.offset}
        elif isinstance(value, EnclosingContext):
            value = asdict(value)
        data[f.name] = value
    return data
