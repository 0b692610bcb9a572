"""Minimal LSP server for glob pattern lists: diagnostics only.

A pattern list has one glob per line; blank lines and lines starting with
'#' are skipped. Each pattern is tokenized and constructs that silently
degrade to literal text are reported.
"""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from globlex import __version__
from globlex.ast import Bracket, Escape, Not
from globlex.errors import LexError
from globlex.lexer import tokenize
from globlex.tokens import Span

server = LanguageServer("globlex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)

_QUOTES = frozenset("\"'")


def _range(line: int, span: Span) -> Range:
    return Range(
        start=Position(line=line, character=span.start.column - 1),
        end=Position(line=line, character=span.end.column - 1),
    )


def check_pattern(pattern: str, line: int) -> list[Diagnostic]:
    """Return diagnostics for one pattern found on (0-based) *line*."""
    try:
        ast = tokenize(pattern)
    except LexError as exc:
        col = exc.position.column - 1
        return [
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=col + 1),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="globlex",
            )
        ]

    diagnostics: list[Diagnostic] = []
    for node in ast.nodes:
        if isinstance(node, Escape) and node.raw in _QUOTES:
            diagnostics.append(
                Diagnostic(
                    range=_range(line, node.span),
                    message=f"unterminated quote {node.raw} is matched literally",
                    severity=DiagnosticSeverity.Information,
                    source="globlex",
                )
            )
        elif isinstance(node, Bracket) and node.escaped:
            diagnostics.append(
                Diagnostic(
                    range=_range(line, node.span),
                    message="unterminated character class is matched literally",
                    severity=DiagnosticSeverity.Warning,
                    source="globlex",
                )
            )
        elif isinstance(node, Not) and node.value:
            diagnostics.append(
                Diagnostic(
                    range=_range(line, node.span),
                    message="'!' only negates at the start of a pattern; matched literally",
                    severity=DiagnosticSeverity.Information,
                    source="globlex",
                )
            )
    return diagnostics


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize every pattern in the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    for idx, line in enumerate(doc.source.splitlines()):
        pattern = line.rstrip("\r")
        if not pattern.strip() or pattern.startswith("#"):
            continue
        diagnostics.extend(check_pattern(pattern, idx))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
