"""Node types produced by the glob lexer, and the AST result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from globlex.state import LexerState
from globlex.tokens import NodeKind, Span

# Wraps the compiled expression so it matches anything the rest of the
# pattern does not.
NEGATION_OPEN = "(?!^(?:"
NEGATION_CLOSE = ")$).*"


@dataclass(frozen=True, slots=True)
class EnclosingContext:
    """Structural context a globstar was found in."""

    brace: bool = False
    paren: bool = False


@dataclass(frozen=True, slots=True)
class Escape:
    """Escaped character, a bare $ or ^, or an unterminated quote."""

    kind: ClassVar[NodeKind] = NodeKind.ESCAPE

    value: str
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class Quoted:
    """Quoted literal; value has its backslash escapes removed."""

    kind: ClassVar[NodeKind] = NodeKind.QUOTED

    value: str
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class Not:
    """Run of '!'. Empty value when the run was turned into a wrap or dropped."""

    kind: ClassVar[NodeKind] = NodeKind.NOT

    value: str
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class Dot:
    """Run of '.'; dotfiles is True for a single dot opening a path segment."""

    kind: ClassVar[NodeKind] = NodeKind.DOT

    value: str
    raw: str
    span: Span
    dotfiles: bool = False


@dataclass(frozen=True, slots=True)
class Plus:
    kind: ClassVar[NodeKind] = NodeKind.PLUS

    value: str
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class Qmark:
    """Run of '?'; parsed echoes the pattern text before it."""

    kind: ClassVar[NodeKind] = NodeKind.QMARK

    value: str
    raw: str
    span: Span
    parsed: str = ""


@dataclass(frozen=True, slots=True)
class Globstar:
    """Recursive '**'. raw includes any folded '/**' repeats."""

    kind: ClassVar[NodeKind] = NodeKind.GLOBSTAR

    value: str
    raw: str
    span: Span
    parsed: str = ""
    inside: EnclosingContext = EnclosingContext()


@dataclass(frozen=True, slots=True)
class Star:
    kind: ClassVar[NodeKind] = NodeKind.STAR

    value: str
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class Slash:
    kind: ClassVar[NodeKind] = NodeKind.SLASH

    value: str
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class Backslash:
    kind: ClassVar[NodeKind] = NodeKind.BACKSLASH

    value: str
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class Square:
    """One-character class such as [a]; value is the character."""

    kind: ClassVar[NodeKind] = NodeKind.SQUARE

    value: str
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class Bracket:
    """Character class [...].

    negated is "^" or "", close is "]" for a terminated class. escaped is
    True when the class is not properly closed and should be read literally.
    """

    kind: ClassVar[NodeKind] = NodeKind.BRACKET

    value: str
    raw: str
    span: Span
    negated: str = ""
    inner: str = ""
    close: str = ""
    escaped: bool = False


@dataclass(frozen=True, slots=True)
class Text:
    """Literal run of characters no structural rule claims."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    value: str
    raw: str
    span: Span


Node = (
    Escape
    | Quoted
    | Not
    | Dot
    | Plus
    | Qmark
    | Globstar
    | Star
    | Slash
    | Backslash
    | Square
    | Bracket
    | Text
)


@dataclass
class Ast:
    """Ordered nodes for one pattern plus the negation wrap strings.

    prefix_override and suffix_append are set by a leading negation and
    surround whatever expression is compiled from the nodes.
    """

    pattern: str
    state: LexerState
    nodes: list[Node] = field(default_factory=list)
    prefix_override: str | None = None
    suffix_append: str = ""

    @property
    def negated(self) -> bool:
        return self.prefix_override == NEGATION_OPEN

    def kinds(self) -> list[NodeKind]:
        return [node.kind for node in self.nodes]
