"""Node kinds, source positions, and spans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(Enum):
    PREFIX = "prefix"  # advisory: leading ./ or .\ (no node)
    ESCAPE = "escape"  # \x, $ or ^ (value is the escaped character)
    QUOTED = "quoted"  # "..." or '...' (value is unescaped content)
    NOT = "not"  # !
    DOT = "dot"  # .
    PLUS = "plus"  # +
    QMARK = "qmark"  # ?
    GLOBSTAR = "globstar"  # **
    STAR = "star"  # *
    SLASH = "slash"  # /
    BACKSLASH = "backslash"  # \
    SQUARE = "square"  # [x]
    BRACKET = "bracket"  # [...]
    TEXT = "text"  # everything else


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based code point offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position
