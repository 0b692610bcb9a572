"""Glob lexer rules and the ordered rule set.

Each rule looks at the cursor, and either consumes input and returns a node
(or None, for rules that only update state), or leaves the cursor where it
was. The lexer tries rules in order and the first one that consumes input
wins, so the order below is what disambiguates glob syntax.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from globlex.ast import (
    NEGATION_CLOSE,
    NEGATION_OPEN,
    Backslash,
    Bracket,
    Dot,
    EnclosingContext,
    Escape,
    Globstar,
    Node,
    Not,
    Plus,
    Qmark,
    Quoted,
    Slash,
    Square,
    Star,
    Text,
)
from globlex.matcher import text_matcher

if TYPE_CHECKING:
    from globlex.lexer import Lexer

Rule = Callable[["Lexer"], "Node | None"]

_PREFIX = re.compile(r"\.[\\/]")
_ESCAPE = re.compile(r"\\(.)|([$^])", re.DOTALL)
_QUOTE = re.compile(r"[\"']")
_NOT = re.compile(r"!+")
_DOT = re.compile(r"\.+")
_PLUS = re.compile(r"\+(?!\()")
_QMARK = re.compile(r"\?+(?!\()")
_GLOBSTAR = re.compile(r"\*{2}(?![*(])(?=[,)/]|\Z)")
_STAR = re.compile(r"\*(?![*(])|\*{3,}(?!\()|\*{2}(?![(/]|\Z)|\*(?=\*\()")
_SLASH = re.compile(r"/")
_BACKSLASH = re.compile(r"\\+(?![*+?(){}\[\]'\"])")
_SQUARE = re.compile(r"\[([^!^\\])\]")
_BRACKET = re.compile(r"\[([!^]?)([^\]]+|\]-)(\]|[^*+?]+)|\[")
_MULTI_BACKSLASH = re.compile(r"\\\\+")


# ----------------------------------------------------------------------
# Rules
# ----------------------------------------------------------------------


def prefix(lx: Lexer) -> None:
    """Leading ./ or .\\ only sets flags; it never consumes input."""
    if lx.cursor.parsed:
        return None
    if _PREFIX.match(lx.cursor.source, lx.cursor.offset) is None:
        return None
    lx.state.strict_open = lx.options.strict_open
    lx.state.add_prefix = True
    return None


def escape(lx: Lexer) -> Escape | None:
    if lx.state.is_inside("bracket"):
        return None
    pos = lx.cursor.position()
    m = lx.cursor.match(_ESCAPE)
    if m is None:
        return None
    return Escape(m.group(2) or m.group(1), m.group(0), pos())


def quoted(lx: Lexer) -> Escape | Quoted | None:
    pos = lx.cursor.position()
    m = lx.cursor.match(_QUOTE)
    if m is None:
        return None

    quote = m.group(0)
    if quote not in lx.cursor.remaining:
        # Unterminated: the quote is just a literal character
        return Escape(quote, quote, pos())

    value = _scan_quoted(lx, quote)
    return Quoted(value, lx.cursor.text(pos()), pos())


def _scan_quoted(lx: Lexer, quote: str) -> str:
    """Consume through the closing *quote*, returning unescaped content."""
    chars = []
    while not lx.cursor.at_end():
        ch = lx.cursor.consume(1)
        if ch == quote:
            break
        if ch == "\\" and not lx.cursor.at_end():
            ch = lx.cursor.consume(1)
        chars.append(ch)
    return "".join(chars)


def not_(lx: Lexer) -> Not | None:
    parsed = lx.cursor.parsed
    pos = lx.cursor.position()
    m = lx.cursor.match(_NOT)
    if m is None:
        return None

    raw = m.group(0)
    value = raw
    is_negated = len(raw) % 2 == 1
    if parsed == "" and not is_negated:
        value = ""

    # Nothing parsed yet, so the whole pattern gets wrapped in a negation
    if parsed == "" and is_negated and not lx.options.nonegate:
        lx.ast.prefix_override = NEGATION_OPEN
        lx.ast.suffix_append = NEGATION_CLOSE
        value = ""

    return Not(value, raw, pos())


def dot(lx: Lexer) -> Dot | None:
    parsed = lx.cursor.parsed
    pos = lx.cursor.position()
    m = lx.cursor.match(_DOT)
    if m is None:
        return None

    value = m.group(0)
    lx.state.is_dotfile = value == "." and (parsed == "" or parsed.endswith("/"))
    return Dot(value, value, pos(), dotfiles=lx.state.is_dotfile)


def plus(lx: Lexer) -> Plus | None:
    pos = lx.cursor.position()
    m = lx.cursor.match(_PLUS)
    if m is None:
        return None
    return Plus(m.group(0), m.group(0), pos())


def qmark(lx: Lexer) -> Qmark | None:
    parsed = lx.cursor.parsed
    pos = lx.cursor.position()
    m = lx.cursor.match(_QMARK)
    if m is None:
        return None

    lx.state.has_metachar = True
    lx.state.has_qmark = True
    return Qmark(m.group(0), m.group(0), pos(), parsed=parsed)


def globstar(lx: Lexer) -> Globstar | Star | None:
    parsed = lx.cursor.parsed
    pos = lx.cursor.position()
    m = lx.cursor.match(_GLOBSTAR)
    if m is None:
        return None

    lx.state.has_metachar = True

    # a/**/**/b is the same as a/**/b
    while lx.cursor.startswith("/**/"):
        lx.cursor.consume(3)

    span = pos()
    raw = lx.cursor.text(span)
    if lx.options.noglobstar:
        lx.state.has_wildcard_star = True
        return Star("*", raw, span)

    lx.state.has_globstar = True
    inside = EnclosingContext(
        brace=lx.state.is_inside("brace"),
        paren=lx.state.is_inside("paren"),
    )
    return Globstar("**", raw, span, parsed=parsed, inside=inside)


def star(lx: Lexer) -> Star | None:
    pos = lx.cursor.position()
    m = lx.cursor.match(_STAR)
    if m is None:
        return None

    lx.state.has_metachar = True
    lx.state.has_wildcard_star = True
    return Star(m.group(0), m.group(0), pos())


def slash(lx: Lexer) -> Slash | None:
    pos = lx.cursor.position()
    m = lx.cursor.match(_SLASH)
    if m is None:
        return None

    lx.state.separator_count += 1
    return Slash(m.group(0), m.group(0), pos())


def backslash(lx: Lexer) -> Backslash | None:
    pos = lx.cursor.position()
    m = lx.cursor.match(_BACKSLASH)
    if m is None:
        return None

    raw = m.group(0)
    if lx.state.is_inside("bracket"):
        value = "\\"
    elif len(raw) > 1:
        value = "\\\\"
    else:
        value = raw
    return Backslash(value, raw, pos())


def square(lx: Lexer) -> Square | None:
    if lx.state.is_inside("bracket"):
        return None
    pos = lx.cursor.position()
    m = lx.cursor.match(_SQUARE)
    if m is None:
        return None
    return Square(m.group(1), m.group(0), pos())


def bracket(lx: Lexer) -> Bracket | None:
    pos = lx.cursor.position()
    m = lx.cursor.match(_BRACKET)
    if m is None:
        return None

    value = m.group(0)
    negated = "^" if m.group(1) else ""
    body = m.group(2) or ""
    inner = _collapse_backslashes(body)
    close = m.group(3) or ""

    if body and len(inner) < len(body):
        value = _collapse_backslashes(value)

    if inner == "" and lx.cursor.startswith("\\]"):
        # Empty class followed by an escaped ]: read up to the next literal ]
        inner = lx.cursor.consume(2)
        rest = lx.cursor.remaining
        idx = rest.find("]")
        if idx == -1:
            inner += lx.cursor.consume(len(rest))
        else:
            inner += lx.cursor.consume(idx)
            close = lx.cursor.consume(1)
        value = lx.cursor.text(pos())

    span = pos()
    return Bracket(
        value,
        lx.cursor.text(span),
        span,
        negated=negated,
        inner=inner,
        close=close,
        escaped=close != "]",
    )


def _collapse_backslashes(text: str) -> str:
    return _MULTI_BACKSLASH.sub(lambda _: "\\\\", text, count=1)


def text(lx: Lexer) -> Text | None:
    if lx.state.is_inside("bracket"):
        return None
    if lx.cursor.at_end():
        return None
    pos = lx.cursor.position()
    m = lx.cursor.match(text_matcher())
    if m is not None:
        value = m.group(0)
    else:
        # Nothing else claims this character (a trailing "*(", "?(", "+(")
        value = lx.cursor.consume(1)
    return Text(value, value, pos())


# ----------------------------------------------------------------------
# Rule set
# ----------------------------------------------------------------------

RULE_ORDER: tuple[tuple[str, Rule], ...] = (
    ("prefix", prefix),
    ("escape", escape),
    ("quoted", quoted),
    ("not", not_),
    ("dot", dot),
    ("plus", plus),
    ("qmark", qmark),
    ("globstar", globstar),
    ("star", star),
    ("slash", slash),
    ("backslash", backslash),
    ("square", square),
    ("bracket", bracket),
    ("text", text),
)


class RuleSet:
    """Named rules in priority order."""

    def __init__(self, rules: tuple[tuple[str, Rule], ...] = ()) -> None:
        self._rules: list[tuple[str, Rule]] = list(rules)

    def __iter__(self) -> Iterator[tuple[str, Rule]]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return any(n == name for n, _ in self._rules)

    def names(self) -> list[str]:
        return [name for name, _ in self._rules]

    def get(self, name: str) -> Rule:
        return self._rules[self._index(name)][1]

    def set(self, name: str, rule: Rule, *, before: str | None = None) -> RuleSet:
        """Replace the rule called *name*, or add it.

        A new rule goes at the end, or just ahead of the rule named *before*.
        Replacing keeps the existing position unless *before* is given.
        """
        if name in self:
            if before is None:
                self._rules[self._index(name)] = (name, rule)
                return self
            self.remove(name)
        if before is None:
            self._rules.append((name, rule))
        else:
            self._rules.insert(self._index(before), (name, rule))
        return self

    def remove(self, name: str) -> RuleSet:
        del self._rules[self._index(name)]
        return self

    def copy(self) -> RuleSet:
        return RuleSet(tuple(self._rules))

    def _index(self, name: str) -> int:
        for idx, (n, _) in enumerate(self._rules):
            if n == name:
                return idx
        raise KeyError(f"no rule named {name!r}")


def default_rules() -> RuleSet:
    """Return a fresh rule set with the built-in rules in priority order."""
    return RuleSet(RULE_ORDER)
