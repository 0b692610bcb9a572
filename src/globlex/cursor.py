"""Scan cursor over a pattern: remaining input, offsets, and spans."""

from __future__ import annotations

import re
from collections.abc import Callable

from globlex.tokens import Position, Span


class Cursor:
    """Forward-only cursor over pattern text.

    Rules match at the current offset with compiled regular expressions; a
    successful match consumes its text. Line and column are tracked so spans
    stay meaningful for multi-line input.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1

    @property
    def source(self) -> str:
        return self._source

    @property
    def offset(self) -> int:
        return self._pos

    @property
    def remaining(self) -> str:
        return self._source[self._pos :]

    @property
    def parsed(self) -> str:
        """Text consumed so far."""
        return self._source[: self._pos]

    def at_end(self) -> bool:
        return self._pos >= len(self._source)

    def current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def peek(self, count: int = 1) -> str:
        return self._source[self._pos : self._pos + count]

    def startswith(self, text: str) -> bool:
        return self._source.startswith(text, self._pos)

    def match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Match *pattern* at the cursor and consume the matched text."""
        m = pattern.match(self._source, self._pos)
        if m is not None:
            self.consume(m.end() - m.start())
        return m

    def consume(self, count: int) -> str:
        """Advance over *count* characters and return them."""
        end = self._pos + count
        if count < 0 or end > len(self._source):
            raise ValueError(f"cannot consume {count} characters at offset {self._pos}")
        text = self._source[self._pos : end]
        for ch in text:
            if ch == "\n":
                self._line += 1
                self._col = 1
            else:
                self._col += 1
        self._pos = end
        return text

    def position(self) -> Callable[[], Span]:
        """Mark the current position.

        The returned callable builds the span from the mark to wherever the
        cursor is when it is called.
        """
        start = self.current_pos()

        def stamp() -> Span:
            return Span(start, self.current_pos())

        return stamp

    def text(self, span: Span) -> str:
        return self._source[span.start.offset : span.end.offset]
