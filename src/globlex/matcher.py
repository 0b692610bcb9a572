"""Matcher for runs of plain text between structural glob characters."""

from __future__ import annotations

import re
import threading

# Characters that start some other rule; a text run stops at any of them.
TEXT_STOP_CHARS = "[!*+?$^\"'.\\/"

_lock = threading.Lock()
_cached: re.Pattern[str] | None = None


def _build(stop_chars: str) -> re.Pattern[str]:
    negated = "[^" + "".join(re.escape(ch) for ch in stop_chars) + "]+"
    # An extglob opener "*(" followed by anything is also plain text here.
    return re.compile(r"\*\((?=.)|" + negated, re.DOTALL)


def text_matcher() -> re.Pattern[str]:
    """Return the shared text matcher, building it on first use."""
    global _cached
    if _cached is None:
        with _lock:
            if _cached is None:
                _cached = _build(TEXT_STOP_CHARS)
    return _cached
