"""Tokenizer options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Option name -> accepted config keys (snake_case and the camelCase
# spellings used by other glob tools).
_KEYS = {
    "strict_open": ("strict_open", "strictOpen"),
    "nonegate": ("nonegate", "noNegate"),
    "noglobstar": ("noglobstar", "noGlobstar"),
}


@dataclass(frozen=True, slots=True)
class Options:
    """Options recognized by the lexer rules.

    strict_open: record that a leading ./ must be matched literally.
    nonegate: keep a leading ! as literal text instead of negating.
    noglobstar: treat ** as a plain star.
    """

    strict_open: bool = False
    nonegate: bool = False
    noglobstar: bool = False

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Options:
        """Build options from a config table, ignoring non-boolean values."""
        values: dict[str, bool] = {}
        for name, keys in _KEYS.items():
            for key in keys:
                value = data.get(key)
                if isinstance(value, bool):
                    values[name] = value
                    break
        return cls(**values)
