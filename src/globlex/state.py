"""Per-pattern scan state shared by the lexer rules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LexerState:
    """Mutable state for one tokenization run.

    The has_* flags only ever go from False to True. The context stack holds
    structural contexts ("bracket", "brace", "paren", ...) opened by
    extension rules; the built-in rules only query it.
    """

    separator_count: int = 0
    is_dotfile: bool = False
    has_wildcard_star: bool = False
    has_globstar: bool = False
    has_metachar: bool = False
    has_qmark: bool = False
    strict_open: bool = False
    add_prefix: bool = False
    paths: list[str] = field(default_factory=list)
    contexts: list[str] = field(default_factory=list)

    def push_context(self, name: str) -> None:
        self.contexts.append(name)

    def pop_context(self, name: str) -> None:
        """Close the innermost context called *name*."""
        for idx in range(len(self.contexts) - 1, -1, -1):
            if self.contexts[idx] == name:
                del self.contexts[idx]
                return
        raise ValueError(f"context {name!r} is not open")

    def is_inside(self, name: str) -> bool:
        return name in self.contexts
