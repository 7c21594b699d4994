"""Whole-string regular expression matching."""

from __future__ import annotations

import re


class Regex:
    """A compiled pattern that must match an entire string."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._compiled = re.compile(pattern)

    def __repr__(self) -> str:
        return f"Regex({self.pattern!r})"

    def matches(self, text: str) -> bool:
        """Return whether the whole of ``text`` matches the pattern."""
        return self._compiled.fullmatch(text) is not None