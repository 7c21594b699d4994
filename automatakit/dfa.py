"""Deterministic finite automata."""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import dataclass, field

State = str
Symbol = str


@dataclass
class DFA:
    """A deterministic finite automaton over single-character symbols.

    ``transitions`` maps ``(state, symbol)`` to the next state. A missing
    transition rejects the word.
    """

    states: Set[State]
    alphabet: Set[Symbol]
    transitions: Mapping[tuple[State, Symbol], State]
    start: State
    accept: Set[State] = field(default_factory=frozenset)

    def accepts(self, word: str) -> bool:
        """Return whether the automaton accepts ``word``."""
        current = self.start
        for symbol in word:
            try:
                current = self.transitions[current, symbol]
            except KeyError:
                return False
        return current in self.accept