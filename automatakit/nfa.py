"""Nondeterministic finite automata, with and without epsilon moves."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass, field

State = str
Symbol = str

EPSILON = ""
"""Symbol under which epsilon transitions are stored."""


@dataclass
class NFA:
    """A nondeterministic finite automaton.

    ``transitions`` maps ``(state, symbol)`` to a set of next states.
    """

    states: Set[State]
    alphabet: Set[Symbol]
    transitions: Mapping[tuple[State, Symbol], Iterable[State]]
    start: State
    accept: Set[State] = field(default_factory=frozenset)

    def _move(self, states: Iterable[State], symbol: Symbol) -> set[State]:
        return {
            target
            for state in states
            for target in self.transitions.get((state, symbol), ())
        }

    def accepts(self, word: str) -> bool:
        """Return whether some run over ``word`` ends in an accept state."""
        current = {self.start}
        for symbol in word:
            current = self._move(current, symbol)
        return not current.isdisjoint(self.accept)


class EpsilonNFA(NFA):
    """An NFA whose ``EPSILON`` transitions are taken without reading input."""

    def epsilon_closure(self, states: Iterable[State]) -> set[State]:
        """Return every state reachable from ``states`` by epsilon moves."""
        closure = set(states)
        queue = deque(closure)
        while queue:
            state = queue.popleft()
            for target in self.transitions.get((state, EPSILON), ()):
                if target not in closure:
                    closure.add(target)
                    queue.append(target)
        return closure

    def accepts(self, word: str) -> bool:
        """Return whether some run over ``word`` ends in an accept state."""
        current = self.epsilon_closure({self.start})
        for symbol in word:
            current = self.epsilon_closure(self._move(current, symbol))
        return not current.isdisjoint(self.accept)