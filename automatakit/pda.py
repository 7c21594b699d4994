"""Nondeterministic pushdown automata."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass, field
from typing import NamedTuple

State = str
Symbol = str

EPSILON = ""
"""Input symbol for moves that read nothing, and stack top of an empty stack."""

DEFAULT_MAX_STEPS = 10000


class _Config(NamedTuple):
    state: State
    pos: int
    stack: str


@dataclass
class PDA:
    """A pushdown automaton accepting by final state.

    ``transitions`` maps ``(state, input_symbol, stack_top)`` to pairs of
    ``(next_state, push)``. The top is popped and ``push`` is placed on the
    stack so that its first symbol becomes the new top. The search runs
    breadth first for at most ``max_steps`` rounds.
    """

    states: Set[State]
    input_alphabet: Set[Symbol]
    stack_alphabet: Set[Symbol]
    transitions: Mapping[tuple[State, Symbol, Symbol], Iterable[tuple[State, Iterable[Symbol]]]]
    start: State
    start_stack: Symbol
    accept: Set[State] = field(default_factory=frozenset)
    max_steps: int = DEFAULT_MAX_STEPS

    def _successors(self, conf: _Config, symbol: Symbol, pos: int):
        top = conf.stack[-1] if conf.stack else EPSILON
        popped = conf.stack[:-1]
        for next_state, push in self.transitions.get((conf.state, symbol, top), ()):
            yield _Config(next_state, pos, popped + "".join(push)[::-1])

    def accepts(self, word: str) -> bool:
        """Return whether some run consumes ``word`` and reaches an accept state."""
        configs = [_Config(self.start, 0, self.start_stack)]
        for _ in range(self.max_steps):
            if not configs:
                break
            next_configs: list[_Config] = []
            for conf in configs:
                if conf.pos == len(word) and conf.state in self.accept:
                    return True
                next_configs.extend(self._successors(conf, EPSILON, conf.pos))
                if conf.pos < len(word):
                    next_configs.extend(self._successors(conf, word[conf.pos], conf.pos + 1))
            configs = next_configs
        return False