"""Context-free grammars with bounded leftmost derivation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass

Symbol = str
Production = Sequence[Symbol]


@dataclass
class CFG:
    """A context-free grammar.

    ``productions`` maps each variable to the right-hand sides it may be
    rewritten to. Symbols not in ``terminals`` are treated as variables.
    """

    variables: Set[Symbol]
    terminals: Set[Symbol]
    productions: Mapping[Symbol, Sequence[Production]]
    start: Symbol

    def is_valid_derivation(self, tokens: Sequence[Symbol], max_depth: int = 10) -> bool:
        """Return whether ``tokens`` derives from the start symbol.

        The search expands the leftmost variable and gives up on any branch
        that needs more than ``max_depth`` expansions.
        """
        return self._derive((self.start,), tuple(tokens), 0, max_depth)

    def _derive(
        self,
        sentential: tuple[Symbol, ...],
        tokens: tuple[Symbol, ...],
        depth: int,
        max_depth: int,
    ) -> bool:
        if depth > max_depth:
            return False
        while sentential and tokens and sentential[0] in self.terminals:
            if sentential[0] != tokens[0]:
                return False
            sentential, tokens = sentential[1:], tokens[1:]
        if not sentential and not tokens:
            return True
        if not sentential or not tokens:
            return False
        head, rest = sentential[0], sentential[1:]
        return any(
            self._derive(tuple(body) + rest, tokens, depth + 1, max_depth)
            for body in self.productions.get(head, ())
        )