"""Interactive command that builds a DFA from standard input and tests a word."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from .dfa import DFA


class _TokenStream:
    """Whitespace-separated tokens drawn from lines, with access to the line remainder."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._rest: str | None = None

    def _next_line(self) -> str:
        try:
            return next(self._lines).rstrip("\r\n")
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def token(self) -> str:
        while not (self._rest or "").strip():
            self._rest = self._next_line()
        text = self._rest.lstrip()
        head, _, tail = text.partition(" ")
        parts = text.split(None, 1)
        head = parts[0]
        self._rest = text[len(head):]
        return head

    def count(self, what: str) -> int:
        tok = self.token()
        try:
            return int(tok)
        except ValueError:
            raise ValueError(f"expected a number of {what}, got {tok!r}") from None

    def symbol(self) -> str:
        tok = self.token()
        if len(tok) != 1:
            raise ValueError(f"symbol must be a single character, got {tok!r}")
        return tok

    def line(self) -> str:
        """Skip one character after the last token, then return the rest of that line."""
        if self._rest:
            rest, self._rest = self._rest[1:], None
            return rest
        self._rest = None
        try:
            return next(self._lines).rstrip("\r\n")
        except StopIteration:
            return ""


def _parse(stream: _TokenStream, say: Callable[[str], None]) -> tuple[DFA, str]:
    say("Number of states: ")
    num_states = stream.count("states")
    say("Enter state names (one per line):\n")
    states = {stream.token() for _ in range(num_states)}

    say("Number of alphabet symbols: ")
    num_symbols = stream.count("symbols")
    say("Enter symbols (one per line):\n")
    alphabet = {stream.symbol() for _ in range(num_symbols)}

    say("Number of transitions: ")
    num_transitions = stream.count("transitions")
    say("Enter transitions (format: from_state symbol to_state):\n")
    transitions: dict[tuple[str, str], str] = {}
    for _ in range(num_transitions):
        source = stream.token()
        symbol = stream.symbol()
        transitions[source, symbol] = stream.token()

    say("Enter start state: ")
    start = stream.token()

    say("Number of accept states: ")
    num_accepts = stream.count("accept states")
    say("Enter accept states (one per line):\n")
    accept = {stream.token() for _ in range(num_accepts)}

    say("Enter input string: ")
    word = stream.line()
    return DFA(states, alphabet, transitions, start, accept), word


def read_dfa(lines: Iterable[str]) -> tuple[DFA, str]:
    """Read a DFA description and the word to test from ``lines``.

    Raises ValueError on malformed or truncated input.
    """
    return _parse(_TokenStream(lines), lambda _: None)


def main(argv: list[str] | None = None) -> int:
    """Prompt for a DFA and a word, then print Accepted or Rejected."""
    parser = argparse.ArgumentParser(
        description="Build a DFA from standard input and test whether it accepts a word."
    )
    parser.parse_args(argv)

    def say(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    try:
        dfa, word = _parse(_TokenStream(sys.stdin), say)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print("Accepted" if dfa.accepts(word) else "Rejected")
    return 0


if __name__ == "__main__":
    sys.exit(main())