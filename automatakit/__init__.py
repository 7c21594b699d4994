"""Finite and pushdown automata, context-free grammars and whole-string regular expressions, with a DFA command."""

__version__ = "0.1.0"