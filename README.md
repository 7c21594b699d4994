# automatakit

automatakit is a small toolkit of machines from formal language theory. Each
machine answers one question: does it accept a given input? It has no
dependencies outside the standard library.

## The machines

- `automatakit.dfa.DFA` is a deterministic finite automaton over
  single-character symbols. `transitions` maps `(state, symbol)` to the next
  state. A missing transition rejects the word.
- `automatakit.nfa.NFA` is a nondeterministic finite automaton. `transitions`
  maps `(state, symbol)` to a collection of next states. A word is accepted
  if some run ends in an accept state.
- `automatakit.nfa.EpsilonNFA` also takes transitions stored under the symbol
  `automatakit.nfa.EPSILON` (the empty string) without reading input. Its
  `epsilon_closure(states)` method returns every state reachable from the
  given states by epsilon moves.
- `automatakit.pda.PDA` is a pushdown automaton that accepts by final state.
  `transitions` maps `(state, input_symbol, stack_top)` to pairs of
  `(next_state, push)`. Use `automatakit.pda.EPSILON` as the input symbol for
  moves that read nothing, and as the stack top when the stack is empty. Each
  move pops the top and pushes `push` so that its first symbol becomes the
  new top. Configurations are explored breadth first for at most `max_steps`
  rounds (10000 by default). If no accepting configuration turns up within
  that limit, the word is rejected.
- `automatakit.cfg.CFG` is a context-free grammar. `productions` maps each
  variable to its right-hand sides. Any symbol not in `terminals` is treated
  as a variable. `is_valid_derivation(tokens, max_depth=10)` searches the
  leftmost derivations of a token sequence and abandons any branch that needs
  more than `max_depth` expansions.
- `automatakit.pattern.Regex` compiles a Python regular expression.
  `matches(text)` is true only when the whole of `text` matches.

All the automata are dataclasses. `DFA`, `NFA`, `EpsilonNFA` and `PDA` have an
`accepts(word)` method. The constructors store states and alphabets as given
and do not check transitions against them.

## Installation

```
pip install .
```

Install the test extra with `pip install .[test]`, then run `pytest`.

## Library use

```python
from automatakit.dfa import DFA

even_ones = DFA(
    states={"even", "odd"},
    alphabet={"0", "1"},
    transitions={
        ("even", "0"): "even",
        ("even", "1"): "odd",
        ("odd", "0"): "odd",
        ("odd", "1"): "even",
    },
    start="even",
    accept={"even"},
)

even_ones.accepts("1010")  # True
even_ones.accepts("100")   # False
```

```python
from automatakit.cfg import CFG

balanced = CFG(
    variables={"S"},
    terminals={"(", ")"},
    productions={"S": [["(", "S", ")", "S"], []]},
    start="S",
)

balanced.is_valid_derivation(["(", ")", "(", ")"])  # True
balanced.is_valid_derivation(["(", "("])            # False
```

```python
from automatakit.pattern import Regex

Regex(r"a+b").matches("aaab")   # True
Regex(r"a+b").matches("aaabc")  # False
```

## Command line

`automatakit-dfa` reads a DFA definition and an input string from standard
input, then prints `Accepted` or `Rejected`:

```
automatakit-dfa
```

It prompts for the following, in this order. Values are separated by
whitespace.

1. the number of states, then the state names
2. the number of alphabet symbols, then the symbols (each a single character)
3. the number of transitions, each given as `from_state symbol to_state`
4. the start state
5. the number of accept states, then the accept states
6. the input string, on the line after the accept states

Answers can be typed in or piped from a file. If a count is not a number, a
symbol is longer than one character, or the input ends early, the command
prints an error to standard error and exits with status 1.

The same parsing is available as `automatakit.cli.read_dfa(lines)`. It takes
an iterable of lines and returns the `DFA` and the word, without prompting.

## Limits

The command line works only with DFAs. NFAs, pushdown automata, grammars and
regular expressions are available from Python but have no command. Machines
cannot be saved to or loaded from files, apart from the DFA text format read
by `automatakit-dfa`.