import io

import pytest

from automatakit.cli import main, read_dfa

EVEN_A = """2
even
odd
2
a
b
4
even a odd
even b even
odd a even
odd b odd
even
1
even
{word}
"""


def test_read_dfa_builds_machine():
    dfa, word = read_dfa(EVEN_A.format(word="abab").splitlines(keepends=True))
    assert word == "abab"
    assert dfa.start == "even"
    assert dfa.states == {"even", "odd"}
    assert dfa.transitions[("odd", "a")] == "even"
    assert dfa.accepts(word)
    assert not dfa.accepts("a")


def test_read_dfa_tokens_may_share_lines():
    text = "2 s t\n1 x\n1\ns x t\ns\n1 t\nxx\n"
    dfa, word = read_dfa(text.splitlines())
    assert dfa.alphabet == {"x"}
    assert word == "xx"
    assert not dfa.accepts(word)
    assert dfa.accepts("x")


def test_read_dfa_word_may_be_empty_at_end_of_input():
    text = EVEN_A.format(word="").splitlines()[:-1]
    dfa, word = read_dfa(text)
    assert word == ""
    assert dfa.accepts(word)


def test_read_dfa_rejects_long_symbol():
    text = "1\ns\n1\nab\n"
    with pytest.raises(ValueError):
        read_dfa(text.splitlines())


def test_read_dfa_rejects_bad_count():
    with pytest.raises(ValueError):
        read_dfa(["many\n"])


def test_read_dfa_rejects_truncated_input():
    with pytest.raises(ValueError):
        read_dfa(EVEN_A.format(word="a").splitlines()[:5])


@pytest.mark.parametrize("word, verdict", [("aa", "Accepted"), ("ab", "Rejected")])
def test_main_prints_verdict(monkeypatch, capsys, word, verdict):
    monkeypatch.setattr("sys.stdin", io.StringIO(EVEN_A.format(word=word)))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Number of states: ")
    assert out.endswith(verdict + "\n")


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\ns\n"))
    assert main([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err