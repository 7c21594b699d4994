import pytest

from automatakit.cfg import CFG


@pytest.fixture
def anbn():
    return CFG(
        variables={"S"},
        terminals={"a", "b"},
        productions={"S": [["a", "S", "b"], ["a", "b"]]},
        start="S",
    )


def test_balanced_words_derive(anbn):
    assert anbn.is_valid_derivation(["a", "b"])
    assert anbn.is_valid_derivation(["a", "a", "b", "b"])
    assert anbn.is_valid_derivation(("a", "a", "a", "b", "b", "b"))


def test_unbalanced_words_fail(anbn):
    assert not anbn.is_valid_derivation(["a", "b", "b"])
    assert not anbn.is_valid_derivation(["b", "a"])
    assert not anbn.is_valid_derivation(["a", "a", "b"])


def test_empty_input_fails(anbn):
    assert not anbn.is_valid_derivation([])


def test_depth_limit(anbn):
    n = 12
    tokens = ["a"] * n + ["b"] * n
    assert not anbn.is_valid_derivation(tokens, max_depth=n - 2)
    assert not anbn.is_valid_derivation(tokens)
    assert anbn.is_valid_derivation(tokens, max_depth=n)


def test_default_depth_accepts_up_to_ten(anbn):
    tokens = ["a"] * 10 + ["b"] * 10
    assert anbn.is_valid_derivation(tokens)


def test_variable_without_productions_fails():
    grammar = CFG({"S", "T"}, {"x"}, {"S": [["T"]]}, "S")
    assert not grammar.is_valid_derivation(["x"])


def test_empty_production_does_not_match_empty_input():
    grammar = CFG({"S"}, {"x"}, {"S": [[], ["x"]]}, "S")
    assert not grammar.is_valid_derivation([])
    assert grammar.is_valid_derivation(["x"])


def test_empty_production_inside_word():
    grammar = CFG({"S", "E"}, {"x", "y"}, {"S": [["x", "E", "y"]], "E": [[]]}, "S")
    assert grammar.is_valid_derivation(["x", "y"])