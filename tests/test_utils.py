import pytest

from automata_utils import Symbol
from automata_utils.utils import as_symbols, words


def test_as_symbols():
    assert as_symbols("ab") == [Symbol("a"), Symbol("b")]
    assert as_symbols(["ab", Symbol("c")]) == [Symbol("ab"), Symbol("c")]
    assert as_symbols("") == []
    assert as_symbols(Symbol("a")) == [Symbol("a")]
    with pytest.raises(TypeError):
        as_symbols([None])


def test_words():
    assert list(words("ab", 0)) == [""]
    assert list(words("ba", 2)) == ["", "a", "b", "aa", "ab", "ba", "bb"]
    assert len(list(words([Symbol("0"), Symbol("1")], 3))) == 15
