from itertools import product

import more_itertools

from automata_utils.dfa.state import Symbol

# Default value of the epsilon symbol
EPSILON = "ε"

# Prefix of the state names synthesized by subset construction
STATE_PREFIX = "q_"


def as_symbol(symbol):
    if isinstance(symbol, Symbol):
        return symbol
    if isinstance(symbol, str):
        return Symbol(symbol)
    raise TypeError(f"Cannot read {symbol!r} as a symbol")


def as_symbols(word):
    """
    Convert a word to a list of symbols.

    A string is read one character per symbol; any other iterable is read
    one item (a Symbol or a string token) per symbol.

    :param word: a string, or an iterable of Symbol objects or strings
    :return: a list of Symbol objects
    """
    if isinstance(word, Symbol):
        return [word]
    return [as_symbol(s) for s in word]


def words(alphabet, max_length):
    """
    Enumerate every word over `alphabet` of length 0 to `max_length`,
    shortest first.

    Example:

        list(words("ab", 1))
        # Output: ['', 'a', 'b']

    :param alphabet: an iterable of symbols (Symbol objects or strings)
    :param max_length: the length of the longest word
    :return: a generator of strings
    """
    symbols = sorted(str(s) for s in alphabet)
    for w in more_itertools.flatten(
        product(symbols, repeat=n) for n in range(max_length + 1)
    ):
        yield "".join(w)
