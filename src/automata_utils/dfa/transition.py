from functools import total_ordering
from typing import Generic, TypeVar

T = TypeVar("T")


@total_ordering
class Transition(Generic[T]):
    """
    The key of a transition table: reading `symbol` from `content`.

    `content` is a State in the tables of DFA and NFA, and a set of states
    (a superstate) while building a DFA by subset construction.
    """

    __slots__ = ("_symbol", "_content")

    def __init__(self, symbol, content: T):
        self._symbol = symbol
        self._content = content

    @property
    def symbol(self):
        return self._symbol

    @property
    def content(self) -> T:
        return self._content

    def is_epsilon_transition(self, epsilon) -> bool:
        return self._symbol == epsilon

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Transition):
            return False
        return self._symbol == value._symbol and self._content == value._content

    def __lt__(self, value: object) -> bool:
        if not isinstance(value, Transition):
            return NotImplemented
        return (self._symbol, self._content) < (value._symbol, value._content)

    def __hash__(self) -> int:
        return hash((self._symbol, self._content))

    def __str__(self) -> str:
        return f"({self._content})-{self._symbol}->"

    def __repr__(self) -> str:
        return f"Transition({self._symbol!r}, {self._content!r})"
