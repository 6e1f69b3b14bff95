from typing import Mapping, Protocol, runtime_checkable

from automata_utils.ordered_set import OrderedSet


class FiniteStateMachine:
    """
    The static shape shared by every automaton: its states, its alphabet
    and its end (accepting) states.
    """

    __slots__ = ("_states", "_alphabet", "_ends")

    def __init__(self, states, alphabet, ends):
        self._states = OrderedSet(states)
        self._alphabet = OrderedSet(alphabet)
        self._ends = OrderedSet(ends)

    @property
    def states(self) -> OrderedSet:
        return self._states.copy()

    @property
    def alphabet(self) -> OrderedSet:
        return self._alphabet.copy()

    @property
    def ends(self) -> OrderedSet:
        return self._ends.copy()

    def with_ends(self, ends) -> "FiniteStateMachine":
        return FiniteStateMachine(self._states, self._alphabet, ends)

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, FiniteStateMachine):
            return False
        return (
            self._states == value._states
            and self._alphabet == value._alphabet
            and self._ends == value._ends
        )

    def __hash__(self) -> int:
        return hash((self._states, self._alphabet, self._ends))

    def __repr__(self) -> str:
        return (
            f"FiniteStateMachine(states={self._states}, "
            f"alphabet={self._alphabet}, ends={self._ends})"
        )


@runtime_checkable
class Automaton(Protocol):
    """What DFA, NFA and EpsilonNFA have in common."""

    @property
    def starts(self) -> OrderedSet: ...

    @property
    def delta(self) -> Mapping: ...

    @property
    def fsm(self) -> FiniteStateMachine: ...

    @property
    def states(self) -> OrderedSet: ...

    @property
    def alphabet(self) -> OrderedSet: ...

    @property
    def ends(self) -> OrderedSet: ...

    def accept(self, word) -> bool: ...

    def to_dfa(self): ...
