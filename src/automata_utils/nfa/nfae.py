import copy
from types import MappingProxyType

from automata_utils.dfa import DFA, State, Symbol, Transition
from automata_utils.fsm import FiniteStateMachine
from automata_utils.ordered_set import OrderedSet
from automata_utils.utils import EPSILON, as_symbol, as_symbols
from .nfa import image, subset_construction


class EpsilonNFA:
    """
    Non-deterministic finite automaton with epsilon transitions.

    Same shape as NFA, plus a distinguished `epsilon` symbol whose
    transitions are taken without reading input. The epsilon symbol is
    expected to be part of the alphabet when such transitions exist.
    """

    def __init__(self, starts, delta, fsm: FiniteStateMachine, epsilon=EPSILON):
        self._starts = OrderedSet(starts)
        self._delta = {t: OrderedSet(images) for t, images in delta.items()}
        self._fsm = FiniteStateMachine(fsm.states, fsm.alphabet, fsm.ends)
        self._epsilon = as_symbol(epsilon)
        assert self._starts.difference(self._fsm.states).is_empty(), (
            "start states must be states"
        )

    @property
    def epsilon(self) -> Symbol:
        return self._epsilon

    @property
    def starts(self) -> OrderedSet:
        return self._starts.copy()

    @property
    def delta(self):
        return MappingProxyType(
            {t: images.copy() for t, images in self._delta.items()}
        )

    @property
    def fsm(self) -> FiniteStateMachine:
        return self._fsm

    @property
    def states(self) -> OrderedSet:
        return self._fsm.states

    @property
    def alphabet(self) -> OrderedSet:
        return self._fsm.alphabet

    @property
    def ends(self) -> OrderedSet:
        return self._fsm.ends

    def __contains__(self, item):
        if isinstance(item, State):
            return item in self.states
        elif isinstance(item, Symbol):
            return item in self.alphabet
        elif isinstance(item, Transition):
            return item in self._delta
        else:
            return False

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, EpsilonNFA):
            return False
        return (
            self._starts == value._starts
            and self._delta == value._delta
            and self._fsm == value._fsm
            and self._epsilon == value._epsilon
        )

    def __repr__(self) -> str:
        return (
            f"EpsilonNFA(starts={self._starts}, states={self.states}, "
            f"ends={self.ends}, transitions={len(self._delta)}, "
            f"epsilon={self._epsilon})"
        )

    def apply_delta(self, symbol, state) -> OrderedSet:
        images = self._delta.get(Transition(as_symbol(symbol), state))
        return images.copy() if images is not None else OrderedSet()

    def epsilon_closure(self, states) -> OrderedSet:
        """
        Every state reachable from `states` using epsilon transitions only,
        `states` included.
        """
        closure = OrderedSet(states)
        new_states = closure.copy()
        while not new_states.is_empty():
            new_states = image(self._delta, new_states, self._epsilon).difference(
                closure
            )
            closure.insert_all(new_states)
        return closure

    def step(self, states, symbol) -> OrderedSet:
        """One symbol step from `states`, followed by epsilon closure."""
        return self.epsilon_closure(image(self._delta, states, as_symbol(symbol)))

    def accept(self, word) -> bool:
        frontier = self.epsilon_closure(self._starts)
        for symbol in as_symbols(word):
            frontier = self.epsilon_closure(image(self._delta, frontier, symbol))
        return frontier.intersects(self.ends)

    def to_dfa(self) -> DFA:
        alphabet = self.alphabet.difference([self._epsilon])
        return subset_construction(
            self.epsilon_closure(self._starts),
            alphabet,
            self.ends,
            lambda superstate, symbol: self.epsilon_closure(
                image(self._delta, superstate, symbol)
            ),
        )

    def copy(self) -> "EpsilonNFA":
        return copy.deepcopy(self)
