import copy
import logging
from types import MappingProxyType

from automata_utils.fsm import FiniteStateMachine
from automata_utils.ordered_set import OrderedSet
from automata_utils.utils import as_symbol, as_symbols
from .state import State, Symbol
from .transition import Transition

logger = logging.getLogger(__name__)


class DFA:
    """
    Deterministic finite automaton.

    `delta` maps Transition(symbol, state) to the image state. It does not
    need to be total: a missing transition rejects any word that needs it.
    """

    def __init__(self, start, delta, fsm: FiniteStateMachine):
        self._start = start
        self._delta = dict(delta)
        self._fsm = FiniteStateMachine(fsm.states, fsm.alphabet, fsm.ends)
        assert start in self._fsm.states, f"start state {start} is not a state"

    @property
    def start(self) -> State:
        return self._start

    @property
    def starts(self) -> OrderedSet:
        return OrderedSet([self._start])

    @property
    def delta(self):
        return MappingProxyType(self._delta)

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
        if not isinstance(value, DFA):
            return False
        return (
            self._start == value._start
            and self._delta == value._delta
            and self._fsm == value._fsm
        )

    def __repr__(self) -> str:
        return (
            f"DFA(start={self._start}, states={self.states}, "
            f"ends={self.ends}, transitions={len(self._delta)})"
        )

    def apply_delta(self, symbol, state):
        """
        Image of `state` when reading `symbol`, or None when undefined.
        """
        return self._delta.get(Transition(as_symbol(symbol), state))

    def accept(self, word) -> bool:
        state = self._start
        for symbol in as_symbols(word):
            state = self._delta.get(Transition(symbol, state))
            if state is None:
                return False
        return state in self.ends

    def transpose(self):
        """
        Reverse every transition and swap start and end states.

        The result recognizes the reversed language. It is generally not
        deterministic, hence an NFA.
        """
        from automata_utils.nfa.nfa import NFA

        delta = {}
        for transition, image in self._delta.items():
            key = Transition(transition.symbol, image)
            delta.setdefault(key, OrderedSet()).insert(transition.content)

        return NFA(self.ends, delta, self._fsm.with_ends([self._start]))

    def minimize(self) -> "DFA":
        """
        Minimize the DFA with Brzozowski's algorithm:
        transpose then determinize, twice.
        """
        dfa = self
        for _ in range(2):
            dfa = dfa.transpose().to_dfa()

        logger.debug(
            "Minimized DFA from %d to %d states", len(self.states), len(dfa.states)
        )
        return dfa

    def to_dfa(self) -> "DFA":
        return self.copy()

    def copy(self) -> "DFA":
        return copy.deepcopy(self)
