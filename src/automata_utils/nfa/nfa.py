import copy
import logging
from types import MappingProxyType

import more_itertools

from automata_utils.dfa import DFA, State, Symbol, Transition
from automata_utils.fsm import FiniteStateMachine
from automata_utils.ordered_set import OrderedSet
from automata_utils.utils import STATE_PREFIX, as_symbol, as_symbols

logger = logging.getLogger(__name__)


def image(delta, states, symbol) -> OrderedSet:
    """
    Union of the images of `states` when reading `symbol`.

    States without a transition for `symbol` contribute nothing.

    :param delta: a mapping from Transition(symbol, state) to a set of states
    :param states: an iterable of states
    :param symbol: the symbol to read
    :return: a new OrderedSet
    """
    return OrderedSet(
        more_itertools.flatten(
            delta.get(Transition(symbol, state), ()) for state in states
        )
    )


def subset_construction(
    seed, alphabet, ends, successor, prefix=STATE_PREFIX
) -> DFA:
    """
    Build a DFA whose states are the sets of states ("superstates")
    reachable from `seed`.

    Superstates are explored breadth first, one frontier at a time. Each
    discovered superstate is named `prefix` followed by its discovery
    index, the first one (the seed) being the start state. A superstate is
    an end state iff it contains one of `ends`.

    :param seed: the starting superstate
    :param alphabet: the symbols to explore
    :param ends: the end states of the original automaton
    :param successor: a function (superstate, symbol) -> superstate
    :param prefix: the prefix of the generated state names
    :return: a new DFA
    """
    known = OrderedSet([seed])
    frontier = OrderedSet([seed])
    # Discovery order, used for naming
    discovered = [seed]
    table = {}

    while not frontier.is_empty():
        produced = OrderedSet()
        for superstate in frontier:
            for symbol in alphabet:
                target = successor(superstate, symbol)
                if target.is_empty():
                    continue
                table[Transition(symbol, superstate)] = target
                produced.insert(target)

        frontier = produced.difference(known)
        known.insert_all(frontier)
        discovered.extend(frontier)

    concordance = {
        superstate: State(f"{prefix}{i}") for i, superstate in enumerate(discovered)
    }

    delta = {}
    for transition, target in table.items():
        source = concordance[transition.content]
        delta[Transition(transition.symbol, source)] = concordance[target]

    new_ends = [
        name for superstate, name in concordance.items() if superstate.intersects(ends)
    ]

    logger.debug(
        "Subset construction discovered %d superstates and %d transitions",
        len(concordance),
        len(delta),
    )

    fsm = FiniteStateMachine(concordance.values(), alphabet, new_ends)
    return DFA(concordance[seed], delta, fsm)


class NFA:
    """
    Non-deterministic finite automaton without epsilon transitions.

    `delta` maps Transition(symbol, state) to a non-empty set of image
    states. A missing key means the state has no image for the symbol.
    """

    def __init__(self, starts, delta, fsm: FiniteStateMachine):
        self._starts = OrderedSet(starts)
        self._delta = {t: OrderedSet(images) for t, images in delta.items()}
        self._fsm = FiniteStateMachine(fsm.states, fsm.alphabet, fsm.ends)
        assert self._starts.difference(self._fsm.states).is_empty(), (
            "start states must be states"
        )

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
        if not isinstance(value, NFA):
            return False
        return (
            self._starts == value._starts
            and self._delta == value._delta
            and self._fsm == value._fsm
        )

    def __repr__(self) -> str:
        return (
            f"NFA(starts={self._starts}, states={self.states}, "
            f"ends={self.ends}, transitions={len(self._delta)})"
        )

    def apply_delta(self, symbol, state) -> OrderedSet:
        images = self._delta.get(Transition(as_symbol(symbol), state))
        return images.copy() if images is not None else OrderedSet()

    def step(self, states, symbol) -> OrderedSet:
        return image(self._delta, states, as_symbol(symbol))

    def accept(self, word) -> bool:
        frontier = self._starts
        for symbol in as_symbols(word):
            frontier = image(self._delta, frontier, symbol)
            if frontier.is_empty():
                return False
        return frontier.intersects(self.ends)

    def transpose(self) -> "NFA":
        """
        Reverse every transition and swap start and end states.
        """
        delta = {}
        for transition, images in self._delta.items():
            for target in images:
                key = Transition(transition.symbol, target)
                delta.setdefault(key, OrderedSet()).insert(transition.content)

        return NFA(self.ends, delta, self._fsm.with_ends(self._starts))

    def to_dfa(self) -> DFA:
        return subset_construction(
            self._starts,
            self.alphabet,
            self.ends,
            lambda superstate, symbol: image(self._delta, superstate, symbol),
        )

    def copy(self) -> "NFA":
        return copy.deepcopy(self)
