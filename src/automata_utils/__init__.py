"""
automata_utils - finite automata and the classical conversions between them.

Example usage:

    from automata_utils import loader
    dfa = loader.from_json_file("dfa.json")
    dfa.accept("abab")
    # Output: True

    minimal = dfa.minimize()
"""

from automata_utils.ordered_set import OrderedSet
from automata_utils.dfa import DFA, State, Symbol, Transition
from automata_utils.fsm import Automaton, FiniteStateMachine
from automata_utils.nfa import NFA, EpsilonNFA
from automata_utils.exceptions import AutomatonError, LoaderError

__version__ = "0.1.0"

__all__ = [
    "Automaton",
    "DFA",
    "EpsilonNFA",
    "FiniteStateMachine",
    "NFA",
    "OrderedSet",
    "State",
    "Symbol",
    "Transition",
    "AutomatonError",
    "LoaderError",
    "__version__",
]
