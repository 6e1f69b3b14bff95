from .state import State, Symbol
from .transition import Transition
from .dfa import DFA

__all__ = [
    'DFA',
    'State',
    'Symbol',
    'Transition',
]
