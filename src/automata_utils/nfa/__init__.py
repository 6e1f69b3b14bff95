from .nfa import NFA, image, subset_construction
from .nfae import EpsilonNFA

__all__ = [
    'NFA',
    'EpsilonNFA',
    'image',
    'subset_construction',
]
