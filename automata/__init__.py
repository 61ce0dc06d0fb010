from .dfa import DFA
from .epsilon_nfa import EpsilonNFA
from .nfa import NFA
from .transition_table import EPSILON, TransitionTable, canonical_pair

__all__ = ['DFA', 'NFA', 'EpsilonNFA', 'EPSILON', 'TransitionTable', 'canonical_pair']
