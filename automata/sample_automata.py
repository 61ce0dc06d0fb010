"""Reference automata with known languages, used to exercise the engines."""
from .dfa import DFA
from .epsilon_nfa import EpsilonNFA
from .nfa import NFA
from .transition_table import EPSILON


def a_before_b_dfa() -> DFA:
    """DFA where every 'a' must precede every 'b'."""
    return DFA(
        {0, 1, 2},
        {'a', 'b'},
        {
            (0, 'a'): 0, (0, 'b'): 1,
            (1, 'a'): 2, (1, 'b'): 1,
            (2, 'a'): 2, (2, 'b'): 2,
        },
        0,
        {0, 1}
    )


def same_parity_dfa() -> DFA:
    """DFA where the counts of 'a' and 'b' have the same parity."""
    return DFA(
        {0, 1, 2, 3},
        {'a', 'b'},
        {
            (0, 'a'): 2, (0, 'b'): 1,
            (1, 'a'): 0, (1, 'b'): 3,
            (2, 'a'): 0, (2, 'b'): 3,
            (3, 'a'): 1, (3, 'b'): 2,
        },
        0,
        {0, 3}
    )


def reducible_dfa() -> DFA:
    # 2/3 and 4/5 are indistinguishable
    return DFA(
        {0, 1, 2, 3, 4, 5},
        {'a', 'b'},
        {
            (0, 'a'): 1, (0, 'b'): 4,
            (1, 'a'): 2, (1, 'b'): 3,
            (2, 'a'): 2, (2, 'b'): 2,
            (3, 'a'): 2, (3, 'b'): 3,
            (4, 'a'): 5, (4, 'b'): 4,
            (5, 'a'): 5, (5, 'b'): 4,
        },
        0,
        {2, 3}
    )


def a_before_b_nfa() -> NFA:
    """NFA accepting non-empty strings where every 'a' precedes every 'b'."""
    return NFA(
        {0, 1, 2, 3, 4},
        {'a', 'b'},
        {
            (0, 'a'): {0, 3}, (0, 'b'): {1, 4},
            (1, 'a'): {2}, (1, 'b'): {1, 4},
            (2, 'a'): {2}, (2, 'b'): {2},
            (3, 'a'): {0, 3}, (3, 'b'): {1, 4},
            (4, 'a'): {2}, (4, 'b'): {4},
        },
        0,
        {3, 4}
    )


def zeros_and_ones_epsilon_nfa() -> EpsilonNFA:
    return EpsilonNFA(
        {0, 1, 2, 3},
        {'0', '1'},
        {
            (0, '0'): {0},
            (0, EPSILON): {1},
            (1, '0'): {2},
            (2, '1'): {1},
            (1, EPSILON): {3},
            (3, '0'): {3},
        },
        0,
        {3}
    )
