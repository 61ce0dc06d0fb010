from typing import Dict, Optional, Set, Tuple

from .automaton import FiniteAutomaton
from .dfa import DFA
from .epsilon_nfa import EpsilonNFA
from .fsa_properties import EPSILON_KEY, detect_automaton_kind, has_epsilon_transitions, validate_fsa_structure
from .nfa import NFA
from .transition_table import EPSILON

AUTOMATON_KINDS = ('dfa', 'nfa', 'enfa')


def _require_valid(fsa: Dict) -> None:
    validation = validate_fsa_structure(fsa)
    if not validation['valid']:
        raise ValueError(f"Invalid FSA structure: {validation['error']}")


def _set_transitions(fsa: Dict) -> Dict[Tuple[str, str], Set[str]]:
    transitions = {}
    for source, moves in fsa['transitions'].items():
        for symbol, targets in moves.items():
            key_symbol = EPSILON if symbol == EPSILON_KEY else symbol
            transitions[(source, key_symbol)] = set(targets)
    return transitions


def dfa_from_dict(fsa: Dict) -> DFA:
    """
    Builds a DFA from the dictionary format.

    Each target list must hold at most one state; an empty list means no transition.

    Raises:
        ValueError: If the structure is invalid or the FSA is not deterministic
    """
    _require_valid(fsa)

    transitions = {}
    for source, moves in fsa['transitions'].items():
        for symbol, targets in moves.items():
            if symbol == EPSILON_KEY and targets:
                raise ValueError("A DFA cannot have epsilon transitions")
            if len(targets) > 1:
                raise ValueError(
                    f"Non-deterministic transition: multiple states for symbol '{symbol}' from state '{source}'"
                )
            if targets:
                transitions[(source, symbol)] = targets[0]

    return DFA(fsa['states'], fsa['alphabet'], transitions, fsa['startingState'], fsa['acceptingStates'])


def nfa_from_dict(fsa: Dict) -> NFA:
    """
    Builds an NFA from the dictionary format.

    Raises:
        ValueError: If the structure is invalid or the FSA has epsilon transitions
    """
    _require_valid(fsa)

    if has_epsilon_transitions(fsa):
        raise ValueError("An NFA cannot have epsilon transitions, use the eNFA engine instead")

    return NFA(fsa['states'], fsa['alphabet'], _set_transitions(fsa),
               fsa['startingState'], fsa['acceptingStates'])


def epsilon_nfa_from_dict(fsa: Dict) -> EpsilonNFA:
    """
    Builds an EpsilonNFA from the dictionary format, where '' keys epsilon transitions.

    Raises:
        ValueError: If the structure is invalid
    """
    _require_valid(fsa)
    return EpsilonNFA(fsa['states'], fsa['alphabet'], _set_transitions(fsa),
                      fsa['startingState'], fsa['acceptingStates'])


def automaton_from_dict(fsa: Dict, kind: Optional[str] = None) -> FiniteAutomaton:
    """
    Builds the engine named by ``kind``, or the most specific one that fits when omitted.

    Args:
        fsa: The FSA dictionary
        kind: One of 'dfa', 'nfa', 'enfa', or None to auto-detect

    Returns:
        FiniteAutomaton: The constructed engine

    Raises:
        ValueError: If the kind is unknown or the FSA does not fit it
    """
    _require_valid(fsa)

    if kind is None:
        kind = detect_automaton_kind(fsa)

    if kind == 'dfa':
        return dfa_from_dict(fsa)
    if kind == 'nfa':
        return nfa_from_dict(fsa)
    if kind == 'enfa':
        return epsilon_nfa_from_dict(fsa)

    raise ValueError(f"Unknown automaton type '{kind}', expected one of {', '.join(AUTOMATON_KINDS)}")


def automaton_to_dict(automaton: FiniteAutomaton) -> Dict:
    """
    Converts an engine back into the dictionary format.

    DFA targets become one-element lists and epsilon transitions are keyed by ''.
    """
    table = automaton.table
    transitions = {state: {} for state in sorted(table.states)}

    for (source, symbol), target in sorted(table.transitions.items(), key=lambda item: item[0]):
        key_symbol = EPSILON_KEY if symbol == EPSILON else symbol
        if isinstance(target, (set, frozenset)):
            targets = sorted(target)
        else:
            targets = [target]
        transitions.setdefault(source, {})[key_symbol] = targets

    return {
        'states': sorted(table.states),
        'alphabet': sorted(symbol for symbol in table.alphabet if symbol != EPSILON),
        'transitions': transitions,
        'startingState': table.start_state,
        'acceptingStates': sorted(table.accepting_states)
    }
