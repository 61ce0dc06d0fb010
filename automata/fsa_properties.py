from typing import Dict

from .transition_table import EPSILON

# Epsilon transitions are keyed by the empty string in the dictionary format
EPSILON_KEY = ''

REQUIRED_KEYS = ['states', 'alphabet', 'transitions', 'startingState', 'acceptingStates']


def validate_fsa_structure(fsa: Dict) -> Dict:
    """
    Validates that the FSA dictionary is consistent enough to build an engine from.

    Args:
        fsa: A dictionary representing the FSA with the following keys:
            - states: List of all states (strings)
            - alphabet: List of single-character symbols
            - transitions: Dictionary of transitions, {state: {symbol: [targets]}}
            - startingState: The starting state
            - acceptingStates: List of accepting states

    Returns:
        Dict: Validation result with 'valid' boolean and optional 'error' message
    """
    if not isinstance(fsa, dict):
        return {'valid': False, 'error': 'FSA must be a dictionary'}

    for key in REQUIRED_KEYS:
        if key not in fsa:
            return {'valid': False, 'error': f'Missing required key: {key}'}

    if not isinstance(fsa['states'], list):
        return {'valid': False, 'error': 'states must be a list'}

    if not isinstance(fsa['alphabet'], list):
        return {'valid': False, 'error': 'alphabet must be a list'}

    if not isinstance(fsa['transitions'], dict):
        return {'valid': False, 'error': 'transitions must be a dictionary'}

    if not isinstance(fsa['acceptingStates'], list):
        return {'valid': False, 'error': 'acceptingStates must be a list'}

    if not fsa['states']:
        return {'valid': False, 'error': 'FSA must have at least one state'}

    for state in fsa['states']:
        if not isinstance(state, str):
            return {'valid': False, 'error': f'State {state!r} must be a string'}

    for symbol in fsa['alphabet']:
        if not isinstance(symbol, str) or len(symbol) != 1:
            return {'valid': False, 'error': f'Alphabet symbol {symbol!r} must be a single character'}
        if symbol == EPSILON:
            return {'valid': False, 'error': 'Alphabet must not contain the reserved epsilon symbol'}

    states = fsa['states']

    if fsa['startingState'] not in states:
        return {'valid': False, 'error': 'Starting state not in states list'}

    for state in fsa['acceptingStates']:
        if state not in states:
            return {'valid': False, 'error': f'Accepting state {state} not in states list'}

    for source, moves in fsa['transitions'].items():
        if source not in states:
            return {'valid': False, 'error': f'Transition source {source} not in states list'}
        if not isinstance(moves, dict):
            return {'valid': False, 'error': f'Transitions for state {source} must be a dictionary'}

        for symbol, targets in moves.items():
            if symbol != EPSILON_KEY and symbol not in fsa['alphabet']:
                return {'valid': False, 'error': f"Symbol '{symbol}' not in alphabet"}
            if not isinstance(targets, list):
                return {'valid': False, 'error': f"Targets for ({source}, '{symbol}') must be a list"}
            for target in targets:
                if target not in states:
                    return {'valid': False, 'error': f'Transition target {target} not in states list'}

    return {'valid': True}


def has_epsilon_transitions(fsa: Dict) -> bool:
    """
    Check if the FSA has any non-empty epsilon transitions.

    Args:
        fsa: The FSA dictionary

    Returns:
        True if there are epsilon transitions, False otherwise
    """
    for moves in fsa['transitions'].values():
        if moves.get(EPSILON_KEY):
            return True
    return False


def is_deterministic(fsa: Dict) -> bool:
    """
    Checks if the FSA is deterministic.

    An FSA is deterministic if it has no epsilon transitions and every
    (state, symbol) pair has at most one target. Missing transitions are allowed.
    """
    if has_epsilon_transitions(fsa):
        return False

    for moves in fsa['transitions'].values():
        for targets in moves.values():
            if len(targets) > 1:
                return False

    return True


def detect_automaton_kind(fsa: Dict) -> str:
    """Returns 'enfa', 'nfa' or 'dfa' for the most specific engine that can run the FSA."""
    if has_epsilon_transitions(fsa):
        return 'enfa'
    if not is_deterministic(fsa):
        return 'nfa'
    return 'dfa'
