from typing import Any, Iterable, List

from .transition_table import EPSILON


def _format_symbol(symbol: str) -> str:
    return 'ε' if symbol == EPSILON else symbol


def _format_states(states: Iterable[Any]) -> str:
    return ''.join(f" {state}" for state in sorted(states))


def format_automaton(automaton) -> str:
    """
    Renders an automaton's structure for human inspection.

    Args:
        automaton: A DFA, NFA or EpsilonNFA

    Returns:
        str: A multi-line dump of the states, start state, accepting states and transitions
    """
    table = automaton.table
    lines: List[str] = [
        f"--- {automaton.kind} ---",
        f"STATES:{_format_states(table.states)}",
        f"INITIAL STATE: {table.start_state}",
        f"FINAL STATES:{_format_states(table.accepting_states)}",
        "TRANSITIONS:",
    ]

    for (source, symbol), target in sorted(table.transitions.items(), key=lambda item: item[0]):
        if isinstance(target, (set, frozenset)):
            rendered = f"{{{_format_states(target)} }}"
        else:
            rendered = str(target)
        lines.append(f"{{{source}, {_format_symbol(symbol)}}} --> {rendered}")

    return '\n'.join(lines) + '\n'
