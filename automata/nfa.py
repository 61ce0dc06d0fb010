import logging
from typing import Iterable, Mapping, Set, Tuple

from .automaton import FiniteAutomaton
from .transition_table import T, build_table

logger = logging.getLogger(__name__)


class NFA(FiniteAutomaton[T, Set[T]]):
    """Non-deterministic finite automaton: (state, symbol) maps to a set of states."""

    kind = 'NFA'

    def __init__(
            self,
            states: Iterable[T],
            alphabet: Iterable[str],
            transitions: Mapping[Tuple[T, str], Iterable[T]],
            start_state: T,
            accepting_states: Iterable[T]):
        copied = {key: set(targets) for key, targets in transitions.items()}
        super().__init__(build_table(states, alphabet, copied, start_state, accepting_states))
        logger.debug("Built %s with %d states and %d transition entries",
                     self.kind, len(self.table.states), len(self.table.transitions))

    def accepts(self, input_string: str) -> bool:
        """
        Simulates every branch at once by tracking the set of active states.

        An active state with no entry for the current symbol rejects the whole input
        straight away, rather than simply dropping out of the active set.

        Args:
            input_string: The input string to test

        Returns:
            bool: True if the active set after the last symbol contains an accepting state
        """
        current_states = {self.table.start_state}

        for symbol in input_string:
            next_states = set()
            for state in current_states:
                if not self.table.has_transition(state, symbol):
                    return False
                next_states.update(self.table.target(state, symbol))
            current_states = next_states

        return self.table.any_accepting(current_states)
