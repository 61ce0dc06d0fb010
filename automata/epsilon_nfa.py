import logging
from collections import deque
from typing import Dict, FrozenSet, Iterable, Mapping, Set, Tuple

from .nfa import NFA
from .transition_table import EPSILON, T

logger = logging.getLogger(__name__)


class EpsilonNFA(NFA[T]):
    """
    NFA with empty-string transitions, keyed by the reserved ``EPSILON`` symbol.

    The epsilon closure of every state is computed once at construction. Mutating
    the transition table afterwards leaves the cached closures stale.
    """

    kind = 'eNFA'

    def __init__(
            self,
            states: Iterable[T],
            alphabet: Iterable[str],
            transitions: Mapping[Tuple[T, str], Iterable[T]],
            start_state: T,
            accepting_states: Iterable[T]):
        super().__init__(states, alphabet, transitions, start_state, accepting_states)
        self.table.alphabet.add(EPSILON)

        self._closures: Dict[T, FrozenSet[T]] = {
            state: self._calculate_epsilon_closure(state) for state in self.table.states
        }
        logger.debug("Precomputed epsilon closures for %d states", len(self._closures))

    def _calculate_epsilon_closure(self, from_state: T) -> FrozenSet[T]:
        """Breadth-first walk over epsilon edges only, including ``from_state`` itself."""
        visited = {from_state}
        queue = deque([from_state])

        while queue:
            current = queue.popleft()
            if not self.table.has_transition(current, EPSILON):
                continue

            for next_state in self.table.target(current, EPSILON):
                if next_state not in visited:
                    visited.add(next_state)
                    queue.append(next_state)

        return frozenset(visited)

    def closure(self, state: T) -> FrozenSet[T]:
        """
        Returns the set of states reachable from ``state`` using only epsilon transitions.

        Args:
            state: The state to look up

        Returns:
            FrozenSet[T]: The cached closure, or just ``{state}`` for an unknown state
        """
        return self._closures.get(state, frozenset([state]))

    def accepts(self, input_string: str) -> bool:
        """
        Simulates the eNFA, expanding every reached state by its epsilon closure.

        Unlike NFA.accepts, a state with no transition on the current symbol simply
        contributes nothing, so the active set may become empty.

        Args:
            input_string: The input string to test

        Returns:
            bool: True if the final active set contains an accepting state
        """
        start_state = self.table.start_state
        current_states: Set[T] = {start_state} | self.closure(start_state)

        for symbol in input_string:
            next_states: Set[T] = set()
            for state in current_states:
                if not self.table.has_transition(state, symbol):
                    continue
                for next_state in self.table.target(state, symbol):
                    next_states.add(next_state)
                    next_states.update(self.closure(next_state))
            current_states = next_states

        return self.table.any_accepting(current_states)
