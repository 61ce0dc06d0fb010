import logging
from typing import Dict, Iterable, List, Mapping, Tuple

from .automaton import FiniteAutomaton
from .transition_table import T, build_table, canonical_pair

logger = logging.getLogger(__name__)

PairTable = Dict[Tuple[T, T], bool]


class DFA(FiniteAutomaton[T, T]):
    """
    Deterministic finite automaton over single-character symbols.

    The transition relation is a partial function: a missing (state, symbol)
    entry means the automaton has no move and the input is rejected.
    """

    kind = 'DFA'

    def __init__(
            self,
            states: Iterable[T],
            alphabet: Iterable[str],
            transitions: Mapping[Tuple[T, str], T],
            start_state: T,
            accepting_states: Iterable[T]):
        super().__init__(build_table(states, alphabet, transitions, start_state, accepting_states))
        logger.debug("Built DFA with %d states and %d transitions",
                     len(self.table.states), len(self.table.transitions))

    def accepts(self, input_string: str) -> bool:
        """
        Runs the input through the DFA one symbol at a time.

        Args:
            input_string: The input string to test

        Returns:
            bool: True if every symbol has a transition and the final state is accepting
        """
        current_state = self.table.start_state

        for symbol in input_string:
            if not self.table.has_transition(current_state, symbol):
                return False
            current_state = self.table.target(current_state, symbol)

        return self.table.is_accepting(current_state)

    def minimise(self) -> None:
        """
        Minimises the DFA in place using the Myhill-Nerode table-filling algorithm.

        Every pair of distinct states starts marked iff exactly one of them is accepting.
        Marks are then propagated through the transitions until nothing changes, and
        only then are the remaining unmarked (indistinguishable) pairs merged, the
        higher state collapsing into the lower one.
        """
        original_count = len(self.table.states)

        marked_pairs = self._initial_pair_table()
        rounds = self._propagate_marks(marked_pairs)

        unmarked = [pair for pair, marked in marked_pairs.items() if not marked]
        logger.debug("Table filling settled after %d rounds: %d of %d pairs indistinguishable",
                     rounds, len(unmarked), len(marked_pairs))

        for a, b in unmarked:
            self._merge_states(a, b)

        logger.info("Minimised DFA from %d to %d states", original_count, len(self.table.states))

    minimize = minimise

    def _initial_pair_table(self) -> PairTable:
        ordered_states = sorted(self.table.states)
        marked_pairs: PairTable = {}

        for i, p in enumerate(ordered_states):
            for q in ordered_states[i + 1:]:
                marked_pairs[(p, q)] = self.table.is_accepting(p) != self.table.is_accepting(q)

        return marked_pairs

    def _propagate_marks(self, marked_pairs: PairTable) -> int:
        """Marks pairs until a full pass changes nothing. Returns the number of passes."""
        symbols: List[str] = sorted(self.table.alphabet)
        rounds = 0
        changed = True

        while changed:
            changed = False
            rounds += 1

            for pair, marked in marked_pairs.items():
                if marked:
                    continue

                if self._distinguished_by_successors(pair, symbols, marked_pairs):
                    marked_pairs[pair] = True
                    changed = True

        return rounds

    def _distinguished_by_successors(self, pair: Tuple[T, T], symbols: List[str], marked_pairs: PairTable) -> bool:
        p, q = pair

        for symbol in symbols:
            # A missing transition on either side gives no evidence for this symbol
            if not (self.table.has_transition(p, symbol) and self.table.has_transition(q, symbol)):
                continue

            successors = canonical_pair(self.table.target(p, symbol), self.table.target(q, symbol))
            if marked_pairs.get(successors, False):
                return True

        return False

    def _merge_states(self, a: T, b: T) -> None:
        """Collapses state ``b`` into state ``a``."""
        logger.debug("Merging state %r into %r", b, a)

        self.table.states.discard(b)

        if self.table.start_state == b:
            self.table.start_state = a

        if b in self.table.accepting_states:
            self.table.accepting_states.discard(b)
            self.table.accepting_states.add(a)

        kept = {}
        moved = {}
        for (source, symbol), target in self.table.transitions.items():
            if target == b:
                target = a
            if source == b:
                moved[(a, symbol)] = target
            else:
                kept[(source, symbol)] = target

        # Transitions moved from b override a's own entry for the same symbol
        kept.update(moved)
        self.table.transitions = kept
