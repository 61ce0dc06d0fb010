from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, Mapping, Protocol, Set, Tuple, TypeVar

# Reserved symbol for empty-string transitions (ASCII NUL)
EPSILON = '\0'


class Comparable(Protocol):
    """State labels must support equality, hashing and a total order."""

    def __eq__(self, other: Any) -> bool: ...

    def __hash__(self) -> int: ...

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=Comparable)
Target = TypeVar('Target')


def canonical_pair(p: T, q: T) -> Tuple[T, T]:
    """
    Returns the unordered pair {p, q} as a tuple with the smaller state first.

    Args:
        p: A state label
        q: Another state label

    Returns:
        Tuple[T, T]: (min(p, q), max(p, q)) under the state order
    """
    if q < p:
        return q, p
    return p, q


@dataclass
class TransitionTable(Generic[T, Target]):
    """
    The five-tuple shared by every automaton kind.

    For a DFA ``Target`` is a single state; for an NFA or eNFA it is a set of states.
    Consistency between the fields is not checked.
    """
    states: Set[T]
    alphabet: Set[str]
    transitions: Dict[Tuple[T, str], Target]
    start_state: T
    accepting_states: Set[T]

    def has_transition(self, state: T, symbol: str) -> bool:
        return (state, symbol) in self.transitions

    def target(self, state: T, symbol: str) -> Target:
        return self.transitions[(state, symbol)]

    def is_accepting(self, state: T) -> bool:
        return state in self.accepting_states

    def any_accepting(self, states: Iterable[T]) -> bool:
        return any(state in self.accepting_states for state in states)


def build_table(
        states: Iterable[T],
        alphabet: Iterable[str],
        transitions: Mapping[Tuple[T, str], Target],
        start_state: T,
        accepting_states: Iterable[T]) -> TransitionTable[T, Target]:
    """Copies the caller's containers into a fresh TransitionTable."""
    return TransitionTable(
        states=set(states),
        alphabet=set(alphabet),
        transitions=dict(transitions),
        start_state=start_state,
        accepting_states=set(accepting_states)
    )
