from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, Generic, Tuple

from .fsa_dump import format_automaton
from .transition_table import T, Target, TransitionTable


class FiniteAutomaton(ABC, Generic[T, Target]):
    """Base class for the three engines: owns a TransitionTable and renders the dump."""

    kind = 'FA'

    def __init__(self, table: TransitionTable[T, Target]):
        self.table = table

    @property
    def states(self) -> FrozenSet[T]:
        return frozenset(self.table.states)

    @property
    def alphabet(self) -> FrozenSet[str]:
        return frozenset(self.table.alphabet)

    @property
    def transitions(self) -> Dict[Tuple[T, str], Target]:
        return dict(self.table.transitions)

    @property
    def start_state(self) -> T:
        return self.table.start_state

    @property
    def accepting_states(self) -> FrozenSet[T]:
        return frozenset(self.table.accepting_states)

    @abstractmethod
    def accepts(self, input_string: str) -> bool:
        """Returns True if the automaton accepts ``input_string``."""

    def __str__(self) -> str:
        return format_automaton(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(states={len(self.table.states)}, start={self.table.start_state!r})"
