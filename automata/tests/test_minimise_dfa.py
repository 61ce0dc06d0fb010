from django.test import TestCase

from automata.dfa import DFA
from automata.sample_automata import a_before_b_dfa, reducible_dfa, same_parity_dfa
from automata.tests.fixtures import all_strings


class TestMinimiseDFA(TestCase):
    """Test cases for in-place table-filling minimisation"""

    def assertSameLanguage(self, original, minimised, max_length=6):
        for test_string in all_strings(original.alphabet, max_length):
            self.assertEqual(original.accepts(test_string), minimised.accepts(test_string),
                             f"Disagreement on string '{test_string}'")

    def test_reducible_dfa_collapses_equivalent_states(self):
        """States 2/3 (both accepting) and 4/5 (both dead ends) merge"""
        original = reducible_dfa()
        dfa = reducible_dfa()

        dfa.minimise()

        self.assertLess(len(dfa.states), len(original.states))
        self.assertEqual(dfa.states, frozenset({0, 1, 2, 4}))
        self.assertEqual(dfa.start_state, 0)
        self.assertEqual(dfa.accepting_states, frozenset({2}))
        self.assertEqual(dfa.transitions, {
            (0, 'a'): 1, (0, 'b'): 4,
            (1, 'a'): 2, (1, 'b'): 2,
            (2, 'a'): 2, (2, 'b'): 2,
            (4, 'a'): 4, (4, 'b'): 4,
        })
        self.assertSameLanguage(original, dfa)

    def test_reducible_dfa_representative_strings(self):
        dfa = reducible_dfa()
        dfa.minimise()

        self.assertTrue(dfa.accepts('aa'))
        self.assertTrue(dfa.accepts('ab'))
        self.assertTrue(dfa.accepts('abab'))
        self.assertFalse(dfa.accepts(''))
        self.assertFalse(dfa.accepts('a'))
        self.assertFalse(dfa.accepts('ba'))
        self.assertFalse(dfa.accepts('bbaa'))

    def test_same_parity_dfa_reduces_to_even_length(self):
        # Same parity of a's and b's is the same as even length
        original = same_parity_dfa()
        dfa = same_parity_dfa()

        dfa.minimise()

        self.assertEqual(dfa.states, frozenset({0, 1}))
        self.assertEqual(dfa.accepting_states, frozenset({0}))
        self.assertEqual(dfa.transitions, {
            (0, 'a'): 1, (0, 'b'): 1,
            (1, 'a'): 0, (1, 'b'): 0,
        })
        self.assertSameLanguage(original, dfa)

    def test_already_minimal_dfa(self):
        original = a_before_b_dfa()
        dfa = a_before_b_dfa()

        dfa.minimise()

        self.assertEqual(dfa.states, original.states)
        self.assertEqual(dfa.transitions, original.transitions)
        self.assertSameLanguage(original, dfa)

    def test_minimisation_is_idempotent(self):
        for factory in (a_before_b_dfa, same_parity_dfa, reducible_dfa):
            dfa = factory()
            dfa.minimise()
            states_after_first = dfa.states
            transitions_after_first = dfa.transitions

            dfa.minimise()

            self.assertEqual(dfa.states, states_after_first)
            self.assertEqual(dfa.transitions, transitions_after_first)
            self.assertSameLanguage(factory(), dfa)

    def test_three_equivalent_states_merge_into_lowest(self):
        original = DFA(
            {0, 1, 2, 3},
            {'a'},
            {(0, 'a'): 3, (1, 'a'): 3, (2, 'a'): 3, (3, 'a'): 3},
            0,
            {3}
        )
        dfa = DFA(original.states, original.alphabet, original.transitions, 0, {3})

        dfa.minimise()

        self.assertEqual(dfa.states, frozenset({0, 3}))
        self.assertEqual(dfa.transitions, {(0, 'a'): 3, (3, 'a'): 3})
        self.assertSameLanguage(original, dfa)

    def test_start_state_moves_to_lower_state(self):
        dfa = DFA(
            {0, 1, 2},
            {'a'},
            {(0, 'a'): 1, (1, 'a'): 1, (2, 'a'): 1},
            2,
            {1}
        )

        dfa.minimise()

        self.assertEqual(dfa.states, frozenset({0, 1}))
        self.assertEqual(dfa.start_state, 0)
        self.assertFalse(dfa.accepts(''))
        self.assertTrue(dfa.accepts('a'))
        self.assertTrue(dfa.accepts('aaa'))

    def test_accepting_flag_moves_to_lower_state(self):
        dfa = DFA(
            {0, 1, 2},
            {'a', 'b'},
            {(0, 'a'): 1, (0, 'b'): 2, (1, 'a'): 1, (2, 'a'): 2},
            0,
            {1, 2}
        )

        dfa.minimise()

        self.assertEqual(dfa.states, frozenset({0, 1}))
        self.assertEqual(dfa.accepting_states, frozenset({1}))
        self.assertEqual(dfa.transitions, {(0, 'a'): 1, (0, 'b'): 1, (1, 'a'): 1})

    def test_missing_transition_gives_no_distinguishing_evidence(self):
        # 0 rejects "b" but 1 accepts it; only 1 has a 'b' move, so the pair stays unmarked
        dfa = DFA(
            {0, 1, 2},
            {'a', 'b'},
            {(0, 'a'): 2, (1, 'a'): 2, (1, 'b'): 2},
            0,
            {2}
        )

        dfa.minimise()

        self.assertEqual(dfa.states, frozenset({0, 2}))
        self.assertEqual(dfa.transitions, {(0, 'a'): 2, (0, 'b'): 2})

    def test_string_state_labels(self):
        original = DFA(
            {'S0', 'S1', 'S2', 'S3'},
            {'a', 'b'},
            {
                ('S0', 'a'): 'S3', ('S0', 'b'): 'S1',
                ('S1', 'a'): 'S3', ('S1', 'b'): 'S2',
                ('S2', 'a'): 'S3', ('S2', 'b'): 'S1',
                ('S3', 'a'): 'S3', ('S3', 'b'): 'S1',
            },
            'S0',
            {'S3'}
        )
        dfa = DFA(original.states, original.alphabet, original.transitions, 'S0', {'S3'})

        dfa.minimise()

        self.assertEqual(dfa.states, frozenset({'S0', 'S3'}))
        self.assertSameLanguage(original, dfa)

    def test_single_state_dfa(self):
        dfa = DFA({0}, {'a'}, {(0, 'a'): 0}, 0, {0})

        dfa.minimise()

        self.assertEqual(dfa.states, frozenset({0}))
        self.assertTrue(dfa.accepts('aaa'))

    def test_minimize_alias(self):
        dfa = reducible_dfa()

        dfa.minimize()

        self.assertEqual(len(dfa.states), 4)
