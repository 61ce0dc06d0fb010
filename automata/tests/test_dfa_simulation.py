import copy
import unittest

from automata.dfa import DFA
from automata.sample_automata import a_before_b_dfa, same_parity_dfa
from automata.tests.fixtures import all_strings


class TestDfaSimulation(unittest.TestCase):
    def test_a_before_b(self):
        dfa = a_before_b_dfa()

        self.assertTrue(dfa.accepts(''))
        self.assertTrue(dfa.accepts('aabbb'))
        self.assertTrue(dfa.accepts('ab'))
        self.assertFalse(dfa.accepts('ba'))
        self.assertFalse(dfa.accepts('aabbab'))

    def test_same_parity(self):
        dfa = same_parity_dfa()

        self.assertTrue(dfa.accepts(''))
        self.assertTrue(dfa.accepts('ab'))
        self.assertTrue(dfa.accepts('ba'))
        self.assertFalse(dfa.accepts('aabba'))

    def test_missing_transition_rejects_immediately(self):
        # No transitions out of S1 at all
        dfa = DFA(
            {'S0', 'S1'},
            {'a', 'b'},
            {('S0', 'a'): 'S1'},
            'S0',
            {'S1'}
        )

        self.assertTrue(dfa.accepts('a'))
        self.assertFalse(dfa.accepts('b'))
        self.assertFalse(dfa.accepts('aa'))
        self.assertFalse(dfa.accepts('ab'))

    def test_symbol_outside_alphabet_rejects(self):
        dfa = a_before_b_dfa()

        self.assertFalse(dfa.accepts('c'))
        self.assertFalse(dfa.accepts('abc'))

    def test_empty_string_uses_start_state_only(self):
        dfa = DFA({0, 1}, {'a'}, {(0, 'a'): 1}, 0, {1})

        self.assertFalse(dfa.accepts(''))
        self.assertTrue(dfa.accepts('a'))

    def test_accepts_is_repeatable_and_read_only(self):
        dfa = a_before_b_dfa()
        before = copy.deepcopy(dfa.table)

        for test_string in all_strings({'a', 'b'}, 5):
            first = dfa.accepts(test_string)
            second = dfa.accepts(test_string)
            self.assertEqual(first, second, f"Disagreement on string '{test_string}'")

        self.assertEqual(dfa.table, before)

    def test_matches_language_description(self):
        dfa = a_before_b_dfa()

        for test_string in all_strings({'a', 'b'}, 6):
            expected = 'ba' not in test_string
            self.assertEqual(dfa.accepts(test_string), expected, f"Wrong answer for '{test_string}'")

    def test_constructor_copies_inputs(self):
        transitions = {(0, 'a'): 1}
        accepting = {1}
        dfa = DFA({0, 1}, {'a'}, transitions, 0, accepting)

        transitions[(1, 'a')] = 1
        accepting.add(0)

        self.assertFalse(dfa.accepts(''))
        self.assertFalse(dfa.accepts('aa'))

    def test_read_only_views(self):
        dfa = a_before_b_dfa()

        self.assertEqual(dfa.states, frozenset({0, 1, 2}))
        self.assertEqual(dfa.alphabet, frozenset({'a', 'b'}))
        self.assertEqual(dfa.start_state, 0)
        self.assertEqual(dfa.accepting_states, frozenset({0, 1}))
        self.assertEqual(dfa.transitions[(1, 'a')], 2)
