from itertools import product


def all_strings(alphabet, max_length):
    """Yields every string over ``alphabet`` up to ``max_length`` symbols, shortest first."""
    for length in range(max_length + 1):
        for letters in product(sorted(alphabet), repeat=length):
            yield ''.join(letters)


def sample_dfa():
    return {
        'states': ['S0', 'S1'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'S0': {'a': ['S1'], 'b': ['S0']},
            'S1': {'a': ['S0'], 'b': ['S1']}
        },
        'startingState': 'S0',
        'acceptingStates': ['S1']
    }


def sample_nfa():
    return {
        'states': ['S0', 'S1', 'S2'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'S0': {'a': ['S0', 'S1'], 'b': ['S0']},
            'S1': {'a': [], 'b': ['S2']},
            'S2': {'a': [], 'b': []}
        },
        'startingState': 'S0',
        'acceptingStates': ['S2']
    }


def sample_enfa():
    # Accepts 0*(01)*0*, same shape as the epsilon reference automaton
    return {
        'states': ['q0', 'q1', 'q2', 'q3'],
        'alphabet': ['0', '1'],
        'transitions': {
            'q0': {'0': ['q0'], '': ['q1']},
            'q1': {'0': ['q2'], '': ['q3']},
            'q2': {'1': ['q1']},
            'q3': {'0': ['q3']}
        },
        'startingState': 'q0',
        'acceptingStates': ['q3']
    }
