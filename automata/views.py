import json
import logging

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .fsa_properties import (
    detect_automaton_kind,
    has_epsilon_transitions,
    is_deterministic,
    validate_fsa_structure
)
from .fsa_serialisation import (
    automaton_from_dict,
    automaton_to_dict,
    dfa_from_dict,
    epsilon_nfa_from_dict
)

logger = logging.getLogger(__name__)


def _read_fsa(request):
    """
    Parses the request body and validates its 'fsa' entry.

    Returns:
        (data, fsa, error_response): error_response is None when the FSA is usable
    """
    data = json.loads(request.body)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    fsa = data.get('fsa')

    if not fsa:
        return data, None, JsonResponse({'error': 'Missing FSA definition'}, status=400)

    validation = validate_fsa_structure(fsa)
    if not validation['valid']:
        return data, None, JsonResponse({'error': validation['error']}, status=400)

    return data, fsa, None


def _server_error(view_name: str, e: Exception) -> JsonResponse:
    logger.exception("Unhandled error in %s", view_name)
    return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


def _simulate(request, kind):
    try:
        data, fsa, error_response = _read_fsa(request)
        if error_response:
            return error_response

        input_string = data.get('input', '')
        if not isinstance(input_string, str):
            return JsonResponse({'error': 'input must be a string'}, status=400)

        if kind is None:
            kind = detect_automaton_kind(fsa)

        automaton = automaton_from_dict(fsa, kind)
        accepted = automaton.accepts(input_string)
        logger.debug("%s %s %r", automaton.kind, 'accepted' if accepted else 'rejected', input_string)

        return JsonResponse({
            'accepted': accepted,
            'type': kind
        })

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error('simulate', e)


@csrf_exempt
@require_POST
def simulate_fsa(request):
    """
    Django view to handle FSA simulation requests.
    Picks the DFA, NFA or eNFA engine from the shape of the transitions.

    Expects a POST request with a JSON body containing:
    - fsa: The FSA definition in the proper format
    - input: The input string to simulate
    """
    return _simulate(request, None)


@csrf_exempt
@require_POST
def simulate_dfa(request):
    """Runs the input through the DFA engine."""
    return _simulate(request, 'dfa')


@csrf_exempt
@require_POST
def simulate_nfa(request):
    """Runs the input through the NFA engine."""
    return _simulate(request, 'nfa')


@csrf_exempt
@require_POST
def simulate_enfa(request):
    """Runs the input through the epsilon-NFA engine."""
    return _simulate(request, 'enfa')


@csrf_exempt
@require_POST
def epsilon_closure(request):
    """
    Django view returning the epsilon closure of every state.

    Returns a JSON response of the form {'closures': {state: [states]}}.
    """
    try:
        data, fsa, error_response = _read_fsa(request)
        if error_response:
            return error_response

        enfa = epsilon_nfa_from_dict(fsa)
        closures = {state: sorted(enfa.closure(state)) for state in sorted(enfa.states)}

        return JsonResponse({'closures': closures})

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error('epsilon_closure', e)


@csrf_exempt
@require_POST
def min_dfa(request):
    """
    Django view to minimise a DFA with the table-filling algorithm.

    Returns the minimised DFA in the same dictionary format along with state counts.
    """
    try:
        data, fsa, error_response = _read_fsa(request)
        if error_response:
            return error_response

        dfa = dfa_from_dict(fsa)
        original_states = len(dfa.states)
        dfa.minimise()
        final_states = len(dfa.states)

        return JsonResponse({
            'dfa': automaton_to_dict(dfa),
            'original_states': original_states,
            'final_states': final_states,
            'reduction': original_states - final_states
        })

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error('min_dfa', e)


@csrf_exempt
@require_POST
def dump_fsa(request):
    """
    Django view returning the human-readable dump of an FSA as plain text.
    An optional 'type' of 'dfa', 'nfa' or 'enfa' selects the engine.
    """
    try:
        data, fsa, error_response = _read_fsa(request)
        if error_response:
            return error_response

        automaton = automaton_from_dict(fsa, data.get('type'))
        return HttpResponse(str(automaton), content_type='text/plain; charset=utf-8')

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error('dump_fsa', e)


@csrf_exempt
@require_POST
def check_fsa_type(request):
    """
    Django view to check which engine an FSA needs.
    """
    try:
        data, fsa, error_response = _read_fsa(request)
        if error_response:
            return error_response

        return JsonResponse({
            'type': detect_automaton_kind(fsa),
            'is_deterministic': is_deterministic(fsa),
            'has_epsilon_transitions': has_epsilon_transitions(fsa)
        })

    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        return _server_error('check_fsa_type', e)
