from django.urls import path
from . import views

urlpatterns = [
    # Auto-detect FSA type and simulate accordingly
    path('api/simulate-fsa/', views.simulate_fsa, name='simulate_fsa'),

    # Specific FSA type simulators
    path('api/simulate-dfa/', views.simulate_dfa, name='simulate_dfa'),
    path('api/simulate-nfa/', views.simulate_nfa, name='simulate_nfa'),
    path('api/simulate-enfa/', views.simulate_enfa, name='simulate_enfa'),

    # Utility endpoints
    path('api/check-fsa-type/', views.check_fsa_type, name='check_fsa_type'),
    path('api/epsilon-closure/', views.epsilon_closure, name='epsilon_closure'),
    path('api/dump-fsa/', views.dump_fsa, name='dump_fsa'),

    # FSA Transformation endpoints
    path('api/minimise-dfa/', views.min_dfa, name='minimise_dfa'),
]
