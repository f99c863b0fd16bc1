"""
Expression FSM

Validates digit/+/- arithmetic expressions with a deterministic
finite-state machine driven by a frozen transition table.
"""

import logging

from .states import (
    FsmState,
    VALID_STATES,
    ACCEPTING_STATES,
    ABSORBING_STATES,
    INITIAL_STATE,
)

from .symbols import (
    Symbol,
    VALID_SYMBOLS,
    classify,
)

from .transitions import (
    TRANSITION_TABLE,
    TransitionTableError,
    check_table_totality,
    next_state,
    as_matrix,
)

from .scanner import (
    ScanResult,
    scan,
    final_state,
    is_valid_expression,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # States
    'FsmState',
    'VALID_STATES',
    'ACCEPTING_STATES',
    'ABSORBING_STATES',
    'INITIAL_STATE',
    # Symbols
    'Symbol',
    'VALID_SYMBOLS',
    'classify',
    # Transitions
    'TRANSITION_TABLE',
    'TransitionTableError',
    'check_table_totality',
    'next_state',
    'as_matrix',
    # Scanner
    'ScanResult',
    'scan',
    'final_state',
    'is_valid_expression',
]
