"""
Expression FSM: States (Frozen, Closed Set)

This module defines the frozen set of scanner states.
These states are immutable and form a closed domain.

Constraints:
- Exactly one state is current at any point during a scan
- State exists only within a single scan call (no persistence)
- Initial state is fixed: START
- ERROR is the single absorbing, non-accepting state
"""

from enum import Enum
from typing import FrozenSet


class FsmState(str, Enum):
    """
    Frozen set of scanner states.

    Declaration order is the row order of the transition matrix.
    """
    START = "START"
    ACCEPT_DIGIT = "ACCEPT_DIGIT"
    ACCEPT_AFTER_OPERATOR = "ACCEPT_AFTER_OPERATOR"
    ERROR = "ERROR"

    @property
    def ordinal(self) -> int:
        """Row index of this state in the transition matrix."""
        return _STATE_ORDER.index(self)


_STATE_ORDER = tuple(FsmState)

# Frozen set of all valid states
VALID_STATES: FrozenSet[FsmState] = frozenset(FsmState)

# A scan that ends in one of these states reports a valid expression.
# ACCEPT_AFTER_OPERATOR is included, so "3+" is reported valid.
ACCEPTING_STATES: FrozenSet[FsmState] = frozenset([
    FsmState.ACCEPT_DIGIT,
    FsmState.ACCEPT_AFTER_OPERATOR,
])

# Once entered, no input leaves these states
ABSORBING_STATES: FrozenSet[FsmState] = frozenset([
    FsmState.ERROR,
])

# Fixed initial state for every scan
INITIAL_STATE: FsmState = FsmState.START
