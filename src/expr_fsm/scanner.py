"""
Expression FSM: Scanner

Drives a single left-to-right pass over the input, folding the current
state through each classified character.

Constraints:
- State is local to one call; nothing survives between scans
- Never raises for str input; an invalid expression is a False result
- Stops early once the absorbing ERROR state is reached
"""

import logging
from dataclasses import dataclass

from .states import FsmState, INITIAL_STATE, ACCEPTING_STATES, ABSORBING_STATES
from .symbols import classify
from .transitions import next_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of one scan.

    Attributes:
        valid: Whether the final state is accepting
        final_state: State the FSM rested in
    """
    valid: bool
    final_state: FsmState


def scan(text: str) -> ScanResult:
    """
    Run the FSM over text.

    Args:
        text: Candidate expression (may be empty)

    Returns:
        ScanResult with the final state and acceptance decision.
    """
    state = INITIAL_STATE

    for ch in text:
        state = next_state(state, classify(ch))
        if state in ABSORBING_STATES:
            break

    result = ScanResult(
        valid=state in ACCEPTING_STATES,
        final_state=state,
    )
    logger.debug(
        "scan: length=%d final_state=%s valid=%s",
        len(text), state.value, result.valid,
    )
    return result


def final_state(text: str) -> FsmState:
    """Return the state the FSM rests in after scanning text."""
    return scan(text).final_state


def is_valid_expression(text: str) -> bool:
    """
    Check whether text is a well-formed digit/+/- expression.

    An expression that ends right after an operator (e.g. "3+") is
    reported valid, since ACCEPT_AFTER_OPERATOR is an accepting state.

    Args:
        text: Candidate expression

    Returns:
        True if the FSM ends in an accepting state.
    """
    return scan(text).valid
