"""
Expression FSM: Transition Table (Pure, Deterministic)

This module defines the deterministic transition table for the scanner.
The table is built once at import and is read-only afterwards.

Constraints:
- Total: defined for every (state, symbol) pair
- Absorbing states only transition to themselves
- Import fails with TransitionTableError if the table is malformed
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

from .states import FsmState, VALID_STATES, ABSORBING_STATES
from .symbols import Symbol, VALID_SYMBOLS


class TransitionTableError(ValueError):
    """
    Raised when a transition table is not total or breaks the absorbing
    state rules.
    """
    pass


TransitionTable = Mapping[FsmState, Mapping[Symbol, FsmState]]


# Row = current state, column = input symbol
_RAW_TABLE = {
    # Expression must begin with a digit
    FsmState.START: {
        Symbol.DIGIT: FsmState.ACCEPT_DIGIT,
        Symbol.PLUS: FsmState.ERROR,
        Symbol.MINUS: FsmState.ERROR,
        Symbol.OTHER: FsmState.ERROR,
    },
    # Digit run; an operator expects another operand
    FsmState.ACCEPT_DIGIT: {
        Symbol.DIGIT: FsmState.ACCEPT_DIGIT,
        Symbol.PLUS: FsmState.ACCEPT_AFTER_OPERATOR,
        Symbol.MINUS: FsmState.ACCEPT_AFTER_OPERATOR,
        Symbol.OTHER: FsmState.ERROR,
    },
    # Only a digit may follow an operator
    FsmState.ACCEPT_AFTER_OPERATOR: {
        Symbol.DIGIT: FsmState.ACCEPT_DIGIT,
        Symbol.PLUS: FsmState.ERROR,
        Symbol.MINUS: FsmState.ERROR,
        Symbol.OTHER: FsmState.ERROR,
    },
    FsmState.ERROR: {
        Symbol.DIGIT: FsmState.ERROR,
        Symbol.PLUS: FsmState.ERROR,
        Symbol.MINUS: FsmState.ERROR,
        Symbol.OTHER: FsmState.ERROR,
    },
}


def freeze_table(raw) -> TransitionTable:
    """Wrap a nested dict table in read-only mappings."""
    return MappingProxyType({
        state: MappingProxyType(dict(row))
        for state, row in raw.items()
    })


def check_table_totality(table) -> List[str]:
    """
    Check that a transition table is total and well-formed.

    Args:
        table: Mapping of state -> (mapping of symbol -> state)

    Returns:
        List of error strings, sorted. Empty if the table is valid.
    """
    errors: List[str] = []

    for state in VALID_STATES:
        if state not in table:
            errors.append(f"missing row: {state.value}")
            continue
        row = table[state]
        for symbol in VALID_SYMBOLS:
            if symbol not in row:
                errors.append(f"missing entry: {state.value} x {symbol.value}")
                continue
            target = row[symbol]
            if not isinstance(target, FsmState):
                errors.append(
                    f"unknown target: {state.value} x {symbol.value} -> {target!r}"
                )
            elif state in ABSORBING_STATES and target != state:
                errors.append(
                    f"absorbing state escapes: {state.value} x {symbol.value} -> {target.value}"
                )

    for state in table:
        if not isinstance(state, FsmState):
            errors.append(f"unknown row: {state!r}")

    return sorted(errors)


def _build_table() -> TransitionTable:
    errors = check_table_totality(_RAW_TABLE)
    if errors:
        raise TransitionTableError(
            "Transition table is malformed: " + "; ".join(errors)
        )
    return freeze_table(_RAW_TABLE)


TRANSITION_TABLE: TransitionTable = _build_table()


def next_state(state: FsmState, symbol: Symbol) -> FsmState:
    """
    Look up the successor of state on symbol.

    Args:
        state: Current scanner state
        symbol: Classified input symbol

    Returns:
        The next state. Never fails for members of the closed sets.
    """
    return TRANSITION_TABLE[state][symbol]


def as_matrix() -> Tuple[Tuple[int, ...], ...]:
    """
    Render the table as state-ordinal rows of target-state ordinals.

    Row order follows FsmState, column order follows Symbol.
    """
    return tuple(
        tuple(TRANSITION_TABLE[state][symbol].ordinal for symbol in Symbol)
        for state in FsmState
    )
