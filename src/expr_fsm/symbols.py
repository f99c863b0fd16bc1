"""
Expression FSM: Input Symbols and Classifier

Every input character maps to exactly one Symbol. Classification is
total: there is no "invalid character" path at this layer, unknown
characters become Symbol.OTHER.

Constraints:
- Digits are ASCII '0'..'9' only (no Unicode digit classes)
- No I/O, no state, no side effects
"""

from enum import Enum
from typing import Dict, FrozenSet


class Symbol(str, Enum):
    """
    Frozen alphabet of the scanner.

    Declaration order is the column order of the transition matrix.
    """
    DIGIT = "DIGIT"
    PLUS = "PLUS"
    MINUS = "MINUS"
    OTHER = "OTHER"

    @property
    def ordinal(self) -> int:
        """Column index of this symbol in the transition matrix."""
        return _SYMBOL_ORDER.index(self)


_SYMBOL_ORDER = tuple(Symbol)

VALID_SYMBOLS: FrozenSet[Symbol] = frozenset(Symbol)

ASCII_DIGITS = "0123456789"

# Operator characters, checked after digits
OPERATOR_SYMBOLS: Dict[str, Symbol] = {
    "+": Symbol.PLUS,
    "-": Symbol.MINUS,
}


def classify(ch: str) -> Symbol:
    """
    Map one input character to its Symbol.

    Args:
        ch: A single character. Anything else (empty string, longer
            strings) is classified as OTHER.

    Returns:
        DIGIT for '0'..'9', PLUS for '+', MINUS for '-', OTHER otherwise.
    """
    if len(ch) != 1:
        return Symbol.OTHER
    if ch in ASCII_DIGITS:
        return Symbol.DIGIT
    return OPERATOR_SYMBOLS.get(ch, Symbol.OTHER)
