"""Validity predicate over final states.

A final state is accepting when the machine has just consumed a digit,
either with no decimal point or with a point already followed by a digit.
START (nothing consumed), DECIMAL_POINT (trailing point) and FAIL are not.

Python 3.13+.
"""

from decimalfsm.enums import NumberState

__all__ = ["ACCEPTING_STATES", "is_valid_state"]

ACCEPTING_STATES: frozenset[NumberState] = frozenset({
    NumberState.ZERO,
    NumberState.DIGIT_BEFORE_DECIMAL_POINT,
    NumberState.DIGIT_AFTER_DECIMAL_POINT,
})


def is_valid_state(state: NumberState) -> bool:
    """Check if state is accepting.

    Args:
        state: Final state of a scan

    Returns:
        True if state is ZERO, DIGIT_BEFORE_DECIMAL_POINT or
        DIGIT_AFTER_DECIMAL_POINT, False otherwise

    Example:
        >>> is_valid_state(NumberState.ZERO)
        True
        >>> is_valid_state(NumberState.DECIMAL_POINT)
        False
    """
    return state in ACCEPTING_STATES
