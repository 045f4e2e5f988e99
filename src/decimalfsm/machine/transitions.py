"""Transition table of the number grammar machine.

State Diagram:

    START ──0──► ZERO ──.──► DECIMAL_POINT ──0-9──► DIGIT_AFTER ◄─┐
      │                          ▲                      │   0-9   │
      └─1-9──► DIGIT_BEFORE ──.──┘                      └─────────┘
                 │    ▲
                 └0-9─┘

    Every edge not drawn leads to FAIL. FAIL has no way out.

TOTALITY GUARANTEE:
- TRANSITIONS holds one row per NumberState and one column per InputCategory
- verify_transition_table() runs on TRANSITIONS at import time
- Therefore: next_state() is defined for every pair, or the module does not load

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

from decimalfsm.diagnostics import ErrorTemplate, TransitionTableError
from decimalfsm.enums import InputCategory, NumberState

__all__ = ["TRANSITIONS", "next_state", "verify_transition_table"]

logger = logging.getLogger(__name__)

TransitionTable: TypeAlias = Mapping[NumberState, Mapping[InputCategory, NumberState]]


def _row(
    *,
    zero: NumberState,
    nonzero: NumberState,
    point: NumberState,
    invalid: NumberState,
) -> Mapping[InputCategory, NumberState]:
    return MappingProxyType({
        InputCategory.DIGIT_ZERO: zero,
        InputCategory.DIGIT_NONZERO: nonzero,
        InputCategory.DECIMAL_POINT: point,
        InputCategory.INVALID: invalid,
    })


_S = NumberState

TRANSITIONS: TransitionTable = MappingProxyType({
    _S.START: _row(
        zero=_S.ZERO,
        nonzero=_S.DIGIT_BEFORE_DECIMAL_POINT,
        point=_S.FAIL,
        invalid=_S.FAIL,
    ),
    # A lone leading zero may only be followed by a point ("0.5", not "01")
    _S.ZERO: _row(
        zero=_S.FAIL,
        nonzero=_S.FAIL,
        point=_S.DECIMAL_POINT,
        invalid=_S.FAIL,
    ),
    _S.DIGIT_BEFORE_DECIMAL_POINT: _row(
        zero=_S.DIGIT_BEFORE_DECIMAL_POINT,
        nonzero=_S.DIGIT_BEFORE_DECIMAL_POINT,
        point=_S.DECIMAL_POINT,
        invalid=_S.FAIL,
    ),
    _S.DECIMAL_POINT: _row(
        zero=_S.DIGIT_AFTER_DECIMAL_POINT,
        nonzero=_S.DIGIT_AFTER_DECIMAL_POINT,
        point=_S.FAIL,
        invalid=_S.FAIL,
    ),
    _S.DIGIT_AFTER_DECIMAL_POINT: _row(
        zero=_S.DIGIT_AFTER_DECIMAL_POINT,
        nonzero=_S.DIGIT_AFTER_DECIMAL_POINT,
        point=_S.FAIL,
        invalid=_S.FAIL,
    ),
    _S.FAIL: _row(
        zero=_S.FAIL,
        nonzero=_S.FAIL,
        point=_S.FAIL,
        invalid=_S.FAIL,
    ),
})

del _S


def verify_transition_table(table: TransitionTable) -> None:
    """Check that table is a total function over (NumberState, InputCategory).

    Args:
        table: Transition table to check

    Raises:
        TransitionTableError: On the first pair with no entry, or whose
            entry is not a NumberState
    """
    for state in NumberState:
        row = table.get(state, {})
        for category in InputCategory:
            successor = row.get(category)
            if not isinstance(successor, NumberState):
                diagnostic = ErrorTemplate.transition_table_incomplete(state, category)
                raise TransitionTableError(diagnostic)
    logger.debug(
        "Transition table verified: %d states x %d input categories",
        len(NumberState),
        len(InputCategory),
    )


def next_state(state: NumberState, category: InputCategory) -> NumberState:
    """Return the successor of state on category.

    Pure and total: the same arguments always give the same result,
    and every pair has a result.

    Args:
        state: Current state
        category: Category of the next input character

    Returns:
        The next state

    Example:
        >>> next_state(NumberState.ZERO, InputCategory.DECIMAL_POINT)
        <NumberState.DECIMAL_POINT: 'decimal point'>
        >>> next_state(NumberState.ZERO, InputCategory.DIGIT_NONZERO)
        <NumberState.FAIL: 'fail'>
    """
    return TRANSITIONS[state][category]


verify_transition_table(TRANSITIONS)
