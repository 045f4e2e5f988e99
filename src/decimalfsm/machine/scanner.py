"""Driver that folds the number machine over an input string.

Design Philosophy:
    - Each call starts from a fresh START state and shares nothing
    - ScanStep is immutable (frozen dataclass)
    - Malformed input is a final state, never an exception
    - One left-to-right pass, O(1) auxiliary space

Whitespace:
    Only surrounding whitespace is trimmed: characters with the Unicode
    White_Space property (constants.WHITESPACE). That is narrower than
    str.strip(), which also drops U+001C..U+001F.
    Internal whitespace classifies as INVALID and fails the scan.

Thread-safe. No module-level mutable state.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from decimalfsm.constants import MAX_LOG_INPUT_LENGTH, WHITESPACE
from decimalfsm.enums import InputCategory, NumberState

from .classifier import classify
from .guards import is_valid_state
from .transitions import next_state

__all__ = ["ScanStep", "final_state", "is_valid_number", "scan", "validate"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanStep:
    """One consumed character and the state it led to.

    Attributes:
        offset: Index of char in the original, untrimmed input
        char: The consumed character
        category: Category the classifier assigned to char
        state: State after the transition
    """

    offset: int
    char: str
    category: InputCategory
    state: NumberState


def _trimmed(value: str) -> tuple[str, int]:
    """Strip surrounding whitespace, returning the text and its offset."""
    if not isinstance(value, str):
        msg = f"Expected str, got {type(value).__name__}"
        raise TypeError(msg)
    stripped = value.lstrip(WHITESPACE)
    return stripped.rstrip(WHITESPACE), len(value) - len(stripped)


def scan(value: str) -> Iterator[ScanStep]:
    """Lazily run the machine over value, one step per consumed character.

    Args:
        value: Input string; surrounding whitespace is skipped

    Yields:
        ScanStep for each character of the trimmed input

    Raises:
        TypeError: If value is not a str

    Example:
        >>> [str(step.state) for step in scan(" 0.5")]
        ['zero', 'decimal point', 'digit after decimal point']
        >>> [step.offset for step in scan(" 0.5")]
        [1, 2, 3]
    """
    text, start = _trimmed(value)
    return _steps(text, start)


def _steps(text: str, start: int) -> Iterator[ScanStep]:
    state = NumberState.START
    for offset, char in enumerate(text, start):
        category = classify(char)
        state = next_state(state, category)
        yield ScanStep(offset=offset, char=char, category=category, state=state)


def final_state(value: str) -> NumberState:
    """Return the state the machine ends in after consuming value.

    Args:
        value: Input string; surrounding whitespace is skipped

    Returns:
        Final NumberState (START for empty or whitespace-only input)

    Raises:
        TypeError: If value is not a str

    Examples:
        >>> final_state("45.6")
        <NumberState.DIGIT_AFTER_DECIMAL_POINT: 'digit after decimal point'>
        >>> final_state("")
        <NumberState.START: 'start'>
        >>> final_state("3.ad")
        <NumberState.FAIL: 'fail'>
    """
    state = NumberState.START
    for step in scan(value):
        state = step.state
    return state


def validate(value: str) -> tuple[NumberState, bool]:
    """Validate value against the number grammar.

    Args:
        value: Input string; surrounding whitespace is skipped

    Returns:
        Tuple of (state, is_valid):
        - state: Final state of the machine
        - is_valid: Whether that state is accepting

    Raises:
        TypeError: If value is not a str

    Examples:
        >>> validate(" 42 ")
        (<NumberState.DIGIT_BEFORE_DECIMAL_POINT: 'digit before decimal point'>, True)
        >>> validate("01")
        (<NumberState.FAIL: 'fail'>, False)
        >>> validate("1.")
        (<NumberState.DECIMAL_POINT: 'decimal point'>, False)
    """
    state = final_state(value)
    valid = is_valid_state(state)
    if logger.isEnabledFor(logging.DEBUG):
        shown = value[:MAX_LOG_INPUT_LENGTH]
        suffix = "..." if len(value) > MAX_LOG_INPUT_LENGTH else ""
        logger.debug("Validated %r%s: %s (valid=%s)", shown, suffix, state, valid)
    return state, valid


def is_valid_number(value: str) -> bool:
    """Check if value is a well-formed non-negative decimal number.

    Example:
        >>> is_valid_number("0.0")
        True
        >>> is_valid_number(".5")
        False
    """
    return validate(value)[1]
