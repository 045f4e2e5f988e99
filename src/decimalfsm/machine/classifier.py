"""Character classifier for the number grammar.

Maps a single character to one of the closed set of InputCategory values.
Unclassifiable characters are never an error: they become INVALID and the
transition table routes them to FAIL.

Python 3.13+. Zero external dependencies.
"""

from decimalfsm.constants import DECIMAL_POINT, DIGIT_ZERO, NONZERO_DIGITS
from decimalfsm.enums import InputCategory

__all__ = ["classify"]


def classify(char: str) -> InputCategory:
    """Classify one character.

    Args:
        char: A single character. Anything else (empty string, several
            characters) classifies as INVALID.

    Returns:
        The input category of char

    Examples:
        >>> classify("0")
        <InputCategory.DIGIT_ZERO: 'digit zero'>
        >>> classify("7")
        <InputCategory.DIGIT_NONZERO: 'digit nonzero'>
        >>> classify(".")
        <InputCategory.DECIMAL_POINT: 'decimal point'>
        >>> classify("٣")  # ARABIC-INDIC DIGIT THREE
        <InputCategory.INVALID: 'invalid'>
    """
    if char == DIGIT_ZERO:
        return InputCategory.DIGIT_ZERO
    if char in NONZERO_DIGITS:
        return InputCategory.DIGIT_NONZERO
    if char == DECIMAL_POINT:
        return InputCategory.DECIMAL_POINT
    return InputCategory.INVALID
