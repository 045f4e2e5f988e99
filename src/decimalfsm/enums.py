"""Enumerations for the number grammar state machine.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so the value of each NumberState
member doubles as its public display label.

Python 3.13+.
"""

from enum import StrEnum


class InputCategory(StrEnum):
    """Symbolic category of a single input character.

    Derived per character by the classifier; never stored.

    StrEnum provides automatic string conversion: str(InputCategory.INVALID) == "invalid"
    """

    DIGIT_ZERO = "digit zero"
    """The character '0'"""

    DIGIT_NONZERO = "digit nonzero"
    """Any of '1'..'9' (the digit value is not retained)"""

    DECIMAL_POINT = "decimal point"
    """The character '.'"""

    INVALID = "invalid"
    """Any other character"""


class NumberState(StrEnum):
    """State of the number grammar machine.

    A closed set with no payload. The value is the human-readable label:
    str(NumberState.DIGIT_BEFORE_DECIMAL_POINT) == "digit before decimal point"
    """

    START = "start"
    """Nothing consumed yet"""

    ZERO = "zero"
    """Exactly the single digit "0" consumed, no point yet"""

    FAIL = "fail"
    """Absorbing error state"""

    DECIMAL_POINT = "decimal point"
    """A point was just consumed; no digit after it yet"""

    DIGIT_BEFORE_DECIMAL_POINT = "digit before decimal point"
    """One or more digits consumed, first digit nonzero, no point yet"""

    DIGIT_AFTER_DECIMAL_POINT = "digit after decimal point"
    """At least one digit consumed after the point"""


__all__ = [
    "InputCategory",
    "NumberState",
]
