"""Explain why an input was rejected.

The explanation is read off the same scan that decides acceptance: the
step that entered FAIL (or the final state when the scan never failed)
determines the diagnostic. Acceptance itself never depends on this module.

Python 3.13+.
"""

from decimalfsm.diagnostics import Diagnostic, ErrorTemplate
from decimalfsm.enums import InputCategory, NumberState

from .guards import is_valid_state
from .scanner import ScanStep, scan

__all__ = ["explain"]


def explain(value: str) -> Diagnostic | None:
    """Describe the first reason value is not a valid number.

    Args:
        value: Input string; surrounding whitespace is skipped

    Returns:
        None if value is accepted, otherwise a Diagnostic whose span
        points into the original, untrimmed value

    Raises:
        TypeError: If value is not a str

    Examples:
        >>> explain("12.5") is None
        True
        >>> explain("01").code
        <DiagnosticCode.LEADING_ZERO: 1004>
        >>> explain(" 1.").span.column
        3
    """
    previous = NumberState.START
    last: ScanStep | None = None
    for step in scan(value):
        if step.state is NumberState.FAIL:
            return _failure(previous, step)
        previous = step.state
        last = step

    if is_valid_state(previous):
        return None
    if last is None:
        return ErrorTemplate.empty_input()
    return ErrorTemplate.missing_fraction_digits(last.offset)


def _failure(previous: NumberState, step: ScanStep) -> Diagnostic:
    """Diagnostic for the transition from previous into FAIL."""
    if step.category is InputCategory.INVALID:
        return ErrorTemplate.invalid_character(step.char, step.offset)
    if previous is NumberState.START:
        return ErrorTemplate.missing_integer_part(step.offset)
    if previous is NumberState.ZERO:
        return ErrorTemplate.leading_zero(step.char, step.offset)
    # Only a point is left: from DECIMAL_POINT or DIGIT_AFTER_DECIMAL_POINT
    return ErrorTemplate.repeated_decimal_point(step.offset)
