"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostic messages are created here. NO f-strings in exception constructors!
    This keeps wording in one place and makes every case testable.
    """

    @staticmethod
    def empty_input() -> Diagnostic:
        """Input is empty or whitespace only."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_INPUT,
            message="Input is empty",
            span=None,
            hint="Enter at least one digit",
        )

    @staticmethod
    def invalid_character(char: str, offset: int) -> Diagnostic:
        """Character outside the number alphabet.

        Args:
            char: The offending character
            offset: Offset of the character in the original input

        Returns:
            Diagnostic for INVALID_CHARACTER
        """
        msg = f"Unexpected character {char!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER,
            message=msg,
            span=SourceSpan.at(offset),
            hint="Only the digits 0-9 and a single '.' are allowed",
        )

    @staticmethod
    def missing_integer_part(offset: int) -> Diagnostic:
        """Decimal point with no digit before it (".5")."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_INTEGER_PART,
            message="Decimal point is not preceded by a digit",
            span=SourceSpan.at(offset),
            hint="Write a digit before the decimal point, e.g. '0.5'",
        )

    @staticmethod
    def leading_zero(digit: str, offset: int) -> Diagnostic:
        """Digit following a lone leading zero ("01", "00").

        Args:
            digit: The digit that follows the zero
            offset: Offset of that digit in the original input

        Returns:
            Diagnostic for LEADING_ZERO
        """
        msg = f"Digit {digit!r} follows a leading zero"
        return Diagnostic(
            code=DiagnosticCode.LEADING_ZERO,
            message=msg,
            span=SourceSpan.at(offset),
            hint="Remove the leading zero, or write a decimal point after it",
        )

    @staticmethod
    def repeated_decimal_point(offset: int) -> Diagnostic:
        """Second decimal point ("1.2.3", "0..")."""
        return Diagnostic(
            code=DiagnosticCode.REPEATED_DECIMAL_POINT,
            message="Number already contains a decimal point",
            span=SourceSpan.at(offset),
            hint="A number may contain at most one decimal point",
        )

    @staticmethod
    def missing_fraction_digits(offset: int) -> Diagnostic:
        """Decimal point with no digit after it ("1.")."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_FRACTION_DIGITS,
            message="Decimal point is not followed by a digit",
            span=SourceSpan.at(offset),
            hint="Write at least one digit after the decimal point, e.g. '1.0'",
        )

    @staticmethod
    def transition_table_incomplete(state: str, category: str) -> Diagnostic:
        """Transition table has no valid entry for a (state, category) pair.

        Args:
            state: Label of the state row
            category: Label of the input category column

        Returns:
            Diagnostic for TRANSITION_TABLE_INCOMPLETE
        """
        msg = f"No valid transition for state '{state}' on input '{category}'"
        return Diagnostic(
            code=DiagnosticCode.TRANSITION_TABLE_INCOMPLETE,
            message=msg,
            span=None,
            hint="Every state needs exactly one successor for every input category",
        )
