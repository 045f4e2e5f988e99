"""Diagnostic codes and data structures.

Defines rejection codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Rejection reasons (input does not match the grammar)
        9000-9999: Internal errors (machine definition problems)
    """

    # Rejection reasons (1000-1999)
    EMPTY_INPUT = 1001
    INVALID_CHARACTER = 1002
    MISSING_INTEGER_PART = 1003
    LEADING_ZERO = 1004
    REPEATED_DECIMAL_POINT = 1005
    MISSING_FRACTION_DIGITS = 1006

    # Internal errors (9000-9999)
    TRANSITION_TABLE_INCOMPLETE = 9001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Input location for diagnostic reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. Offsets refer to the original, untrimmed input.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or column
                is less than 1 (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, offset: int) -> "SourceSpan":
        """Span covering the single character at offset."""
        return cls(start=offset, end=offset + 1, column=offset + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich information
    for both humans and tools.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        span: Input location (None when no single character is to blame)
        hint: Suggestion for fixing the input
        severity: Severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[LEADING_ZERO]: Digit '1' follows a leading zero
              --> column 2
              = help: Remove the leading zero, or write a decimal point after it

        Returns:
            Formatted diagnostic
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
