"""Exception hierarchy with structured diagnostics.

Rejected input is never an exception: it is a non-accepting final state.
These exceptions signal programming errors only, such as a transition
table that does not cover every (state, input category) pair.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["NumberFSMError", "TransitionTableError"]


class NumberFSMError(Exception):
    """Base exception for all decimalfsm errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumberFSMError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TransitionTableError(NumberFSMError):
    """Transition table is not a total function over states and categories.

    Raised when the table misses a (state, category) pair or maps one to
    something that is not a NumberState. The shipped table is checked at
    import time, so an incomplete edit fails before any input is scanned.
    """
