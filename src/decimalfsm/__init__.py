"""decimalfsm - Finite-state validation of non-negative decimal numbers.

Accepts exactly the strings matching

    0 | [1-9][0-9]* | (0 | [1-9][0-9]*) "." [0-9]+

after surrounding whitespace is trimmed, in one left-to-right pass with O(1)
memory. Rejected input is a result, never an exception.

Public API:
    validate - Returns tuple[NumberState, bool]
    final_state - Final NumberState for an input
    is_valid_number - Boolean convenience wrapper
    scan - Per-character ScanStep stream (tracing)
    explain - Diagnostic describing why an input was rejected
    classify / next_state / is_valid_state - The machine's building blocks
    NumberState - Machine states; str(state) is the display label
    InputCategory - Character categories

Exceptions:
    NumberFSMError - Base exception class
    TransitionTableError - Transition table is not total

Submodules:
    decimalfsm.machine - Classifier, transition table, driver, predicate
    decimalfsm.diagnostics - Diagnostic codes, templates and formatting
    decimalfsm.cli - Command-line shell
"""

from .diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    NumberFSMError,
    OutputFormat,
    TransitionTableError,
)
from .enums import InputCategory, NumberState
from .machine import (
    ScanStep,
    classify,
    explain,
    final_state,
    is_valid_number,
    is_valid_state,
    next_state,
    scan,
    validate,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("decimalfsm")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "InputCategory",
    "NumberFSMError",
    "NumberState",
    "OutputFormat",
    "ScanStep",
    "TransitionTableError",
    "__version__",
    "classify",
    "explain",
    "final_state",
    "is_valid_number",
    "is_valid_state",
    "next_state",
    "scan",
    "validate",
]
