"""Number grammar finite-state machine.

Classifier -> transition table -> driver -> validity predicate.

Public API:
    classify - Character to InputCategory
    next_state - Total, pure transition function
    TRANSITIONS - Read-only transition table
    verify_transition_table - Totality check (raises TransitionTableError)
    scan - Lazy per-character ScanStep stream
    final_state - Final NumberState for an input
    validate - Returns tuple[NumberState, bool]
    is_valid_number - Boolean convenience wrapper
    is_valid_state - Validity predicate on a final state
    explain - Diagnostic | None describing a rejection

Python 3.13+. Zero external dependencies.
"""

from .classifier import classify
from .explain import explain
from .guards import ACCEPTING_STATES, is_valid_state
from .scanner import ScanStep, final_state, is_valid_number, scan, validate
from .transitions import TRANSITIONS, next_state, verify_transition_table

__all__ = [
    "ACCEPTING_STATES",
    "TRANSITIONS",
    "ScanStep",
    "classify",
    "explain",
    "final_state",
    "is_valid_number",
    "is_valid_state",
    "next_state",
    "scan",
    "validate",
    "verify_transition_table",
]
