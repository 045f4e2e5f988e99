"""Shared constants for decimalfsm.

This module provides centralized configuration constants used across
the machine, diagnostics and CLI packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Grammar characters: The only characters the number grammar accepts,
  and the whitespace trimmed around them
- Logging: Bounds on what is written to log records
- CLI strings: Prompt and result wording of the command-line shell

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar characters
    "DIGIT_ZERO",
    "NONZERO_DIGITS",
    "DECIMAL_POINT",
    "WHITESPACE",
    # Logging
    "MAX_LOG_INPUT_LENGTH",
    # CLI strings
    "CLI_PROMPT",
    "CLI_FINAL_STATE",
    "CLI_IS_VALID",
    "CLI_YES",
    "CLI_NO",
]

# ============================================================================
# GRAMMAR CHARACTERS
# ============================================================================
#
#   number ::= "0" | [1-9][0-9]* | ("0" | [1-9][0-9]*) "." [0-9]+
#
# Only ASCII digits count. str.isdigit() is deliberately not used: it accepts
# Arabic-Indic, fullwidth and superscript digits, which this grammar rejects.
#
# ============================================================================

DIGIT_ZERO: str = "0"

NONZERO_DIGITS: frozenset[str] = frozenset("123456789")

DECIMAL_POINT: str = "."

# Unicode White_Space property, the set trimmed from both ends of the input.
# Narrower than str.isspace(), which also counts U+001C..U+001F as space;
# those information separators are INVALID characters here.
WHITESPACE: str = (
    "\t\n\x0b\x0c\r"  # U+0009..U+000D
    " "  # U+0020
    "\x85"  # NEXT LINE
    "\xa0"  # NO-BREAK SPACE
    "\u1680"  # OGHAM SPACE MARK
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029"  # LINE and PARAGRAPH SEPARATOR
    "\u202f"  # NARROW NO-BREAK SPACE
    "\u205f"  # MEDIUM MATHEMATICAL SPACE
    "\u3000"  # IDEOGRAPHIC SPACE
)

# ============================================================================
# LOGGING
# ============================================================================

# Inputs longer than this are truncated in DEBUG records.
# Input length is unbounded, log lines should not be.
MAX_LOG_INPUT_LENGTH: int = 50

# ============================================================================
# CLI STRINGS
# ============================================================================

CLI_PROMPT: str = "Enter a string to check: "
CLI_FINAL_STATE: str = "Final state: {state}"
CLI_IS_VALID: str = "Is valid: {verdict}"
CLI_YES: str = "yes"
CLI_NO: str = "no"
