"""Hypothesis strategies for decimalfsm property-based testing.

Usage:
    from tests.strategies import valid_numbers, near_miss_numbers, padded
    from tests.strategies.numbers import NUMBER_PATTERN, matches_grammar
"""

from .numbers import (
    NUMBER_ALPHABET,
    NUMBER_PATTERN,
    WHITESPACE_CHARS,
    fraction_parts,
    integer_parts,
    matches_grammar,
    near_miss_numbers,
    number_like_text,
    padded,
    valid_numbers,
    whitespace,
)

__all__ = [
    "NUMBER_ALPHABET",
    "NUMBER_PATTERN",
    "WHITESPACE_CHARS",
    "fraction_parts",
    "integer_parts",
    "matches_grammar",
    "near_miss_numbers",
    "number_like_text",
    "padded",
    "valid_numbers",
    "whitespace",
]
