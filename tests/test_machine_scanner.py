"""Tests for the driver: validate, final_state, scan and is_valid_number.

The case lists include the full original acceptance suite.
"""

from __future__ import annotations

import logging

import pytest

from decimalfsm import NumberState, final_state, is_valid_number, scan, validate
from decimalfsm.constants import WHITESPACE
from decimalfsm.enums import InputCategory
from decimalfsm.machine import ScanStep

VALID_INTEGERS = ["0", "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "100", "3141592653"]
INVALID_INTEGERS = ["00", "01"]
VALID_DECIMALS = ["1.0", "0.0", "0.1", "10.0", "100.0", "3.14", "45.6"]
INVALID_DECIMALS = [".", "0.", "1.", ".1", ".0", "0.."]
INVALID_MISC = ["", "abc", "3.ad"]


# ============================================================================
# ACCEPTANCE
# ============================================================================


class TestValidateAcceptance:
    """validate() verdicts on hand-picked inputs."""

    @pytest.mark.parametrize("value", VALID_INTEGERS)
    def test_valid_integers(self, value: str) -> None:
        _, valid = validate(value)
        assert valid is True

    @pytest.mark.parametrize("value", INVALID_INTEGERS)
    def test_invalid_integers(self, value: str) -> None:
        _, valid = validate(value)
        assert valid is False

    @pytest.mark.parametrize("value", VALID_DECIMALS)
    def test_valid_decimals(self, value: str) -> None:
        _, valid = validate(value)
        assert valid is True

    @pytest.mark.parametrize("value", INVALID_DECIMALS)
    def test_invalid_decimals(self, value: str) -> None:
        _, valid = validate(value)
        assert valid is False

    @pytest.mark.parametrize("value", INVALID_MISC)
    def test_invalid_misc(self, value: str) -> None:
        _, valid = validate(value)
        assert valid is False

    @pytest.mark.parametrize(
        "value",
        ["+1", "-1", "1e5", "1E5", "1,000", "1_000", "1,5", "٣", "１", "1.2.3", "0x10"],
    )
    def test_unsupported_notations_rejected(self, value: str) -> None:
        """Signs, exponents, separators, locale marks and foreign digits fail."""
        assert validate(value) == (NumberState.FAIL, False)


# ============================================================================
# FINAL STATES
# ============================================================================


class TestFinalState:
    """final_state() lands in the documented state."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", NumberState.START),
            ("abc", NumberState.FAIL),
            ("3.ad", NumberState.FAIL),
            ("0", NumberState.ZERO),
            ("7", NumberState.DIGIT_BEFORE_DECIMAL_POINT),
            ("100", NumberState.DIGIT_BEFORE_DECIMAL_POINT),
            ("0.", NumberState.DECIMAL_POINT),
            ("12.", NumberState.DECIMAL_POINT),
            ("0.0", NumberState.DIGIT_AFTER_DECIMAL_POINT),
            ("45.6", NumberState.DIGIT_AFTER_DECIMAL_POINT),
            ("00", NumberState.FAIL),
            (".5", NumberState.FAIL),
            ("0..", NumberState.FAIL),
        ],
    )
    def test_final_state(self, value: str, expected: NumberState) -> None:
        assert final_state(value) is expected

    def test_validate_returns_final_state(self) -> None:
        assert validate("45.6") == (NumberState.DIGIT_AFTER_DECIMAL_POINT, True)
        assert validate("1.") == (NumberState.DECIMAL_POINT, False)

    def test_determinism(self) -> None:
        """Same input, same result, call after call."""
        assert validate("3.14") == validate("3.14")
        assert validate("0..") == validate("0..")

    def test_long_input(self) -> None:
        """Length is unbounded; one linear pass."""
        value = "9" * 100_000 + "." + "0" * 100_000
        assert validate(value) == (NumberState.DIGIT_AFTER_DECIMAL_POINT, True)

    def test_fail_is_sticky(self) -> None:
        """Valid characters after a failure do not recover the scan."""
        assert final_state("01.5") is NumberState.FAIL
        assert final_state("a123") is NumberState.FAIL


# ============================================================================
# WHITESPACE
# ============================================================================


class TestWhitespace:
    """Surrounding whitespace is trimmed; internal whitespace is invalid."""

    @pytest.mark.parametrize(
        "value", [" 42 ", "42\n", "\t0.5", "  0  ", "\u00a07\u3000", "1.0\r\n"]
    )
    def test_surrounding_whitespace_ignored(self, value: str) -> None:
        assert is_valid_number(value)

    @pytest.mark.parametrize("value", ["4 2", "0 .5", "1. 0", "1\t0"])
    def test_internal_whitespace_fails(self, value: str) -> None:
        assert validate(value) == (NumberState.FAIL, False)

    @pytest.mark.parametrize("value", [" ", "\n", "\t \r\n"])
    def test_whitespace_only_is_empty(self, value: str) -> None:
        assert validate(value) == (NumberState.START, False)

    @pytest.mark.parametrize("value", ["\x855\u2028", "\u16800.5\u205f", "\u200a12\u2029"])
    def test_unicode_white_space_trimmed(self, value: str) -> None:
        assert is_valid_number(value)

    def test_information_separator_is_not_trimmed(self) -> None:
        """U+001C..U+001F are str.isspace() but not White_Space."""
        assert validate("\x1c5") == (NumberState.FAIL, False)

    @pytest.mark.parametrize("sep", ["\x1c", "\x1d", "\x1e", "\x1f"])
    def test_information_separators_fail_either_side(self, sep: str) -> None:
        assert validate(sep + "5") == (NumberState.FAIL, False)
        assert validate("5" + sep) == (NumberState.FAIL, False)

    def test_trimmed_set_matches_white_space_property(self) -> None:
        """Trimmed chars are all str.isspace(); only U+001C..U+001F are left out."""
        assert all(char.isspace() for char in WHITESPACE)
        spaces = (chr(code) for code in range(0x110000))
        not_trimmed = [char for char in spaces if char.isspace() and char not in WHITESPACE]
        assert not_trimmed == ["\x1c", "\x1d", "\x1e", "\x1f"]


# ============================================================================
# SCAN
# ============================================================================


class TestScan:
    """scan() exposes each step of the fold."""

    def test_steps_for_decimal(self) -> None:
        steps = list(scan("0.5"))

        assert steps == [
            ScanStep(0, "0", InputCategory.DIGIT_ZERO, NumberState.ZERO),
            ScanStep(1, ".", InputCategory.DECIMAL_POINT, NumberState.DECIMAL_POINT),
            ScanStep(
                2, "5", InputCategory.DIGIT_NONZERO, NumberState.DIGIT_AFTER_DECIMAL_POINT
            ),
        ]

    def test_offsets_refer_to_untrimmed_input(self) -> None:
        value = "   12 "
        offsets = [step.offset for step in scan(value)]

        assert offsets == [3, 4]
        assert [value[offset] for offset in offsets] == ["1", "2"]

    def test_empty_input_has_no_steps(self) -> None:
        assert list(scan("   ")) == []

    def test_last_step_matches_final_state(self) -> None:
        for value in ["0", "0.", "12.50", "1a", "0..1"]:
            assert list(scan(value))[-1].state is final_state(value)

    @pytest.mark.parametrize("value", ["", "  ", "7", " 0.25 ", "0..", "\x1c1"])
    def test_final_state_folds_scan(self, value: str) -> None:
        """final_state is the last scanned state, START when nothing is scanned."""
        steps = list(scan(value))
        expected = steps[-1].state if steps else NumberState.START
        assert final_state(value) is expected

    def test_scan_continues_through_fail(self) -> None:
        """Every character is consumed, even after FAIL."""
        steps = list(scan("x12"))
        assert len(steps) == 3
        assert all(step.state is NumberState.FAIL for step in steps)

    def test_scan_step_is_immutable(self) -> None:
        step = next(scan("1"))
        with pytest.raises(AttributeError):
            step.state = NumberState.FAIL  # type: ignore[misc]


# ============================================================================
# API BOUNDARY
# ============================================================================


class TestApiBoundary:
    """Non-str arguments are programming errors."""

    @pytest.mark.parametrize("value", [None, 42, 4.2, b"42", ["4", "2"]])
    def test_non_str_raises_type_error(self, value: object) -> None:
        with pytest.raises(TypeError, match="Expected str"):
            validate(value)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            scan(value)  # type: ignore[arg-type]

    def test_str_subclass_accepted(self) -> None:
        class Tagged(str):
            pass

        assert is_valid_number(Tagged("12.5"))


# ============================================================================
# LOGGING
# ============================================================================


class TestLogging:
    """validate() reports completed validations at DEBUG level."""

    def test_debug_record(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="decimalfsm"):
            validate("0.5")

        messages = [record.getMessage() for record in caplog.records]
        assert any("'0.5'" in m and "digit after decimal point" in m for m in messages)

    def test_long_input_truncated_in_log(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="decimalfsm"):
            validate("1" * 500)

        record = caplog.records[-1]
        assert "..." in record.getMessage()
        assert len(record.getMessage()) < 200

    def test_silent_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="decimalfsm"):
            validate("0.5")

        assert not caplog.records
