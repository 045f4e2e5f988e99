"""Quickstart example for decimalfsm.

This example demonstrates validating number strings, reading the machine's
final state, tracing a scan and explaining rejections.

Note: Rejected input never raises. Every call returns a final state.
"""

from decimalfsm import (
    DiagnosticFormatter,
    NumberState,
    OutputFormat,
    explain,
    is_valid_number,
    scan,
    validate,
)

# Example 1: Validate
print("=" * 50)
print("Example 1: Validate")
print("=" * 50)

for value in ["0", "42", "3.14", " 7 ", "01", ".5", "1.", "0..", "", "4 2"]:
    state, valid = validate(value)
    print(f"{value!r:>8} -> {state} ({'valid' if valid else 'invalid'})")
# Output:      '0' -> zero (valid)
#             '42' -> digit before decimal point (valid)
#           '3.14' -> digit after decimal point (valid)
#           ...

# Example 2: Final states
print("\n" + "=" * 50)
print("Example 2: Final States")
print("=" * 50)

state, _ = validate("12.")
if state is NumberState.DECIMAL_POINT:
    print("'12.' stopped right after the decimal point")

print(f"is_valid_number('0.0') = {is_valid_number('0.0')}")

# Example 3: Trace a scan
print("\n" + "=" * 50)
print("Example 3: Trace")
print("=" * 50)

for step in scan("  10.5"):
    print(f"[{step.offset}] {step.char!r} {step.category} -> {step.state}")
# Output: [2] '1' digit nonzero -> digit before decimal point
#         [3] '0' digit zero -> digit before decimal point
#         ...

# Example 4: Explain rejections
print("\n" + "=" * 50)
print("Example 4: Explain")
print("=" * 50)

formatter = DiagnosticFormatter()
for value in ["007", "1.2.3", "12a"]:
    diagnostic = explain(value)
    if diagnostic is not None:
        print(f"{value!r}:")
        print(formatter.format(diagnostic))

json_formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
diagnostic = explain(".5")
if diagnostic is not None:
    print(json_formatter.format(diagnostic))

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
