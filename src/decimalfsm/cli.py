"""Command-line shell for the number validator.

Without arguments, prompts for one line on stdin and reports the machine's
final state and verdict:

    $ decimalfsm
    Enter a string to check: 0.5
    Final state: digit after decimal point
    Is valid: yes

Values may also be given as arguments; each is reported in turn.

Exit status:
    0 - Values were checked (any verdict), or all accepted with --strict
    1 - --strict was given and at least one value was rejected
    2 - No input could be read

Python 3.13+.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from decimalfsm.constants import CLI_FINAL_STATE, CLI_IS_VALID, CLI_NO, CLI_PROMPT, CLI_YES
from decimalfsm.diagnostics import DiagnosticFormatter, OutputFormat
from decimalfsm.machine import explain, scan, validate

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_NO_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the decimalfsm command."""
    parser = argparse.ArgumentParser(
        prog="decimalfsm",
        description="Check whether strings are well-formed non-negative decimal numbers",
        epilog="Without VALUE arguments, one line is read from standard input.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="String to check (surrounding whitespace is ignored)",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print a diagnostic for every rejected value",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print every consumed character and the state it leads to",
    )
    parser.add_argument(
        "--format",
        choices=[str(fmt) for fmt in OutputFormat],
        default=str(OutputFormat.RUST),
        help="Diagnostic output format for --explain (default: rust)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any value is rejected",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def _read_value() -> str | None:
    """Prompt for and read one line, or None at end of input."""
    try:
        return input(CLI_PROMPT)
    except EOFError:
        return None


def _report(
    value: str,
    *,
    show_input: bool,
    trace: bool,
    formatter: DiagnosticFormatter | None,
) -> bool:
    """Print the result block for one value and return its verdict."""
    if show_input:
        print(f"Input: {value!r}")

    if trace:
        for step in scan(value):
            print(f"  [{step.offset}] {step.char!r} {step.category} -> {step.state}")

    state, valid = validate(value)
    print(CLI_FINAL_STATE.format(state=state))
    print(CLI_IS_VALID.format(verdict=CLI_YES if valid else CLI_NO))

    if formatter is not None and not valid:
        diagnostic = explain(value)
        if diagnostic is not None:
            print(formatter.format(diagnostic))

    return valid


def main(argv: Sequence[str] | None = None) -> int:
    """Run the decimalfsm command.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    values: list[str] = list(args.values)
    if not values:
        line = _read_value()
        if line is None:
            print("error: no input", file=sys.stderr)
            return EXIT_NO_INPUT
        values = [line]

    formatter = (
        DiagnosticFormatter(output_format=OutputFormat(args.format)) if args.explain else None
    )
    show_input = len(values) > 1

    verdicts: list[bool] = []
    for index, value in enumerate(values):
        if show_input and index:
            print()
        verdicts.append(
            _report(value, show_input=show_input, trace=args.trace, formatter=formatter)
        )

    rejected = verdicts.count(False)
    logger.debug("Checked %d value(s), %d rejected", len(verdicts), rejected)
    if args.strict and rejected:
        return EXIT_REJECTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
