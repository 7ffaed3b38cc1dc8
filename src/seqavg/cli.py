# connects input (args, file or stdin) to the service and prints the result in a fixed format.

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
from .config import MAX_PRECISION, load_settings
from .errors import InvalidInputError, SeqAvgError
from .logs import get_logger
from .service import parse_values, read_values, summarize

logger = get_logger("seqavg")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seqavg", description="Print the arithmetic mean of a list of numbers.")
    parser.add_argument("numbers", nargs="*", help="numbers to average; otherwise --file, then stdin")
    parser.add_argument("-f", "--file", help="read numbers from a text file")
    parser.add_argument("--strict", action="store_true", help="fail on empty input instead of printing nan")
    parser.add_argument("--precision", type=int, default=None, help=f"decimal places, 0..{MAX_PRECISION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser

def _shield_numbers(argv: List[str]) -> List[str]:
    # argparse only takes plain negative decimals as positionals, a leading space
    # keeps -1e3 or -inf out of option matching and float() ignores it
    shielded = []
    for arg in argv:
        if arg.startswith("-") and arg != "--":
            try:
                float(arg)
            except ValueError:
                pass
            else:
                arg = " " + arg
        shielded.append(arg)
    return shielded

def format_result(count: int, average: float, precision: int) -> str:
    return f"Average: {average:.{precision}f} (n={count})"

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(_shield_numbers(sys.argv[1:] if argv is None else argv))
    if args.numbers and args.file:
        parser.error("give numbers as arguments or --file, not both")
    logger.setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = load_settings()
        precision = settings.precision if args.precision is None else args.precision
        if not (0 <= precision <= MAX_PRECISION):
            raise SeqAvgError(f"--precision must be between 0 and {MAX_PRECISION} (got {precision})")
        policy = "raise" if args.strict else settings.empty_policy

        if args.numbers:
            values = parse_values(args.numbers)
        elif args.file:
            values = read_values(args.file)
        else:
            try:
                text = sys.stdin.read()
            except UnicodeDecodeError as exc:
                raise InvalidInputError(f"Cannot decode stdin: {exc}") from exc
            values = parse_values(text.splitlines())

        result = summarize(values, policy=policy)
    except SeqAvgError as exc:
        logger.error("%s", exc)
        return 1

    print(format_result(result.count, result.average, precision))
    return 0

if __name__ == "__main__":
    sys.exit(main())
