"""Left-to-right evaluation of keypad calculator expressions."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Sequence
from decimal import Decimal
from itertools import takewhile

_OPERATORS = frozenset("+-*/")


def _parse_float(text: str) -> float:
    """Parse a number, rejecting the padding and separators ``float`` tolerates."""
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    return float(text)


def _divide(lhs: float, rhs: float) -> float:
    """IEEE division: a zero divisor yields an infinity or NaN instead of raising."""
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


_APPLY: dict[str, Callable[[float, float], float]] = {
    "+": lambda lhs, rhs: lhs + rhs,
    "-": lambda lhs, rhs: lhs - rhs,
    "*": lambda lhs, rhs: lhs * rhs,
    "/": _divide,
}


def _apply(symbol: str, lhs: float, rhs: float) -> float:
    return _APPLY[symbol](lhs, rhs)


def _format_number(value: float) -> str:
    """Render a float in plain positional notation, dropping a zero fraction."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def calc_val(val: str) -> float:
    """Evaluate ``val`` strictly left to right, ignoring operator precedence.

    A leading ``-`` belongs to the first number. Empty operands between
    operators are skipped, so the last operator typed wins.
    """
    if not val:
        raise ValueError("empty expression")

    sign, rest = ("-", val[1:]) if val[0] == "-" else ("", val)
    head = sign + "".join(takewhile(lambda c: c not in _OPERATORS, rest))
    result = _parse_float(head)

    start = len(head)
    if start + 1 >= len(val):
        return result

    operation = "+"
    operand = ""
    for char in val[start:]:
        if char in _OPERATORS:
            if operand:
                result = _apply(operation, result, _parse_float(operand))
            operation = char
            operand = ""
        else:
            operand += char

    if operand:
        result = _apply(operation, result, _parse_float(operand))
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate expressions from the command line, or one per line from stdin."""
    parser = argparse.ArgumentParser(
        prog="calculator",
        description="Evaluate calculator expressions left to right.",
    )
    parser.add_argument("expressions", nargs="*", help="expressions such as 2+3*4")
    args = parser.parse_args(argv)

    expressions = args.expressions or (
        line.strip() for line in sys.stdin if line.strip()
    )
    status = 0
    for expression in expressions:
        try:
            print(_format_number(calc_val(expression)))
        except ValueError as exc:
            print(f"error: {expression}: {exc}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())