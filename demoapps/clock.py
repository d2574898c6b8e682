"""Formatting of elapsed stopwatch time."""

from __future__ import annotations


def _trunc_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // divisor
    return quotient if dividend >= 0 else -quotient


def _trunc_rem(dividend: int, divisor: int) -> int:
    return dividend - divisor * _trunc_div(dividend, divisor)


def format_elapsed(millis: int) -> str:
    """Render milliseconds as ``MM:SS:mmm``, minutes wrapping every hour."""
    seconds = _trunc_div(millis, 1000)
    minutes = _trunc_rem(_trunc_div(seconds, 60), 60)
    return f"{minutes:02}:{_trunc_rem(seconds, 60):02}:{_trunc_rem(millis, 1000):03}"