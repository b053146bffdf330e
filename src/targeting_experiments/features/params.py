"""Parsers for raw feature parameter strings.

Each parser takes the raw string stored for a parameter and either returns
the typed value or raises ``TEError(Err.INVALID_PARAM)``. Callers decide
whether a rejection falls back to a default.
"""

from __future__ import annotations

import re
from datetime import timedelta

from targeting_experiments.utils.errors import Err, TEError

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DURATION_PATTERN = re.compile(r"([0-9]+)([smhd])")

DURATION_UNITS: dict[str, str] = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _to_int(raw: str, digits: str, expected: str) -> int:
    try:
        value = int(digits)
    except ValueError as exc:
        raise TEError(
            Err.INVALID_PARAM,
            ctx={"value": raw, "expected": expected, "reason": "overflow"},
            cause=exc,
        )
    if not INT32_MIN <= value <= INT32_MAX:
        raise TEError(
            Err.INVALID_PARAM,
            ctx={"value": raw, "expected": expected, "reason": "overflow"},
        )
    return value


def parse_int(raw: str) -> int:
    """Parse a signed 32-bit integer; anything outside that range is rejected."""

    if not isinstance(raw, str) or not _INT_PATTERN.fullmatch(raw):
        raise TEError(Err.INVALID_PARAM, ctx={"value": raw, "expected": "int"})
    return _to_int(raw, raw, "int")


def parse_duration(raw: str) -> timedelta:
    """Parse a compact duration literal such as ``"1d"`` or ``"30m"``.

    The literal is a non-negative integer magnitude followed immediately by a
    single unit character. Whitespace, signs and fractional magnitudes are
    rejected.
    """

    match = _DURATION_PATTERN.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise TEError(Err.INVALID_PARAM, ctx={"value": raw, "expected": "duration"})
    magnitude, unit = match.groups()
    value = _to_int(raw, magnitude, "duration")
    try:
        return timedelta(**{DURATION_UNITS[unit]: value})
    except OverflowError as exc:
        raise TEError(
            Err.INVALID_PARAM,
            ctx={"value": raw, "expected": "duration", "reason": "overflow"},
            cause=exc,
        )


__all__ = ["DURATION_UNITS", "parse_duration", "parse_int"]
