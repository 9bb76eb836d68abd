"""Parsing of duration expressions like ``30s``, ``5m`` or ``1h30m``, and formatting of seconds."""

__all__ = ["DurationError", "UNITS", "parse_duration", "format_duration"]

import datetime
import re
from fractions import Fraction
from typing import Dict

from lifesaver.utils.formatting import human_delta

#: Unit suffixes and how many microseconds each of them is worth.
UNITS: Dict[str, Fraction] = {
    "ns": Fraction(1, 1000),
    "us": Fraction(1),
    "\N{MICRO SIGN}s": Fraction(1),
    "\N{GREEK SMALL LETTER MU}s": Fraction(1),
    "ms": Fraction(1000),
    "s": Fraction(1_000_000),
    "m": Fraction(60_000_000),
    "h": Fraction(3_600_000_000),
}

COMPONENT_RE = re.compile(r"(?P<whole>\d*)(?:\.(?P<frac>\d*))?(?P<unit>[^\d.]*)")
MAX_MICROSECONDS = int(datetime.timedelta.max.total_seconds()) * 1_000_000

#: Longest number accepted in a single component, well below what int() refuses.
MAX_DIGITS = 64


class DurationError(ValueError):
    """Raised when a duration expression can't be parsed."""

    def __init__(self, expression: str, reason: str) -> None:
        super().__init__(f"invalid duration {expression!r}: {reason}")
        self.expression = expression
        self.reason = reason


def parse_duration(expression: str) -> datetime.timedelta:
    """Parse a duration expression.

    An expression is an optionally signed sequence of decimal numbers, each
    with an optional fraction and a unit suffix, such as ``300ms``, ``-1.5h``
    or ``2h45m``. Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``,
    ``m`` and ``h``. A bare ``0`` is also accepted.

    Precision below a microsecond is truncated.
    """
    text = expression
    negative = False

    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return datetime.timedelta(0)
    if not text:
        raise DurationError(expression, "empty")

    total = Fraction(0)
    position = 0
    while position < len(text):
        match = COMPONENT_RE.match(text, position)
        assert match is not None
        whole, frac, unit = match.group("whole", "frac", "unit")

        if not whole and not frac:
            raise DurationError(expression, "expected a number")
        if not unit:
            raise DurationError(expression, "missing unit")
        if unit not in UNITS:
            raise DurationError(expression, f"unknown unit {unit!r}")

        if len(whole) + len(frac or "") > MAX_DIGITS:
            raise DurationError(expression, "too many digits")

        value = Fraction(int(whole or "0"))
        if frac:
            value += Fraction(int(frac), 10 ** len(frac))
        total += value * UNITS[unit]

        if total > MAX_MICROSECONDS:
            raise DurationError(expression, "too large")
        position = match.end()

    microseconds = int(total)
    return datetime.timedelta(microseconds=-microseconds if negative else microseconds)


def format_duration(seconds: int) -> str:
    """Format whole seconds for humans, e.g. ``1 minute and 30 seconds``."""
    if seconds == 0:
        return "0 seconds"
    return human_delta(datetime.timedelta(seconds=seconds))
