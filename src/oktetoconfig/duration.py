"""Parse and format Go-style duration strings ("30s", "1h30m", "1.5ms")."""

from __future__ import annotations

import re
from datetime import timedelta

_NANOSECOND = 1
_MICROSECOND_NS = 1000 * _NANOSECOND
_MILLISECOND_NS = 1000 * _MICROSECOND_NS
_SECOND_NS = 1000 * _MILLISECOND_NS
_MINUTE_NS = 60 * _SECOND_NS
_HOUR_NS = 60 * _MINUTE_NS

_MAX_NS = 2**63 - 1

# Longer whole parts overflow int64 nanoseconds; longer fractions add no precision.
_MAX_WHOLE_DIGITS = 19
_MAX_FRACTION_DIGITS = 18

UNITS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND_NS,
    "µs": _MICROSECOND_NS,  # micro sign
    "μs": _MICROSECOND_NS,  # greek mu
    "ms": _MILLISECOND_NS,
    "s": _SECOND_NS,
    "m": _MINUTE_NS,
    "h": _HOUR_NS,
}

# "ms" must be tried before "m".
_UNIT_PATTERN = "ns|us|µs|μs|ms|s|m|h"
_TERM = re.compile(rf"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>{_UNIT_PATTERN})")
_DURATION = re.compile(rf"(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:{_UNIT_PATTERN}))+")


class InvalidDuration(ValueError):
    """Raised when a string is not a valid duration."""


def parse_duration(text: str) -> timedelta:
    """Parse a duration string such as ``"300ms"``, ``"-1.5h"`` or ``"2h45m"``.

    Precision below one microsecond is rounded to the nearest microsecond.
    """
    sign = 1
    body = text
    if body[:1] in ("-", "+"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if body == "0":
        return timedelta(0)
    if not _DURATION.fullmatch(body):
        raise InvalidDuration(f"invalid duration: {text!r}")

    # The magnitude may reach 2**63 only when the sign makes it min int64.
    total = 0
    for term in _TERM.finditer(body):
        scale = UNITS[term.group("unit")]
        digits = term.group("whole").lstrip("0")
        if len(digits) > _MAX_WHOLE_DIGITS:
            raise InvalidDuration(f"invalid duration: {text!r}")
        frac = (term.group("frac") or "")[:_MAX_FRACTION_DIGITS]
        total += int(digits or 0) * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        if total > _MAX_NS + 1:
            raise InvalidDuration(f"invalid duration: {text!r}")
    if sign == 1 and total > _MAX_NS:
        raise InvalidDuration(f"invalid duration: {text!r}")

    micros, rem = divmod(total, _MICROSECOND_NS)
    if rem * 2 >= _MICROSECOND_NS:
        micros += 1
    return timedelta(microseconds=sign * micros)


def _with_fraction(value: int, scale: int) -> str:
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    width = len(str(scale)) - 1
    return f"{whole}.{str(frac).rjust(width, '0').rstrip('0')}"


def format_duration(value: timedelta) -> str:
    """Render ``value`` the way Go prints durations, e.g. ``2m0s`` or ``1.5s``."""
    ns = (value // timedelta(microseconds=1)) * _MICROSECOND_NS
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < _SECOND_NS:
        if ns < _MICROSECOND_NS:
            return f"{sign}{ns}ns"
        if ns < _MILLISECOND_NS:
            return f"{sign}{_with_fraction(ns, _MICROSECOND_NS)}µs"
        return f"{sign}{_with_fraction(ns, _MILLISECOND_NS)}ms"

    hours, rem = divmod(ns, _HOUR_NS)
    minutes, rem = divmod(rem, _MINUTE_NS)
    text = f"{_with_fraction(rem, _SECOND_NS)}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text


__all__ = [
    "InvalidDuration",
    "parse_duration",
    "format_duration",
]
