"""Duration text parsing and interval normalization.

Intervals are written as a sequence of ``<number><unit>`` groups, for
example ``10s``, ``1m10s`` or ``1.5h``.  Accepted units:

  ns, us (or µs / μs), ms, s, m, h

An optional leading sign is allowed, and the bare string ``0`` is valid.
A value made only of decimal digits is *not* a duration on its own; the
validation pass turns it into seconds via :func:`normalize_interval`.
"""

from __future__ import annotations

import re
from datetime import timedelta

from relwatch.domain.errors import DurationError

UNIT_NANOSECONDS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

# Longer units first so "ms" wins over "m".
_UNIT_PATTERN = "|".join(sorted(map(re.escape, UNIT_NANOSECONDS), key=len, reverse=True))
_NUMBER_PATTERN = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"

DURATION_PATTERN = re.compile(rf"[-+]?(?:{_NUMBER_PATTERN}(?:{_UNIT_PATTERN}))+")
_COMPONENT_PATTERN = re.compile(rf"([0-9]*)(?:\.([0-9]*))?({_UNIT_PATTERN})")
_DECIMAL_PATTERN = re.compile(r"[0-9]+")

DEFAULT_UNIT = "s"

# Largest magnitude a duration may take (signed 64-bit nanoseconds, ~2562047h).
MAX_DURATION_NS = 2**63 - 1
_MAX_WHOLE_DIGITS = 19
_MAX_FRACTION_DIGITS = 20


def is_decimal(text: str) -> bool:
    """Return True when *text* is a non-empty run of ASCII digits."""
    return _DECIMAL_PATTERN.fullmatch(text) is not None


def parse_duration(text: str) -> timedelta:
    """Parse a duration expression into a :class:`timedelta`.

    Raises:
        DurationError: If *text* does not follow the duration grammar or
            exceeds :data:`MAX_DURATION_NS`.
    """
    if text in ("0", "+0", "-0"):
        return timedelta(0)
    if not DURATION_PATTERN.fullmatch(text):
        raise DurationError(text)

    negative = text.startswith("-")
    body = text.lstrip("+-")

    total_ns = 0
    for whole, fraction, unit in _COMPONENT_PATTERN.findall(body):
        scale = UNIT_NANOSECONDS[unit]
        if len(whole.lstrip("0")) > _MAX_WHOLE_DIGITS:
            raise DurationError(text)
        total_ns += int(whole.lstrip("0") or "0") * scale
        if fraction:
            # Digits past nanosecond precision cannot change the total.
            fraction = fraction[:_MAX_FRACTION_DIGITS]
            total_ns += int(fraction) * scale // 10 ** len(fraction)
        if total_ns > MAX_DURATION_NS:
            raise DurationError(text)

    # timedelta resolution is one microsecond; finer precision is truncated.
    delta = timedelta(microseconds=total_ns // 1_000)
    return -delta if negative else delta


def is_valid_duration(text: str) -> bool:
    """Return True when *text* parses as a duration."""
    try:
        parse_duration(text)
    except DurationError:
        return False
    return True


def normalize_interval(value: str) -> tuple[str, bool]:
    """Validate *value* as an interval, appending seconds to bare integers.

    Returns:
        A ``(normalized_value, ok)`` tuple.  An empty value is valid and
        returned unchanged.  ``"10"`` becomes ``("10s", True)``; ``"10x"``
        stays ``("10x", False)``.
    """
    if not value:
        return value, True
    if is_decimal(value):
        value += DEFAULT_UNIT
    return value, is_valid_duration(value)
