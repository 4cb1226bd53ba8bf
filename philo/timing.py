"""Clock, sleep and integer-parsing helpers shared by the simulation."""

from __future__ import annotations

import time

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def get_timestamp() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(time_in_ms: int) -> None:
    """Sleep for at least ``time_in_ms`` milliseconds, polling in small steps."""
    start = get_timestamp()
    while get_timestamp() - start < time_in_ms:
        time.sleep(0.0001)


def _to_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi_philo(text: str) -> int:
    """Parse a leading integer the way ``atoi`` does, wrapping to 32 bits.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. A string with no digits yields 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    result = int("".join(digits)) if digits else 0
    return _to_int32(sign * result)