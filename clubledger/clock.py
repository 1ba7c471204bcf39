"""Times of day counted in minutes since midnight."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError("stoi")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError("stoi")
    return value


@dataclass(frozen=True, order=True)
class Time:
    """A clock time, stored as minutes since midnight."""

    minutes: int

    @classmethod
    def from_string(cls, text: str) -> Time:
        """Parse a time written as ``HH:MM``."""
        if len(text) != 5 or text[2] != ":":
            raise ValueError("Invalid time format")
        hours = _parse_leading_int(text[0:2])
        minutes = _parse_leading_int(text[3:5])
        if not (0 <= hours < 24 and 0 <= minutes < 60):
            raise ValueError("Invalid time value")
        return cls(hours * 60 + minutes)

    def __str__(self) -> str:
        return f"{self.minutes // 60:02d}:{self.minutes % 60:02d}"

    def __sub__(self, other: object) -> int:
        if not isinstance(other, Time):
            return NotImplemented
        return self.minutes - other.minutes