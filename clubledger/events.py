"""Incoming events read from the club's log."""

from __future__ import annotations

from dataclasses import dataclass

from clubledger.clock import Time, _parse_leading_int


@dataclass(frozen=True)
class Event:
    """One event: when it happened, its numeric kind and its arguments."""

    time: Time
    id: int
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, line: str) -> Event:
        """Parse a line of the form ``HH:MM <id> [args...]``."""
        tokens = line.split()
        time_text = tokens[0] if tokens else ""
        id_text = tokens[1] if len(tokens) > 1 else ""
        time = Time.from_string(time_text)
        event_id = _parse_leading_int(id_text)
        return cls(time, event_id, tuple(tokens[2:]))

    def __str__(self) -> str:
        return " ".join([str(self.time), str(self.id), *self.args])