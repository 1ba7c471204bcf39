"""Simulation of one working day of a computer club."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, TextIO

from clubledger.clock import Time, _parse_leading_int
from clubledger.events import Event

_NOT_SEATED = -1
_WAITING = -2


class _Rejected(Exception):
    """An event that the club's rules turn down."""


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def _arg(args: tuple[str, ...], index: int) -> str:
    if index >= len(args):
        raise ValueError("Missing event argument")
    return args[index]


@dataclass
class _Table:
    revenue: int = 0
    occupied_since: Time = field(default_factory=lambda: Time(0))
    occupied: bool = False


class ComputerClub:
    """Tracks clients, tables and takings while events are replayed."""

    def __init__(self, tables: int, start: Time, end: Time, price: int) -> None:
        self._tables_count = tables
        self._start = start
        self._end = end
        self._price = price
        self._tables = [_Table() for _ in range(max(tables, 0))]
        self._clients: dict[str, int] = {}
        self._queue: deque[str] = deque()
        self._output: list[str] = []

    @property
    def output(self) -> list[str]:
        """The event log produced so far."""
        return list(self._output)

    def process_events(self, events: Iterable[Event]) -> None:
        """Replay a day's events, then close the club."""
        self._output.append(str(self._start))
        for event in events:
            self._handle_event(event)
        self.generate_closing_events()
        self._output.append(str(self._end))

    def generate_closing_events(self) -> None:
        """Send every remaining client away at closing time."""
        for client in sorted(self._clients):
            if self._clients[client] != _NOT_SEATED:
                self._free_table(self._end, self._clients[client])
        for client in sorted(self._clients):
            self._output.append(f"{self._end} 11 {client}")

    def result_lines(self) -> list[str]:
        """The event log followed by one summary line per table."""
        lines = list(self._output)
        for number, table in enumerate(self._tables, start=1):
            total = Time(_trunc_div(table.revenue, self._price) * 60)
            lines.append(f"{number} {table.revenue} {total}")
        return lines

    def print_results(self, stream: TextIO | None = None) -> None:
        """Write the result lines to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        for line in self.result_lines():
            print(line, file=out)

    def table_revenue(self, table_number: int) -> int:
        return self._table(table_number).revenue

    def table_occupied_since(self, table_number: int) -> Time:
        return self._table(table_number).occupied_since

    def is_table_occupied(self, table_number: int) -> bool:
        return self._table(table_number).occupied

    def _table(self, number: int) -> _Table:
        if not self._valid_table(number):
            raise IndexError("Invalid table number")
        return self._tables[number - 1]

    def _valid_table(self, number: int) -> bool:
        return 1 <= number <= self._tables_count

    def _handle_event(self, event: Event) -> None:
        self._output.append(str(event))
        try:
            self._dispatch(event)
        except (_Rejected, ValueError) as exc:
            self._output.append(f"{event.time} 13 {exc}")

    def _dispatch(self, event: Event) -> None:
        time, args = event.time, event.args
        match event.id:
            case 1:
                self._client_arrived(time, _arg(args, 0))
            case 2:
                client = _arg(args, 0)
                self._client_sit(time, client, _parse_leading_int(_arg(args, 1)))
            case 3:
                self._client_wait(time, _arg(args, 0))
            case 4:
                self._client_leave(time, _arg(args, 0))
            case _:
                raise ValueError("Unknown event ID")

    def _client_arrived(self, time: Time, client: str) -> None:
        if time < self._start or self._end <= time:
            raise _Rejected("NotOpenYet")
        if client in self._clients:
            raise _Rejected("YouShallNotPass")
        self._clients[client] = _NOT_SEATED

    def _client_sit(self, time: Time, client: str, number: int) -> None:
        if client not in self._clients:
            raise _Rejected("ClientUnknown")
        if not self._valid_table(number):
            raise _Rejected("Invalid table number")
        table = self._tables[number - 1]
        if table.occupied:
            raise _Rejected("PlaceIsBusy")
        previous = self._clients[client]
        if previous != _NOT_SEATED:
            self._free_table(time, previous)
        table.occupied = True
        table.occupied_since = time
        self._clients[client] = number

    def _client_wait(self, time: Time, client: str) -> None:
        if client not in self._clients:
            raise _Rejected("ClientUnknown")
        if any(not table.occupied for table in self._tables):
            raise _Rejected("ICanWaitNoLonger!")
        if len(self._queue) >= self._tables_count:
            del self._clients[client]
            self._output.append(f"{time} 11 {client}")
            return
        self._queue.append(client)
        self._clients[client] = _WAITING

    def _client_leave(self, time: Time, client: str) -> None:
        if client not in self._clients:
            raise _Rejected("ClientUnknown")
        number = self._clients.pop(client)
        if number not in (_NOT_SEATED, _WAITING):
            self._free_table(time, number)
        if self._valid_table(number) and self._queue:
            next_client = self._queue.popleft()
            self._client_sit(time, next_client, number)
            self._output.append(f"{time} 12 {next_client} {number}")

    def _free_table(self, time: Time, number: int) -> None:
        if not self._valid_table(number):
            return
        table = self._tables[number - 1]
        if not table.occupied:
            return
        table.revenue += self._revenue_for(time - table.occupied_since)
        table.occupied = False

    def _revenue_for(self, minutes: int) -> int:
        return _trunc_div(minutes + 59, 60) * self._price