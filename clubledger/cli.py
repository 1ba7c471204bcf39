"""Command line entry point: read a day's log and print the club's report."""

from __future__ import annotations

import sys
from typing import Iterable

from clubledger.clock import Time, _parse_leading_int
from clubledger.club import ComputerClub
from clubledger.events import Event


class InputError(ValueError):
    """The input file does not describe a valid day."""


def load_input(lines: Iterable[str]) -> tuple[ComputerClub, list[Event]]:
    """Build a club and its events from the lines of an input file."""
    stripped = (line.rstrip("\n") for line in lines)

    line = next(stripped, None)
    if line is None:
        raise InputError("Empty file")
    tables = _parse_leading_int(line)
    if tables <= 0:
        raise InputError("Invalid number of tables")

    line = next(stripped, None)
    if line is None:
        raise InputError("Missing working hours")
    hours = line.split()
    if len(hours) < 2:
        raise InputError("Invalid time format")
    start, end = Time.from_string(hours[0]), Time.from_string(hours[1])

    line = next(stripped, None)
    if line is None:
        raise InputError("Missing price per hour")
    price = _parse_leading_int(line)
    if price <= 0:
        raise InputError("Invalid price")

    events = [Event.parse(line) for line in stripped if line]
    return ComputerClub(tables, start, end, price), events


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: clubledger <input_file>", file=sys.stderr)
        return 1
    path = args[0]
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError:
        print(f"Error: Unable to open file {path}", file=sys.stderr)
        return 1
    try:
        club, events = load_input(lines)
        club.process_events(events)
        club.print_results()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())