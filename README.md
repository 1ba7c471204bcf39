# clubledger

clubledger replays one working day of a computer club. It reads the day's
events and applies the club's rules. It reports when an event breaks a rule
and works out how much each table earned.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

The input is a plain text file:

```
3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:48 1 client2
09:54 2 client1 1
10:25 2 client2 2
12:33 4 client1
```

1. The first line gives the number of tables. It must be positive.
2. The second line gives the opening and closing times as `HH:MM HH:MM`.
3. The third line gives the price per started hour. It must be positive.
4. Each line after that is an event: `HH:MM <id> <args...>`. Blank lines are skipped.

Incoming event ids:

| id | meaning                 | arguments        |
|----|-------------------------|------------------|
| 1  | client arrives          | `client`         |
| 2  | client sits at a table  | `client table`   |
| 3  | client waits            | `client`         |
| 4  | client leaves           | `client`         |

Outgoing event ids, which the club writes itself:

| id | meaning |
|----|---------|
| 11 | the client leaves, either at closing time or because the queue is full |
| 12 | a waiting client takes the table that was just freed |
| 13 | error |

Error messages carried by event 13:

* `NotOpenYet`: the client arrived before opening or at or after closing.
* `YouShallNotPass`: the client is already in the club.
* `ClientUnknown`: the client is not in the club.
* `PlaceIsBusy`: the table is already taken.
* `ICanWaitNoLonger!`: the client wants to wait while a table is free.
* `Invalid table number`, `Missing event argument`, `Unknown event ID`: the event itself is malformed.

Any clients still waiting are not billed. The queue holds at most as many
clients as there are tables. A client who asks to wait when the queue is
already full leaves at once with event 11.

## Command line

```
clubledger day.txt
```

The output lists the following, in this order:

* the opening time,
* every event, with the club's own events and errors after the event that caused them,
* the clients still present at closing time, in alphabetical order,
* the closing time.

After that it prints one line per table: the table number, its revenue, and
the time it was billed for (`HH:MM`). Each started hour is billed as a whole
hour.

If no file is given, or the file cannot be opened or is malformed, the
command writes a message to standard error and exits with status 1.

## Library use

```python
import sys

from clubledger.clock import Time
from clubledger.events import Event
from clubledger.club import ComputerClub

club = ComputerClub(3, Time.from_string("09:00"), Time.from_string("19:00"), 10)
club.process_events([
    Event.parse("09:41 1 client1"),
    Event.parse("09:54 2 client1 1"),
    Event.parse("12:33 4 client1"),
])

print(club.table_revenue(1))   # 30
print(club.output)             # the event log as a list of lines
club.print_results(sys.stdout)
```

* `Time.from_string("HH:MM")` parses a time and raises `ValueError` on a bad one.
  `str(time)` formats it back, and subtracting two times gives the minutes between them.
* `Event.parse(line)` parses one event line. `str(event)` writes it back in log form.
* `ComputerClub` runs the day:
  * `process_events(events)` replays the events and closes the club.
  * `generate_closing_events()` sends the remaining clients away.
  * `output` is the event log.
  * `result_lines()` returns the log followed by the per-table summary.
  * `print_results(stream=None)` writes the same lines, to standard output by default.
  * `table_revenue(n)`, `table_occupied_since(n)` and `is_table_occupied(n)`
    report on table `n`. They raise `IndexError` for a table that does not exist.
* `clubledger.cli.load_input(lines)` parses the lines of an input file. It returns
  a `(ComputerClub, events)` pair and raises `ValueError` on malformed input.
* `clubledger.cli.main(argv=None)` is the entry point of the `clubledger`
  command. It returns the exit status.

## What it does not do

clubledger handles a single day at a time and keeps nothing between runs.
It stores no results, and it does not watch a live stream of events.