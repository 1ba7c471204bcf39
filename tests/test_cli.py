import pytest

from clubledger.cli import InputError, load_input, main
from clubledger.clock import Time

SAMPLE = [
    "3\n",
    "09:00 19:00\n",
    "10\n",
    "08:48 1 client1\n",
    "\n",
    "09:41 1 client1\n",
    "09:54 2 client1 1\n",
]


def test_load_input_builds_club_and_events():
    club, events = load_input(SAMPLE)
    assert [str(event) for event in events] == [
        "08:48 1 client1",
        "09:41 1 client1",
        "09:54 2 client1 1",
    ]
    assert events[0].time == Time.from_string("08:48")
    club.process_events(events)
    assert club.output[0] == "09:00"
    assert club.output[-1] == "19:00"


@pytest.mark.parametrize(
    "lines, message",
    [
        ([], "Empty file"),
        (["0\n"], "Invalid number of tables"),
        (["3\n"], "Missing working hours"),
        (["3\n", "09:00\n"], "Invalid time format"),
        (["3\n", "09:00 19:00\n"], "Missing price per hour"),
        (["3\n", "09:00 19:00\n", "-5\n"], "Invalid price"),
    ],
)
def test_load_input_errors(lines, message):
    with pytest.raises(InputError, match=message):
        load_input(lines)


def test_load_input_bad_event_line():
    with pytest.raises(ValueError, match="Invalid time format"):
        load_input(["3\n", "09:00 19:00\n", "10\n", "9:00 1 a\n"])


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Usage:")


def test_main_missing_file(tmp_path, capsys):
    path = tmp_path / "absent.txt"
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.strip() == f"Error: Unable to open file {path}"


def test_main_reports_bad_input(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("0\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.strip() == "Error: Invalid number of tables"


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "day.txt"
    path.write_text("".join(SAMPLE), encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:4] == ["09:00", "08:48 1 client1", "08:48 13 NotOpenYet", "09:41 1 client1"]
    assert "19:00 11 client1" in lines
    assert lines[-3:] == ["1 100 10:00", "2 0 00:00", "3 0 00:00"]