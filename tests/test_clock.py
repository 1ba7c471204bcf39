import pytest

from clubledger.clock import Time


def test_parse_valid_time():
    assert Time.from_string("09:00").minutes == 540
    assert Time.from_string("23:59").minutes == 1439


@pytest.mark.parametrize("text", ["9:00", "09-00", "", "009:00"])
def test_parse_invalid_format(text):
    with pytest.raises(ValueError, match="Invalid time format"):
        Time.from_string(text)


@pytest.mark.parametrize("text", ["25:00", "24:00", "12:60"])
def test_parse_invalid_value(text):
    with pytest.raises(ValueError, match="Invalid time value"):
        Time.from_string(text)


def test_non_numeric_parts_rejected():
    with pytest.raises(ValueError):
        Time.from_string("ab:cd")


@pytest.mark.parametrize("text", ["00:00", "09:05", "19:00", "23:59"])
def test_round_trip(text):
    assert str(Time.from_string(text)) == text


def test_str_pads_with_zeros():
    assert str(Time(540)) == "09:00"


def test_subtraction_gives_minutes():
    assert Time.from_string("12:33") - Time.from_string("09:54") == 159


def test_ordering():
    early = Time.from_string("09:00")
    late = Time.from_string("19:00")
    assert early < late
    assert early <= early
    assert not late < early