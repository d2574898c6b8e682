import pytest

from demoapps.clock import format_elapsed


def _parse(text):
    minutes, seconds, millis = text.split(":")
    return int(minutes), int(seconds), int(millis)


def test_zero():
    assert format_elapsed(0) == "00:00:000"


@pytest.mark.parametrize("millis", [0, 7, 999, 1000, 59_999, 61_001, 3_599_999])
def test_round_trip_within_an_hour(millis):
    minutes, seconds, ms = _parse(format_elapsed(millis))
    assert minutes * 60_000 + seconds * 1000 + ms == millis


@pytest.mark.parametrize("millis", [0, 1234, 754_321])
def test_minutes_wrap_every_hour(millis):
    assert format_elapsed(millis + 3_600_000) == format_elapsed(millis)


@pytest.mark.parametrize("millis", [5, 65_432, 3_599_999])
def test_fields_are_zero_padded(millis):
    minutes, seconds, ms = format_elapsed(millis).split(":")
    assert (len(minutes), len(seconds), len(ms)) == (2, 2, 3)


@pytest.mark.parametrize("millis", [1, 12_345, 3_000_000])
def test_fields_stay_in_range(millis):
    minutes, seconds, ms = _parse(format_elapsed(millis))
    assert 0 <= minutes < 60
    assert 0 <= seconds < 60
    assert 0 <= ms < 1000