import pytest

from src.workforce_dashboard.workforce_dashboard.assignments.codec import (
    decode_cell,
    edit_time_bound,
    encode_cell,
    encode_time_range,
    is_rest_day,
    normalize_cell_value,
    split_time_range,
    toggle_rest_day,
)
from src.workforce_dashboard.workforce_dashboard.assignments.model import RestDay, TimeRange, Unset


def test_encode_full_range():
    assert encode_time_range("08:30", "20:30") == "08:30-20:30"


def test_encode_one_sided_keeps_separator():
    assert encode_time_range("09:00", "") == "09:00-"
    assert encode_time_range("", "18:00") == "-18:00"


def test_encode_empty_is_unset():
    assert encode_time_range("", "") == ""
    assert decode_cell(encode_time_range("", "")) == Unset()


@pytest.mark.parametrize(
    "start, end",
    [("08:30", "20:30"), ("21:30", "05:30"), ("09:00", ""), ("", "18:00"), ("00:00", "23:59")],
)
def test_decode_inverts_encode(start, end):
    assert decode_cell(encode_time_range(start, end)) == TimeRange(start=start, end=end)
    assert split_time_range(encode_time_range(start, end)) == (start, end)


def test_rest_day_sentinel():
    assert decode_cell("RD") == RestDay()
    assert encode_cell(RestDay()) == "RD"
    assert is_rest_day("RD")
    assert split_time_range("RD") == ("", "")


@pytest.mark.parametrize("value", ["", "-", "  ", None, 42, {"start": "09:00"}])
def test_empty_and_non_string_values_are_unset(value):
    assert decode_cell(value) == Unset()


@pytest.mark.parametrize("value", ["A", "B", "garbage", "25:00-26:00", "09:00-17:00-18:00", "9:00-17:00", "09:60-"])
def test_malformed_values_decode_defensively(value):
    assert decode_cell(value) == Unset()
    assert split_time_range(value) == ("", "")
    assert not is_rest_day(value)


def test_bare_time_from_older_clients_is_a_start_time():
    assert decode_cell("09:00") == TimeRange(start="09:00", end="")


def test_toggle_rest_day_from_time_range_loses_times():
    once = toggle_rest_day("09:00-17:00")
    assert once == "RD"
    twice = toggle_rest_day(once)
    assert twice == ""
    assert twice != "09:00-17:00"


def test_toggle_rest_day_from_unset_and_back():
    assert toggle_rest_day("") == "RD"
    assert toggle_rest_day(toggle_rest_day("")) == ""
    assert toggle_rest_day(toggle_rest_day("RD")) == "RD"
    assert toggle_rest_day("RD") != "RD"


def test_edit_time_bound_keeps_the_other_side():
    value = edit_time_bound("", start="08:30")
    assert value == "08:30-"
    value = edit_time_bound(value, end="20:30")
    assert value == "08:30-20:30"
    assert edit_time_bound(value, start="") == "-20:30"
    assert edit_time_bound("-20:30", end="") == ""


def test_edit_time_bound_replaces_rest_day():
    assert edit_time_bound("RD", start="07:00") == "07:00-"


def test_edit_time_bound_ignores_invalid_time():
    assert edit_time_bound("08:30-20:30", end="99:99") == "08:30-20:30"


def test_normalize_cell_value():
    assert normalize_cell_value(" RD ") == "RD"
    assert normalize_cell_value("08:30 - 20:30") == "08:30-20:30"
    assert normalize_cell_value("A") == ""
