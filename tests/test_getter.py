"""Tests for getter access."""

import pytest

from session_core import Null, PathNotFoundError, VInt, VText, parse_session_info
from session_core.getter import apply_getter, require, resolve, split_path

DOC = parse_session_info(
    "DriverInfo:\n"
    " DriverCarIdx: 1\n"
    " Drivers:\n"
    " - CarIdx: 0\n"
    "   UserName: Pace Car\n"
    " - CarIdx: 1\n"
    '   UserName: "Bob"\n'
    "   CarNumber: \"024\"\n"
)


def test_getter_key():
    assert apply_getter(DOC, "DriverInfo") is DOC.entries["DriverInfo"]

def test_getter_missing_key():
    assert apply_getter(DOC, "WeekendInfo") is Null

def test_getter_index_is_zero_based():
    drivers = resolve(DOC, "DriverInfo.Drivers")
    assert apply_getter(drivers, "0").entries["UserName"] == VText("Pace Car")

def test_getter_index_out_of_range():
    drivers = resolve(DOC, "DriverInfo.Drivers")
    assert apply_getter(drivers, "5") is Null

def test_getter_non_numeric_index():
    drivers = resolve(DOC, "DriverInfo.Drivers")
    assert apply_getter(drivers, "first") is Null
    assert apply_getter(drivers, "-1") is Null

def test_getter_on_scalar():
    assert apply_getter(VInt(3), "x") is Null


def test_split_path():
    assert split_path("a.b.0") == ["a", "b", "0"]
    assert split_path("  ") == []

def test_resolve_chain():
    assert resolve(DOC, "DriverInfo.Drivers.1.CarNumber") == VText("024")

def test_resolve_empty_path_is_identity():
    assert resolve(DOC, "") is DOC

def test_resolve_miss_is_null():
    assert resolve(DOC, "DriverInfo.Drivers.9.UserName") is Null


def test_require_hit():
    assert require(DOC, "DriverInfo.DriverCarIdx") == VInt(1)

def test_require_miss_names_segment():
    with pytest.raises(PathNotFoundError) as info:
        require(DOC, "DriverInfo.Cars.0")
    assert info.value.segment == "Cars"
    assert info.value.path == "DriverInfo.Cars.0"

def test_require_miss_is_a_key_error():
    with pytest.raises(KeyError):
        require(DOC, "Nope")
