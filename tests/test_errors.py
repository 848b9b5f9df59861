from pathlib import Path

import pytest

from batteryinfo.errors import (
    AttributeReadError,
    BatteryInfoError,
    ConversionError,
    EmptyAttributeError,
    InvalidDevicePathError,
    MissingAttributeError,
    UnknownAttributeError,
)


def test_invalid_device_path_message() -> None:
    err = InvalidDevicePathError(Path("/sys/class/power_supply/BAT1"))
    assert str(err) == "/sys/class/power_supply/BAT1 is not a directory."
    assert err.message == str(err)


@pytest.mark.parametrize(
    "err, expected",
    [
        (EmptyAttributeError(Path("/x/status")), "The requested item is empty: /x/status"),
        (
            MissingAttributeError(Path("/x/status")),
            "The requested item does not exist: /x/status",
        ),
        (UnknownAttributeError("foo"), "Unknown battery attribute: foo"),
        (
            ConversionError("capacity", "abc", "not an unsigned integer"),
            "A conversion error occurred: capacity='abc' (not an unsigned integer)",
        ),
    ],
)
def test_error_messages(err: BatteryInfoError, expected: str) -> None:
    assert isinstance(err, BatteryInfoError)
    assert str(err) == expected


def test_read_error_wraps_exception() -> None:
    try:
        raise FileNotFoundError("BOOM")
    except FileNotFoundError as e:
        err = AttributeReadError(Path("/x/capacity"), original_error=e)
        assert str(err) == "An IO error occurred: BOOM"
        assert err.original_error is e
