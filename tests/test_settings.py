import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from batteryinfo.settings import BatterySettings


def test_default_settings() -> None:
    settings = BatterySettings()
    assert settings.device_path == Path("/sys/class/power_supply/BAT1/")
    assert settings.attribute_path("capacity") == Path("/sys/class/power_supply/BAT1/capacity")


def test_logging_level() -> None:
    settings = BatterySettings(log_level="WARNING")
    assert settings.logging_level() == logging.WARNING
    assert settings.logging_level(debug=True) == logging.DEBUG


def test_invalid_log_level() -> None:
    with pytest.raises(ValidationError):
        BatterySettings(log_level="LOUD")  # type: ignore[arg-type]
