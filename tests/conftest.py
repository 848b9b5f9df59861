from pathlib import Path

import pytest

from batteryinfo.settings import BatterySettings

VALID_ATTRIBUTES = {
    "capacity": "42\n",
    "capacity_level": "Normal\n",
    "manufacturer": "Acme\n",
    "model_name": "X100\n",
    "serial_number": "SN123\n",
    "status": "Charging\n",
}


@pytest.fixture
def battery_dir(tmp_path: Path) -> Path:
    """Fake sysfs battery directory holding six valid attribute files."""
    bat = tmp_path / "BAT1"
    bat.mkdir()
    for name, value in VALID_ATTRIBUTES.items():
        (bat / name).write_text(value)
    return bat


@pytest.fixture
def battery_settings(battery_dir: Path) -> BatterySettings:
    return BatterySettings(device_path=battery_dir)
