"""Read Linux battery attributes from sysfs and render a one-line summary."""

from batteryinfo.system.loader import BatteryLoader, read_battery
from batteryinfo.system.status import BatteryRecord

__version__ = "0.1.0"

__all__ = [
    "BatteryLoader",
    "BatteryRecord",
    "read_battery",
]
