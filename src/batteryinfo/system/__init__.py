# src/batteryinfo/system/__init__.py
"""System module for reading battery status from sysfs."""

# Re-export commonly used classes for cleaner imports
from batteryinfo.system.attributes import AttributeParser, CapacityLevel, PowerSupplyStatus
from batteryinfo.system.loader import BatteryLoader, read_battery
from batteryinfo.system.status import BatteryRecord

# Define the public API
__all__ = [
    "AttributeParser",
    "BatteryLoader",
    "BatteryRecord",
    "CapacityLevel",
    "PowerSupplyStatus",
    "read_battery",
]
