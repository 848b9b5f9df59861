from pathlib import Path
from typing import Final

# sysfs directory exposing the battery's attributes
DEFAULT_DEVICE_PATH: Final = Path("/sys/class/power_supply/BAT1/")

# Attribute files read from the device directory, in read order
ATTRIBUTE_NAMES: Final = (
    "capacity",
    "capacity_level",
    "manufacturer",
    "model_name",
    "serial_number",
    "status",
)

# Label shown for any attribute whose value is not known
UNKNOWN_LABEL: Final = "Unknown"
