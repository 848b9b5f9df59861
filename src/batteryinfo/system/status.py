from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from batteryinfo.constants import UNKNOWN_LABEL
from batteryinfo.system.attributes import CapacityLevel, PowerSupplyStatus


class BatteryRecord(BaseModel):
    """Battery status assembled from the sysfs attribute files.

    A record is built once, after all six attributes were read and
    parsed, and is immutable afterwards. Every field defaults to
    "unknown":
    - capacity, manufacturer, model_name and serial_number use None
    - status and capacity_level use their UNKNOWN members

    The summary line is the only rendering the command line prints.
    """

    model_config = ConfigDict(frozen=True)

    capacity: int | None = Field(None, ge=0, le=100, description="Charge percentage")
    status: PowerSupplyStatus = PowerSupplyStatus.UNKNOWN
    capacity_level: CapacityLevel = CapacityLevel.UNKNOWN
    manufacturer: str | None = None
    model_name: str | None = None
    serial_number: str | None = None

    # ---- validators ----
    @field_validator("manufacturer", "model_name", "serial_number")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("text attributes cannot be empty")
        return v

    # ---- rendering ----
    @staticmethod
    def _label(value: object) -> str:
        if value is None:
            return UNKNOWN_LABEL
        return str(value)

    @property
    def formatted_capacity(self) -> str:
        """Return formatted battery percentage string."""
        return f"{self._label(self.capacity)}%"

    @property
    def is_charging(self) -> bool:
        """Return True if the battery reports it is charging."""
        return self.status is PowerSupplyStatus.CHARGING

    def as_attributes(self) -> dict[str, str]:
        """Return display labels keyed by sysfs attribute name."""
        return {
            "capacity": self._label(self.capacity),
            "capacity_level": self.capacity_level.label,
            "manufacturer": self._label(self.manufacturer),
            "model_name": self._label(self.model_name),
            "serial_number": self._label(self.serial_number),
            "status": self.status.label,
        }

    def summary(self) -> str:
        """Render the one-line summary.

        Returns:
            "<manufacturer>: <model> (<serial>) | <capacity>% (<level>) | <status> "
            with a trailing space after the status
        """
        return (
            f"{self._label(self.manufacturer)}: {self._label(self.model_name)} "
            f"({self._label(self.serial_number)}) | "
            f"{self.formatted_capacity} ({self.capacity_level.label}) | "
            f"{self.status.label} "
        )

    def __str__(self) -> str:
        return self.summary()
