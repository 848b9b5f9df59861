"""Typed parsing of raw sysfs battery attribute text."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import Enum
from typing import Any, Final

from batteryinfo.errors import ConversionError, UnknownAttributeError

logger: Final = logging.getLogger(__name__)

_UNSIGNED_INT: Final = re.compile(r"\+?[0-9]+")


class PowerSupplyStatus(Enum):
    """Charging state reported in the ``status`` attribute.

    Member values are the labels shown in the summary line.
    """

    UNKNOWN = "Unknown"
    CHARGING = "Charging"
    DISCHARGING = "Discharging"
    NOT_CHARGING = "Not charging"
    FULL = "Full"

    @property
    def label(self) -> str:
        """Return the text shown for this status in the summary line."""
        return self.value


class CapacityLevel(Enum):
    """Coarse charge bucket reported in the ``capacity_level`` attribute."""

    UNKNOWN = "Unknown"
    CRITICAL = "Critical"
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"
    FULL = "Full"

    @property
    def label(self) -> str:
        """Return the text shown for this level in the summary line."""
        return self.value


# Kernel tokens → enum members; matching is exact and case-sensitive
STATUS_TOKENS: Final[dict[str, PowerSupplyStatus]] = {
    "Charging": PowerSupplyStatus.CHARGING,
    "Discharging": PowerSupplyStatus.DISCHARGING,
    "Not_charging": PowerSupplyStatus.NOT_CHARGING,
    "Full": PowerSupplyStatus.FULL,
}

CAPACITY_LEVEL_TOKENS: Final[dict[str, CapacityLevel]] = {
    "Critical": CapacityLevel.CRITICAL,
    "Low": CapacityLevel.LOW,
    "Normal": CapacityLevel.NORMAL,
    "High": CapacityLevel.HIGH,
    "Full": CapacityLevel.FULL,
}


class AttributeParser:
    """Convert raw attribute text into typed values.

    Unrecognised status or capacity-level tokens are not errors: the
    device may report states this parser does not know yet, so they map
    to ``UNKNOWN``, and so does whitespace-only text for them. Empty
    text, blank capacity or free text, and malformed or out-of-range
    capacity values mean the attribute itself is broken and raise
    ConversionError.
    """

    @staticmethod
    def _require_text(attribute: str, raw: str) -> str:
        text = raw.strip()
        if not text:
            logger.debug("Rejecting empty %s value: %r", attribute, raw)
            raise ConversionError(attribute, raw)
        return text

    @staticmethod
    def _require_token(attribute: str, raw: str) -> str:
        if raw == "":
            logger.debug("Rejecting empty %s value", attribute)
            raise ConversionError(attribute, raw)
        return raw.strip()

    @staticmethod
    def parse_status(raw: str) -> PowerSupplyStatus:
        """Parse the ``status`` attribute.

        Args:
            raw: Raw attribute text, possibly newline-terminated

        Returns:
            Matching status, or PowerSupplyStatus.UNKNOWN for unknown tokens

        Raises:
            ConversionError: If the text is empty
        """
        text = AttributeParser._require_token("status", raw)
        status = STATUS_TOKENS.get(text)
        if status is None:
            logger.debug("Unrecognised status %r, reporting Unknown", text)
            return PowerSupplyStatus.UNKNOWN
        return status

    @staticmethod
    def parse_capacity(raw: str) -> int:
        """Parse the ``capacity`` attribute as a percentage.

        Args:
            raw: Raw attribute text, possibly newline-terminated

        Returns:
            Charge percentage between 0 and 100

        Raises:
            ConversionError: If the text is empty, not an unsigned
                integer, or greater than 100
        """
        text = AttributeParser._require_text("capacity", raw)
        if not _UNSIGNED_INT.fullmatch(text):
            raise ConversionError("capacity", raw, "not an unsigned integer")
        level = int(text)
        if level > 100:
            raise ConversionError("capacity", raw, "greater than 100")
        return level

    @staticmethod
    def parse_capacity_level(raw: str) -> CapacityLevel:
        """Parse the ``capacity_level`` attribute.

        Raises:
            ConversionError: If the text is empty
        """
        text = AttributeParser._require_token("capacity_level", raw)
        level = CAPACITY_LEVEL_TOKENS.get(text)
        if level is None:
            logger.debug("Unrecognised capacity level %r, reporting Unknown", text)
            return CapacityLevel.UNKNOWN
        return level

    @staticmethod
    def parse_text(attribute: str, raw: str) -> str:
        """Parse a free-text attribute (manufacturer, model or serial number)."""
        return AttributeParser._require_text(attribute, raw)

    @classmethod
    def parse(cls, name: str, raw: str) -> Any:
        """Dispatch raw text to the parser for the named attribute.

        Args:
            name: Attribute file name
            raw: Raw attribute text

        Returns:
            The typed value for the attribute

        Raises:
            ConversionError: If the text cannot be converted
            UnknownAttributeError: If no parser exists for ``name``
        """
        parsers: dict[str, Callable[[str], Any]] = {
            "capacity": cls.parse_capacity,
            "capacity_level": cls.parse_capacity_level,
            "manufacturer": lambda text: cls.parse_text("manufacturer", text),
            "model_name": lambda text: cls.parse_text("model_name", text),
            "serial_number": lambda text: cls.parse_text("serial_number", text),
            "status": cls.parse_status,
        }
        try:
            parser = parsers[name]
        except KeyError:
            raise UnknownAttributeError(name) from None
        return parser(raw)
