"""Load a BatteryRecord from the sysfs battery device directory."""

from __future__ import annotations

import logging
from typing import Any, Final

from batteryinfo.constants import ATTRIBUTE_NAMES
from batteryinfo.errors import (
    EmptyAttributeError,
    InvalidDevicePathError,
    MissingAttributeError,
)
from batteryinfo.settings import BatterySettings
from batteryinfo.system.attributes import AttributeParser
from batteryinfo.system.status import BatteryRecord
from batteryinfo.utils.file import is_directory, is_regular_file, read_text_file

logger: Final = logging.getLogger(__name__)


class BatteryLoader:
    """Reads and parses every battery attribute, then builds the record.

    The pipeline is linear: check the device directory, then check, read
    and parse each attribute in turn. The first failure aborts the whole
    load and is raised unchanged; no partial record is ever returned and
    nothing is retried.
    """

    def __init__(self, settings: BatterySettings | None = None) -> None:
        """Initialize the loader.

        Args:
            settings: Loader settings (default device path if None)
        """
        self.settings = settings or BatterySettings()

    def load(self) -> BatteryRecord:
        """Read the device directory and assemble a BatteryRecord.

        Returns:
            The fully populated record

        Raises:
            InvalidDevicePathError: If the device directory is missing
            MissingAttributeError: If an attribute file is missing or not a file
            AttributeReadError: If an attribute file cannot be read
            EmptyAttributeError: If an attribute file is empty
            ConversionError: If attribute text cannot be parsed
            UnknownAttributeError: If an attribute name has no parser
        """
        device_path = self.settings.device_path
        if not is_directory(device_path):
            raise InvalidDevicePathError(device_path)
        logger.debug("Device directory %s found", device_path)

        values: dict[str, Any] = {}
        for name in ATTRIBUTE_NAMES:
            values[name] = self._load_attribute(name)

        record = BatteryRecord(**values)
        logger.debug("Assembled battery record: %s", record.summary())
        return record

    def _load_attribute(self, name: str) -> Any:
        path = self.settings.attribute_path(name)
        if not is_regular_file(path):
            raise MissingAttributeError(path)

        content = read_text_file(path)
        if not content:
            raise EmptyAttributeError(path)

        value = AttributeParser.parse(name, content)
        logger.debug("Parsed %s = %r", name, value)
        return value


def read_battery(settings: BatterySettings | None = None) -> BatteryRecord:
    """Load the battery record using the given or default settings."""
    return BatteryLoader(settings).load()
