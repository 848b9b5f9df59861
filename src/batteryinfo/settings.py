"""Runtime settings for the battery reader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from batteryinfo.constants import DEFAULT_DEVICE_PATH


class BatterySettings(BaseModel):
    """Settings used by the loader and the command line.

    The device path is fixed for normal use; it is only overridden by
    tests, which point the loader at a fake sysfs tree.
    """

    model_config = ConfigDict(frozen=True)

    device_path: Path = Field(
        DEFAULT_DEVICE_PATH, description="sysfs directory of the battery device"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", description="Logging level used when debug output is off"
    )

    def attribute_path(self, name: str) -> Path:
        """Return the path of one attribute file inside the device directory.

        Args:
            name: Attribute file name (e.g. "capacity")

        Returns:
            Path to the attribute file
        """
        return self.device_path / name

    def logging_level(self, debug: bool = False) -> int:
        """Resolve the numeric logging level.

        Args:
            debug: If True, always log at DEBUG

        Returns:
            A level constant from the logging module
        """
        if debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)
