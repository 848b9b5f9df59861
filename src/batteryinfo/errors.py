"""Exception classes for battery attribute loading.

This module defines a hierarchy of exception classes for the
error conditions met while reading and parsing the sysfs battery
attributes. Every error carries enough context (path, attribute
name or raw value) to diagnose the failure from its message alone.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class BatteryInfoError(Exception):
    """Base class for every battery loading failure.

    Errors are not recoverable where they are raised; they propagate
    unchanged to the command line, which prints the message and exits.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
        """
        super().__init__(message)
        self.message: str = message


class ConversionError(BatteryInfoError):
    """Raised when raw attribute text cannot be converted to a typed value."""

    def __init__(self, attribute: str, value: str, reason: str = "empty value") -> None:
        """Initialize with conversion details.

        Args:
            attribute: Name of the attribute being converted
            value: The raw text that failed to convert
            reason: Short description of what was wrong with the text
        """
        super().__init__(f"A conversion error occurred: {attribute}={value!r} ({reason})")
        self.attribute = attribute
        self.value = value
        self.reason = reason


class AttributeReadError(BatteryInfoError):
    """Raised when an attribute's content cannot be read as text."""

    def __init__(self, path: Path, original_error: Optional[Exception] = None) -> None:
        """Initialize with IO error details.

        Args:
            path: The attribute file that could not be read
            original_error: The original exception that was caught
        """
        detail = original_error if original_error is not None else path
        super().__init__(f"An IO error occurred: {detail}")
        self.path = path
        self.original_error = original_error


class EmptyAttributeError(BatteryInfoError):
    """Raised when an attribute file was read but held no content."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"The requested item is empty: {path}")
        self.path = path


class MissingAttributeError(BatteryInfoError):
    """Raised when an attribute file is absent or not a regular file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"The requested item does not exist: {path}")
        self.path = path


class UnknownAttributeError(BatteryInfoError):
    """Raised for an attribute name outside the known set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown battery attribute: {name}")
        self.name = name


class InvalidDevicePathError(BatteryInfoError):
    """Raised when the battery device directory is missing or not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} is not a directory.")
        self.path = path
