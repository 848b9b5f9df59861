"""Common utility functions for the batteryinfo package."""

from batteryinfo.utils.file import is_directory, is_regular_file, read_text_file

__all__ = [
    "is_directory",
    "is_regular_file",
    "read_text_file",
]
