"""File utility functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from batteryinfo.errors import AttributeReadError

logger: Final = logging.getLogger(__name__)


def is_directory(path: Path) -> bool:
    """Return True if path exists and is a directory."""
    return path.is_dir()


def is_regular_file(path: Path) -> bool:
    """Return True if path exists and is a regular file."""
    return path.is_file()


def read_text_file(path: Path) -> str:
    """Read a whole text file.

    Args:
        path: Path to file

    Returns:
        File content, unmodified

    Raises:
        AttributeReadError: If the operating system refuses the read or
            the content is not UTF-8 text
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.debug("Reading %s failed: %s", path, exc)
        raise AttributeReadError(path, exc) from exc
    except UnicodeDecodeError as exc:
        logger.debug("Decoding %s failed: %s", path, exc)
        raise AttributeReadError(path, exc) from exc
    logger.debug("Read %d characters from %s", len(content), path)
    return content
