from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class TextFrequencyError(Exception):
    """Base class for failures that stop a report from being produced."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path} {message}")
        self.path = path


class PathIsDirectoryError(TextFrequencyError, IsADirectoryError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "is a directory")


class PathNotFoundError(TextFrequencyError, FileNotFoundError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "does not exist")


class ReadFailureError(TextFrequencyError, OSError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "could not be read")


def _ensure_file_exists(path: Path) -> None:
    if path.is_dir():
        raise PathIsDirectoryError(path)
    if not path.exists():
        raise PathNotFoundError(path)


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read the whole file as text, mapping failures onto reader errors."""

    _ensure_file_exists(path)
    LOGGER.info("Reading %s", path)
    try:
        with path.open("r", encoding=encoding, newline="") as infile:
            contents = infile.read()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        LOGGER.debug("Reading %s failed: %s", path, exc)
        raise ReadFailureError(path) from exc
    LOGGER.debug("Read %d characters from %s", len(contents), path)
    return contents
