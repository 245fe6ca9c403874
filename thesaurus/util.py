"""Utility functions and file access."""

import logging
from dataclasses import dataclass
from pathlib import Path

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"


class ThesaurusError(Exception):
    """Base class for all synonym dictionary errors."""


@dataclass
class IOFailure(ThesaurusError):
    """File cannot be read or written."""

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"Cannot access `{self.path}`: {self.reason}."


@dataclass
class ConfigurationError(ThesaurusError):
    """Configuration file is unreadable or invalid."""

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"Invalid configuration `{self.path}`: {self.reason}"


def write_atomic(path: Path, data: str) -> None:
    """Write data to a file atomically."""

    # Write to a temporary file.
    temp_path: Path = path.with_suffix(path.suffix + ".tmp")
    with temp_path.open("w+", encoding="utf-8", newline="\n") as output_file:
        output_file.write(data)

    # Atomically move the temporary file to the target path.
    temp_path.replace(path)


def read_lines(path: Path) -> list[str]:
    """Read all lines of a text file without line breaks.

    :raises IOFailure: if the file is missing or cannot be read
    """
    logging.info("Reading `%s`...", path)
    try:
        with path.open(encoding="utf-8") as input_file:
            return input_file.read().splitlines()
    except (OSError, UnicodeDecodeError) as error:
        raise IOFailure(path, str(error)) from error


def write_lines(path: Path, lines: list[str]) -> None:
    """Replace the content of a file with lines, one per line.

    :raises IOFailure: if the file cannot be written
    """
    logging.info("Writing %d lines to `%s`...", len(lines), path)
    try:
        write_atomic(path, "".join(f"{line}\n" for line in lines))
    except OSError as error:
        raise IOFailure(path, str(error)) from error
