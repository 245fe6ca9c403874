"""Configuration of the synonym dictionary."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ValidationError

from thesaurus.util import ConfigurationError

__author__ = "Sergey Vartanov"
__email__ = "me@enzet.ru"

THESAURUS_DEFAULT_DIRECTORY: str = ".thesaurus"
CONFIGURATION_FILE_NAME: str = "config.json"


class InterfaceType(Enum):
    """Type of the console interface."""

    TERMINAL = "terminal"
    """Plain text without colors."""

    RICH = "rich"
    """Colors, panels, and tables drawn with Rich."""


class ThesaurusConfig(BaseModel):
    """Configuration of the synonym dictionary."""

    file_name: str = "synonyms.txt"
    """Name of the synonym file, relative to the data directory."""

    sort_on_save: bool = False
    """Sort the dictionary every time it is written to the file."""

    autosave: bool = True
    """Write the file after every changing command in `execute` mode."""

    interface: InterfaceType = InterfaceType.RICH
    """Default console interface."""

    @classmethod
    def from_directory(cls, path: Path) -> Self:
        """Load configuration from `config.json` in the data directory.

        If there is no configuration file, default values are used.

        :raises ConfigurationError: if the file is unreadable or invalid
        """
        config_path: Path = path / CONFIGURATION_FILE_NAME
        if not config_path.exists():
            logging.debug("No configuration file `%s`.", config_path)
            return cls()

        return cls.from_file(config_path)

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a JSON file.

        :raises ConfigurationError: if the file is unreadable or invalid
        """
        logging.debug("Loading configuration from `%s`.", path)
        try:
            with path.open(encoding="utf-8") as input_file:
                structure = json.load(input_file)
        except (OSError, json.JSONDecodeError) as error:
            raise ConfigurationError(path, str(error)) from error

        try:
            return cls.model_validate(structure)
        except ValidationError as error:
            raise ConfigurationError(path, str(error)) from error

    def get_file_path(self, path: Path) -> Path:
        """Get the path of the synonym file inside the data directory."""
        return path / self.file_name
