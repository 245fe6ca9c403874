"""Test for configuration."""

import json
from pathlib import Path

import pytest

from thesaurus.config import InterfaceType, ThesaurusConfig
from thesaurus.util import ConfigurationError


def test_default_configuration(tmp_path: Path) -> None:
    """Test that missing configuration file gives default values."""
    config: ThesaurusConfig = ThesaurusConfig.from_directory(tmp_path)

    assert config.file_name == "synonyms.txt"
    assert config.sort_on_save is False
    assert config.autosave is True
    assert config.interface == InterfaceType.RICH
    assert config.get_file_path(tmp_path) == tmp_path / "synonyms.txt"


def test_configuration_file(tmp_path: Path) -> None:
    """Test reading configuration file."""
    (tmp_path / "config.json").write_text(
        json.dumps(
            {
                "file_name": "words.txt",
                "sort_on_save": True,
                "interface": "terminal",
            }
        ),
        encoding="utf-8",
    )
    config: ThesaurusConfig = ThesaurusConfig.from_directory(tmp_path)

    assert config.file_name == "words.txt"
    assert config.sort_on_save is True
    assert config.interface == InterfaceType.TERMINAL


def test_invalid_configuration(tmp_path: Path) -> None:
    """Test that unknown interface is rejected."""
    (tmp_path / "config.json").write_text(
        json.dumps({"interface": "graphical"}), encoding="utf-8"
    )
    with pytest.raises(ConfigurationError):
        ThesaurusConfig.from_directory(tmp_path)


def test_malformed_configuration(tmp_path: Path) -> None:
    """Test that non-JSON configuration is rejected."""
    (tmp_path / "config.json").write_text("{", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ThesaurusConfig.from_directory(tmp_path)
