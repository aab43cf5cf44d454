"""Unit tests for configuration management."""

import json
import logging
from unittest.mock import patch

import pytest

from bundlegraph.config import (
    CONFIG_FILE_NAME,
    BundlegraphConfig,
    LogLevel,
    ReportFormat,
    find_config_file,
    load_config,
)


class TestBundlegraphConfig:
    """Test complete BundlegraphConfig model."""

    def test_defaults(self):
        config = BundlegraphConfig()

        assert config.output.format == ReportFormat.TABLE
        assert config.graph.show_implicit_edges is True
        assert config.graph.show_versions is True
        assert config.logging.level == LogLevel.WARN

    def test_config_from_dict(self):
        config = BundlegraphConfig(**{
            "output": {"format": "json"},
            "graph": {"showImplicitEdges": False},
            "logging": {"level": "debug"},
        })

        assert config.output.format == ReportFormat.JSON
        assert config.graph.show_implicit_edges is False
        assert config.logging.level == LogLevel.DEBUG

    def test_unknown_section_rejected(self):
        with pytest.raises(ValueError):
            BundlegraphConfig(**{"rules": {}})

    def test_invalid_format_rejected(self):
        with pytest.raises(ValueError):
            BundlegraphConfig(**{"output": {"format": "yaml"}})

    @pytest.mark.parametrize("level,expected", [
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.DEBUG, logging.DEBUG),
    ])
    def test_log_level_mapping(self, level, expected):
        assert level.to_logging_level() == expected


class TestLoadConfig:
    """Test configuration loading."""

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"output": {"format": "markdown"}}), encoding="utf-8")

        config = load_config(config_file)

        assert config.output.format == ReportFormat.MARKDOWN

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.json")

        assert config == BundlegraphConfig()

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{ invalid", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON in config file"):
            load_config(config_file)

    def test_invalid_values(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"logging": {"level": "loud"}}), encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to load config"):
            load_config(config_file)

    def test_non_object_document(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a JSON object"):
            load_config(config_file)

    def test_searches_when_no_path(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"graph": {"showVersions": False}}), encoding="utf-8")

        with patch("bundlegraph.config.find_config_file", return_value=config_file):
            config = load_config()

        assert config.graph.show_versions is False


class TestFindConfigFile:
    """Test configuration discovery."""

    def test_found_in_start_dir(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{}", encoding="utf-8")

        assert find_config_file(tmp_path) == config_file.resolve()

    def test_found_in_parent(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{}", encoding="utf-8")
        nested = tmp_path / "app" / "feature"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == config_file.resolve()

    def test_not_found(self, tmp_path):
        nested = tmp_path / "empty"
        nested.mkdir()

        with patch("pathlib.Path.exists", return_value=False):
            assert find_config_file(nested) is None
