"""Unit tests for the config file reader."""

from pathlib import Path

import pytest

from webrunner.config import read_config_file
from webrunner.errors import ConfigFileError


class TestReadConfigFile:
    """Test read_config_file function."""

    def test_no_config_file(self, tmp_path: Path):
        assert read_config_file(cwd=tmp_path) == {}

    def test_default_file_name(self, tmp_path: Path):
        (tmp_path / "web-test-runner.config.yaml").write_text(
            "files: test/**/*.test.js\n"
            "node_resolve: true\n"
            "concurrency: 4\n"
        )

        config = read_config_file(cwd=tmp_path)

        assert config == {"files": "test/**/*.test.js", "node_resolve": True, "concurrency": 4}

    def test_yml_suffix(self, tmp_path: Path):
        (tmp_path / "web-test-runner.config.yml").write_text("watch: true\n")

        assert read_config_file(cwd=tmp_path) == {"watch": True}

    def test_explicit_path(self, tmp_path: Path):
        (tmp_path / "ci.yaml").write_text("static_logging: true\n")

        assert read_config_file("ci.yaml", cwd=tmp_path) == {"static_logging": True}

    def test_explicit_path_missing(self, tmp_path: Path):
        with pytest.raises(ConfigFileError, match="Could not find a config file"):
            read_config_file("missing.yaml", cwd=tmp_path)

    def test_wrong_suffix(self, tmp_path: Path):
        (tmp_path / "config.json").write_text("{}")

        with pytest.raises(ConfigFileError, match="Expected .yaml or .yml"):
            read_config_file("config.json", cwd=tmp_path)

    def test_empty_file(self, tmp_path: Path):
        (tmp_path / "web-test-runner.config.yaml").write_text("")

        assert read_config_file(cwd=tmp_path) == {}

    def test_invalid_yaml(self, tmp_path: Path):
        (tmp_path / "web-test-runner.config.yaml").write_text("files: [unclosed\n")

        with pytest.raises(ConfigFileError, match="Invalid YAML"):
            read_config_file(cwd=tmp_path)

    def test_root_dir_relative_to_config_file(self, tmp_path: Path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "runner.yaml").write_text("root_dir: ../app\n")

        config = read_config_file("config/runner.yaml", cwd=tmp_path)

        assert config["root_dir"] == str((tmp_path / "app").resolve())
