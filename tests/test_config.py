"""Tests for configuration loading and validation in config.py."""

import os
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from pydantic import ValidationError

from afm_patterns.config import AfmConfig, find_config, load_config
from afm_patterns.core import MergeStrategy


class TestAfmConfigFromYaml:
    """Tests for AfmConfig.from_yaml parsing."""

    def test_empty_config_uses_defaults(self) -> None:
        config = AfmConfig.from_yaml("")

        assert config.merge.strategy == MergeStrategy.PER_DATASET
        assert config.output.format == "json"
        assert config.output.indent == 2
        assert config.logging.level == "WARNING"

    def test_full_config(self) -> None:
        content = """\
merge:
  strategy: first-only
output:
  format: YAML
  indent: 4
logging:
  level: debug
"""
        config = AfmConfig.from_yaml(content)

        assert config.merge.strategy == MergeStrategy.FIRST_ONLY
        assert config.output.format == "yaml"
        assert config.output.indent == 4
        assert config.logging.level == "DEBUG"

    def test_invalid_strategy(self) -> None:
        with pytest.raises(ValidationError, match="Invalid merge strategy"):
            AfmConfig.from_yaml("merge:\n  strategy: newest\n")

    def test_invalid_format(self) -> None:
        with pytest.raises(ValidationError, match="Invalid output format"):
            AfmConfig.from_yaml("output:\n  format: xml\n")

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError, match="Invalid log level"):
            AfmConfig.from_yaml("logging:\n  level: chatty\n")

    @pytest.mark.parametrize("indent", [0, 1, 10])
    def test_indent_outside_yaml_range(self, indent: int) -> None:
        with pytest.raises(ValidationError):
            AfmConfig.from_yaml(f"output:\n  indent: {indent}\n")

    def test_unknown_section(self) -> None:
        with pytest.raises(ValidationError):
            AfmConfig.from_yaml("execution:\n  timeout: 5\n")


class TestConfigDiscovery:
    """Tests for find_config and load_config."""

    def test_find_in_parent_directory(self) -> None:
        with TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "afm.yml").write_text("output:\n  indent: 4\n", encoding="utf-8")
            nested = root / "a" / "b"
            nested.mkdir(parents=True)

            assert find_config(nested) == (root / "afm.yml").resolve()

    def test_load_config_defaults_when_missing(self) -> None:
        with TemporaryDirectory() as tmp:
            cwd = os.getcwd()
            os.chdir(tmp)
            try:
                if find_config() is None:
                    assert load_config() == AfmConfig()
            finally:
                os.chdir(cwd)

    def test_load_explicit_path(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "custom.yml"
            path.write_text("merge:\n  strategy: first_only\n", encoding="utf-8")

            assert load_config(path).merge.strategy == MergeStrategy.FIRST_ONLY

    def test_explicit_path_must_exist(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/afm.yml")
