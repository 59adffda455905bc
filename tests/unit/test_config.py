#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_config.py
"""Unit tests for xeditor-md CLI configuration management.

This module tests configuration file discovery, loading and priority
handling.
"""

import argparse
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from xeditor_md.cli.config import (
    _load_pyproject_section,
    discover_config_file,
    find_config_in_parents,
    get_export_section,
    load_config_file,
    load_config_with_priority,
)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test configuration file discovery functionality."""

    def test_discover_config_in_cwd(self, tmp_path):
        config_file = tmp_path / ".xeditor-md.toml"
        config_file.write_text('[export]\nheading_style = "setext"\n')

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = discover_config_file()

        assert discovered is not None
        assert discovered.resolve() == config_file.resolve()

    def test_discover_config_in_parent(self, tmp_path):
        config_file = tmp_path / ".xeditor-md.yaml"
        config_file.write_text("export:\n  link_style: reference\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config_file.resolve()

    def test_toml_preferred_over_json(self, tmp_path):
        (tmp_path / ".xeditor-md.json").write_text("{}")
        toml_file = tmp_path / ".xeditor-md.toml"
        toml_file.write_text("")

        assert find_config_in_parents(tmp_path) == toml_file.resolve()

    def test_discover_config_in_home(self, tmp_path):
        home = tmp_path / "home"
        home.mkdir()
        work = tmp_path / "work"
        work.mkdir()
        config_file = home / ".xeditor-md.json"
        config_file.write_text('{"export": {"bullet_list_marker": "*"}}')

        with patch("xeditor_md.cli.config.find_config_in_parents", return_value=None):
            with patch("pathlib.Path.home", return_value=home):
                assert discover_config_file(work) == config_file

    def test_pyproject_with_section_found(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n\n[tool.xeditor-md]\nheading_style = "setext"\n')

        assert find_config_in_parents(tmp_path) == pyproject.resolve()

    def test_pyproject_without_section_ignored(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n')

        assert _load_pyproject_section(pyproject) == {}

    def test_invalid_pyproject_skipped(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.xeditor-md\n")

        assert find_config_in_parents(tmp_path) != pyproject.resolve()


@pytest.mark.unit
@pytest.mark.cli
class TestConfigLoading:
    """Test loading of each configuration format."""

    def test_load_toml(self, tmp_path):
        config_file = tmp_path / "config.toml"
        config_file.write_text('[export]\nheading_style = "setext"\nbullet_list_marker = "*"\n')

        assert load_config_file(config_file) == {"export": {"heading_style": "setext", "bullet_list_marker": "*"}}

    def test_load_yaml(self, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text("headingStyle: setext\nlinkStyle: reference\n")

        assert load_config_file(str(config_file)) == {"headingStyle": "setext", "linkStyle": "reference"}

    def test_load_empty_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_config_file(config_file) == {}

    def test_load_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"export": {"code_block_style": "indented"}}))

        assert load_config_file(config_file) == {"export": {"code_block_style": "indented"}}

    def test_load_pyproject_section(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.xeditor-md.export]\nlink_style = "reference"\n')

        assert load_config_file(pyproject) == {"export": {"link_style": "reference"}}
        assert _load_pyproject_section(pyproject) == {"export": {"link_style": "reference"}}

    @pytest.mark.parametrize(
        "filename,content",
        [
            ("bad.toml", "[export\nheading_style = "),
            ("bad.json", "{not json"),
            ("bad.yaml", "key: [unclosed"),
            ("list.json", "[1, 2]"),
            ("scalar.yaml", "just a string"),
            ("config.ini", "[export]"),
        ],
    )
    def test_invalid_files_raise(self, tmp_path, filename, content):
        config_file = tmp_path / filename
        config_file.write_text(content)

        with pytest.raises(argparse.ArgumentTypeError):
            load_config_file(config_file)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "missing.toml")

    def test_directory_raises(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPriority:
    """Test config source priority and export section selection."""

    def test_explicit_path_wins(self, tmp_path):
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"source": "explicit"}')
        env = tmp_path / "env.json"
        env.write_text('{"source": "env"}')

        assert load_config_with_priority(str(explicit), str(env)) == {"source": "explicit"}

    def test_env_path_used_without_explicit(self, tmp_path):
        env = tmp_path / "env.json"
        env.write_text('{"source": "env"}')

        assert load_config_with_priority(None, str(env)) == {"source": "env"}

    def test_no_config_found(self):
        with patch("xeditor_md.cli.config.discover_config_file", return_value=None):
            assert load_config_with_priority() == {}

    def test_discovered_config_loaded(self, tmp_path):
        discovered = tmp_path / ".xeditor-md.json"
        discovered.write_text('{"source": "discovered"}')

        with patch("xeditor_md.cli.config.discover_config_file", return_value=discovered):
            assert load_config_with_priority() == {"source": "discovered"}

    def test_export_section_selected(self):
        assert get_export_section({"export": {"link_style": "reference"}, "other": 1}) == {"link_style": "reference"}

    def test_top_level_keys_used_without_section(self):
        assert get_export_section({"headingStyle": "setext"}) == {"headingStyle": "setext"}

    def test_export_section_must_be_table(self):
        with pytest.raises(argparse.ArgumentTypeError):
            get_export_section({"export": "setext"})


def test_config_filenames_are_dotfiles():
    from xeditor_md.constants import CONFIG_FILENAMES

    assert all(Path(name).name.startswith(".xeditor-md.") for name in CONFIG_FILENAMES)
