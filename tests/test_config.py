"""Tests for project configuration loading."""

from pathlib import Path

import pytest

from zeno.config import ProjectConfig, load_config
from zeno.constants import DEFAULT_REGISTRY_URL
from zeno.exceptions import ConfigParseError


class TestProjectConfigDefaults:
    """Test default paths derived from the project root."""

    def test_defaults(self, tmp_path: Path):
        config = ProjectConfig(root=tmp_path)

        assert config.registry_url == DEFAULT_REGISTRY_URL
        assert config.components_path == tmp_path / "src" / "components"
        assert config.ui_path == tmp_path / "src" / "components" / "ui"
        assert config.export_path == tmp_path / "src" / "components" / "index.ts"
        assert config.manifest_path == tmp_path / "package.json"


class TestLoadConfig:
    """Test reading zeno.toml."""

    def test_no_config_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path)

        assert config == ProjectConfig(root=tmp_path)
        assert config.source is None

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert load_config().root == Path.cwd()

    def test_overrides(self, tmp_path: Path):
        (tmp_path / "zeno.toml").write_text(
            '[zeno]\n'
            'registry_url = "https://example.com/ui/"\n'
            'components_dir = "app/components"\n'
            'extension = "jsx"\n'
            'export_file = "index.js"\n'
        )

        config = load_config(tmp_path)

        assert config.registry_url == "https://example.com/ui"
        assert config.extension == ".jsx"
        assert config.export_path == tmp_path / "app" / "components" / "index.js"
        assert config.source == tmp_path / "zeno.toml"

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        (tmp_path / "zeno.toml").write_text("")

        assert load_config(tmp_path) == ProjectConfig(root=tmp_path)

    def test_invalid_toml(self, tmp_path: Path):
        (tmp_path / "zeno.toml").write_text("[zeno\nregistry_url = ")

        with pytest.raises(ConfigParseError, match="Failed to parse"):
            load_config(tmp_path)

    def test_unknown_option(self, tmp_path: Path):
        (tmp_path / "zeno.toml").write_text('[zeno]\ncolor = "blue"\n')

        with pytest.raises(ConfigParseError, match="Unknown option 'color'"):
            load_config(tmp_path)

    def test_non_string_option(self, tmp_path: Path):
        (tmp_path / "zeno.toml").write_text("[zeno]\nextension = 3\n")

        with pytest.raises(ConfigParseError, match="must be a non-empty string"):
            load_config(tmp_path)

    def test_zeno_must_be_table(self, tmp_path: Path):
        (tmp_path / "zeno.toml").write_text('zeno = "yes"\n')

        with pytest.raises(ConfigParseError, match="must be a table"):
            load_config(tmp_path)
