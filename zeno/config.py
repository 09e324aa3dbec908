"""Project configuration, optionally overridden by zeno.toml."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import tomli

from zeno.constants import (
    CONFIG_FILENAME,
    DEFAULT_COMPONENTS_DIR,
    DEFAULT_EXPORT_FILE,
    DEFAULT_EXTENSION,
    DEFAULT_MANIFEST,
    DEFAULT_REGISTRY_URL,
    UI_SUBDIR,
)
from zeno.exceptions import ConfigParseError


@dataclass
class ProjectConfig:
    """Everything the generator needs to know about the consuming project.

    Example zeno.toml:
        [zeno]
        registry_url = "https://example.com/ui/src"
        components_dir = "app/components"
        extension = ".jsx"
    """

    root: Path
    registry_url: str = DEFAULT_REGISTRY_URL
    components_dir: str = DEFAULT_COMPONENTS_DIR
    extension: str = DEFAULT_EXTENSION
    export_file: str = DEFAULT_EXPORT_FILE
    manifest: str = DEFAULT_MANIFEST
    source: Path | None = field(default=None, compare=False)

    @property
    def components_path(self) -> Path:
        return self.root / self.components_dir

    @property
    def ui_path(self) -> Path:
        """Directory that holds the fetched component files."""
        return self.components_path / UI_SUBDIR

    @property
    def export_path(self) -> Path:
        """Central export file that re-exports every component."""
        return self.components_path / self.export_file

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest

    @classmethod
    def from_dict(cls, root: Path, data: dict[str, Any], source: Path | None = None) -> "ProjectConfig":
        """Create a ProjectConfig from the [zeno] table of a parsed TOML dict."""
        allowed = {f.name for f in fields(cls)} - {"root", "source"}
        values: dict[str, str] = {}
        for key, value in data.items():
            if key not in allowed:
                raise ConfigParseError(f"Unknown option '{key}' in {CONFIG_FILENAME}")
            if not isinstance(value, str) or not value:
                raise ConfigParseError(
                    f"Option '{key}' in {CONFIG_FILENAME} must be a non-empty string"
                )
            values[key] = value

        if "registry_url" in values:
            values["registry_url"] = values["registry_url"].rstrip("/")
        if "extension" in values and not values["extension"].startswith("."):
            values["extension"] = f".{values['extension']}"

        return cls(root=root, source=source, **values)


def load_config(root: Path | None = None) -> ProjectConfig:
    """Load the project configuration for a directory.

    Args:
        root: Project root (defaults to current working directory)

    Returns:
        ProjectConfig with defaults, overridden by zeno.toml when present

    Raises:
        ConfigParseError: If zeno.toml cannot be parsed or holds invalid options
    """
    if root is None:
        root = Path.cwd()

    config_path = root / CONFIG_FILENAME
    if not config_path.exists():
        return ProjectConfig(root=root)

    try:
        with open(config_path, "rb") as f:
            data = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise ConfigParseError(f"Failed to parse {config_path}: {e}")

    section = data.get("zeno", {})
    if not isinstance(section, dict):
        raise ConfigParseError(f"[zeno] in {config_path} must be a table")

    return ProjectConfig.from_dict(root, section, source=config_path)
