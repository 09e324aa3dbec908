"""Component name handling and path/URL derivation."""

import re
from dataclasses import dataclass
from pathlib import Path

from zeno.config import ProjectConfig
from zeno.exceptions import InvalidComponentNameError

# Alphanumeric start, then letters, digits, hyphens or underscores
VALID_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


def validate_component_name(name: str | None) -> str:
    """Check that a user-supplied component name is usable.

    Args:
        name: Raw name from the command line

    Returns:
        The name with surrounding whitespace removed

    Raises:
        InvalidComponentNameError: If the name is empty or could escape the
            component directory
    """
    if name is None or not name.strip():
        raise InvalidComponentNameError("Component name is required.")

    name = name.strip()
    if not VALID_NAME_PATTERN.match(name):
        raise InvalidComponentNameError(
            f"Invalid component name '{name}': use letters, digits, hyphens or underscores"
        )
    return name


@dataclass(frozen=True)
class ComponentRequest:
    """A single component requested by the user."""

    name: str

    @property
    def display_name(self) -> str:
        """Name used for the local file and the export line, e.g. 'Button'."""
        return self.name[:1].upper() + self.name[1:]

    @property
    def lookup_key(self) -> str:
        """Name used to locate the remote file, e.g. 'button'."""
        return self.name.lower()

    def remote_url(self, config: ProjectConfig) -> str:
        return f"{config.registry_url}/{self.lookup_key}{config.extension}"

    def destination(self, config: ProjectConfig) -> Path:
        return config.ui_path / f"{self.display_name}{config.extension}"
