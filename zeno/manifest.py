"""Read-only access to the consuming project's package.json."""

import json
from pathlib import Path

from zeno.exceptions import ManifestNotFoundError, ManifestParseError


def load_declared_dependencies(path: Path) -> dict[str, str]:
    """Load dependencies and devDependencies from a manifest as one mapping.

    Args:
        path: Path to package.json

    Returns:
        Mapping of package name to version range

    Raises:
        ManifestNotFoundError: If the manifest does not exist
        ManifestParseError: If the manifest is not valid JSON or has bad sections
    """
    if not path.exists():
        raise ManifestNotFoundError(f"Manifest not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestParseError(f"Failed to parse {path}: {e}")
    except OSError as e:
        raise ManifestParseError(f"Failed to read {path}: {e}")

    if not isinstance(data, dict):
        raise ManifestParseError(f"{path} must contain a JSON object")

    declared: dict[str, str] = {}
    for section in ("dependencies", "devDependencies"):
        entries = data.get(section) or {}
        if not isinstance(entries, dict):
            raise ManifestParseError(
                f"'{section}' in {path} must be an object, got {type(entries).__name__}"
            )
        declared.update(entries)
    return declared


def find_missing_packages(packages: list[str], declared: dict[str, str]) -> list[str]:
    """Return the packages not declared in the manifest, keeping their order."""
    return [package for package in packages if package not in declared]
