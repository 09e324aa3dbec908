"""Static scan of import statements in component sources."""

import re
from pathlib import Path

from zeno.exceptions import DependencyScanError

# import X from "pkg", import { X } from 'pkg/sub', import "pkg/styles.css"
IMPORT_PATTERN = re.compile(r"""import\s+(?:[^'"]+\s+from\s+)?["'](@?[\w\-./]+)["']""")


def package_name_from_specifier(specifier: str) -> str | None:
    """Reduce a module specifier to the npm package that provides it.

    Examples:
        >>> package_name_from_specifier("@radix-ui/react-slot/dist")
        '@radix-ui/react-slot'
        >>> package_name_from_specifier("lodash/fp")
        'lodash'
        >>> package_name_from_specifier("./utils") is None
        True
    """
    if specifier.startswith((".", "/")):
        return None
    if specifier.startswith("@"):
        scope, _, rest = specifier.partition("/")
        return f"{scope}/{rest.split('/')[0]}" if rest else scope
    return specifier.split("/")[0]


def extract_used_packages(content: str) -> list[str]:
    """Return the distinct packages imported by a source text, in first-seen order."""
    packages: list[str] = []
    for match in IMPORT_PATTERN.finditer(content):
        package = package_name_from_specifier(match.group(1))
        if package and package not in packages:
            packages.append(package)
    return packages


def scan_file(path: Path) -> list[str]:
    """Read a component file and return the packages it imports.

    Raises:
        DependencyScanError: If the file cannot be read
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DependencyScanError(f"Failed to read {path}: {e}")
    return extract_used_packages(content)
