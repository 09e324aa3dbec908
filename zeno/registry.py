"""Central export file that re-exports every generated component."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from zeno.constants import UI_SUBDIR
from zeno.exceptions import ExportFileError

# Matches the module specifier of an export line, e.g. export * from './ui/Button';
EXPORT_PATTERN = re.compile(
    rf"""^\s*export\s+.*?\bfrom\s+["']\./{UI_SUBDIR}/([^"'/]+?)(?:\.\w+)?["']""",
    re.MULTILINE,
)


def export_line(display_name: str) -> str:
    """Build the export statement for a component."""
    return f"export * from './{UI_SUBDIR}/{display_name}';\n"


@dataclass
class ExportRegistry:
    """Ordered set of component names exported from the central export file.

    The file is only ever appended to. Existing content, including lines zeno
    did not write, is left untouched.
    """

    path: Path
    names: list[str] = field(default_factory=list)
    content: str = ""

    @classmethod
    def load(cls, path: Path) -> "ExportRegistry":
        """Read the export file, treating a missing file as empty.

        Raises:
            ExportFileError: If the file exists but cannot be read as UTF-8 text
        """
        try:
            content = path.read_text(encoding="utf-8") if path.exists() else ""
        except (OSError, UnicodeDecodeError) as e:
            raise ExportFileError(f"Failed to read {path}: {e}")
        names: list[str] = []
        for match in EXPORT_PATTERN.finditer(content):
            name = match.group(1)
            if name not in names:
                names.append(name)
        return cls(path=path, names=names, content=content)

    def __contains__(self, display_name: str) -> bool:
        return display_name in self.names

    def register(self, display_name: str) -> bool:
        """Append an export line for a component unless it is already exported.

        Returns:
            True if a line was appended, False if the component was already present

        Raises:
            ExportFileError: If the file cannot be written
        """
        if display_name in self:
            return False

        line = export_line(display_name)
        if self.content and not self.content.endswith("\n"):
            line = "\n" + line

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            raise ExportFileError(f"Failed to update {self.path}: {e}")

        self.content += line
        self.names.append(display_name)
        return True
