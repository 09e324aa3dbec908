"""Centralized constants for the zeno package."""

# Raw file host for the upstream component sources
DEFAULT_REGISTRY_URL = (
    "https://raw.githubusercontent.com/lspenha/zeno/refs/heads/main/packages/ui/src"
)

# Project layout
DEFAULT_COMPONENTS_DIR = "src/components"
UI_SUBDIR = "ui"
DEFAULT_EXPORT_FILE = "index.ts"
DEFAULT_EXTENSION = ".tsx"
DEFAULT_MANIFEST = "package.json"

CONFIG_FILENAME = "zeno.toml"

# Lock files used to detect the package manager, in priority order
YARN_LOCK = "yarn.lock"
PNPM_LOCK = "pnpm-lock.yaml"
