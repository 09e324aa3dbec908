"""Package manager detection and dependency installation."""

import shutil
import subprocess
from enum import Enum
from pathlib import Path
from typing import Callable

from zeno.constants import PNPM_LOCK, YARN_LOCK
from zeno.exceptions import InstallError


class PackageManager(Enum):
    """JavaScript package manager used by the project."""

    YARN = "yarn"
    PNPM = "pnpm"
    NPM = "npm"


INSTALL_SUBCOMMANDS: dict[PackageManager, str] = {
    PackageManager.YARN: "add",
    PackageManager.PNPM: "add",
    PackageManager.NPM: "install",
}


def detect_package_manager(root: Path) -> PackageManager:
    """Detect the package manager from lock files, preferring yarn over pnpm."""
    if (root / YARN_LOCK).exists():
        return PackageManager.YARN
    if (root / PNPM_LOCK).exists():
        return PackageManager.PNPM
    return PackageManager.NPM


def build_install_command(manager: PackageManager, packages: list[str]) -> list[str]:
    """Build the install command line for a set of packages.

    Examples:
        >>> build_install_command(PackageManager.YARN, ["clsx", "@radix-ui/react-slot"])
        ['yarn', 'add', 'clsx', '@radix-ui/react-slot']
        >>> build_install_command(PackageManager.NPM, ["clsx"])
        ['npm', 'install', 'clsx']
    """
    return [manager.value, INSTALL_SUBCOMMANDS[manager], *packages]


def install_packages(
    manager: PackageManager,
    packages: list[str],
    cwd: Path,
    run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> None:
    """Install packages, streaming the package manager's output to the terminal.

    The executable is resolved on PATH first so that .cmd shims are found
    on Windows.

    Raises:
        InstallError: If the package manager is missing, cannot be started
            or exits non-zero
    """
    executable = shutil.which(manager.value)
    if executable is None:
        raise InstallError(f"{manager.value} not found. Is it installed and on PATH?")

    _, *args = build_install_command(manager, packages)
    try:
        run([executable, *args], cwd=cwd, check=True)
    except subprocess.CalledProcessError as e:
        raise InstallError(
            f"'{' '.join([manager.value, *args])}' exited with code {e.returncode}"
        )
    except OSError as e:
        raise InstallError(f"Failed to run {manager.value}: {e}")
