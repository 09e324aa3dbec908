"""Fetch a component, register it, and install the packages it imports."""

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import httpx
from rich.console import Console
from rich.markup import escape

from zeno.component import ComponentRequest
from zeno.config import ProjectConfig
from zeno.exceptions import DependencyError, ErrorTier, ExportFileError, ZenoError
from zeno.fetcher import fetch_component
from zeno.imports import scan_file
from zeno.manifest import find_missing_packages, load_declared_dependencies
from zeno.package_manager import PackageManager, detect_package_manager, install_packages
from zeno.registry import ExportRegistry

console = Console()
err_console = Console(stderr=True)


@dataclass
class GenerateResult:
    """Outcome of adding a single component."""

    display_name: str
    destination: Path
    fetched: bool = False
    registered: bool = False
    used_packages: list[str] = field(default_factory=list)
    missing_packages: list[str] = field(default_factory=list)
    installed_packages: list[str] = field(default_factory=list)
    package_manager: PackageManager | None = None
    error: ZenoError | None = None

    @property
    def failed(self) -> bool:
        """Return True if the run hit an error that should fail the command."""
        return self.error is not None and self.error.tier is ErrorTier.FATAL


def _install_dependencies(
    result: GenerateResult,
    config: ProjectConfig,
    run: Callable[..., subprocess.CompletedProcess],
) -> None:
    result.used_packages = scan_file(result.destination)
    declared = load_declared_dependencies(config.manifest_path)
    result.missing_packages = find_missing_packages(result.used_packages, declared)

    if not result.missing_packages:
        console.print("[green]All dependencies are already installed.[/green]")
        return

    result.package_manager = detect_package_manager(config.root)
    console.print(f"Installing dependencies: {', '.join(result.missing_packages)}")
    install_packages(result.package_manager, result.missing_packages, config.root, run=run)
    result.installed_packages = list(result.missing_packages)
    console.print("[green]Dependencies installed successfully.[/green]")


def generate_component(
    name: str,
    config: ProjectConfig,
    client: httpx.Client | None = None,
    run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> GenerateResult:
    """Add a component from the remote repository to the project.

    A component that already exists locally is not fetched again, but its
    imports are still checked against the manifest.

    Args:
        name: Component name as typed by the user (e.g. "button")
        config: Project configuration
        client: Optional httpx client used for the download
        run: Subprocess runner used for the package manager

    Returns:
        GenerateResult. A failed download or export file update is recorded
        as a fatal error and stops the run; dependency errors are recorded as recoverable.
    """
    request = ComponentRequest(name)
    result = GenerateResult(
        display_name=request.display_name,
        destination=request.destination(config),
    )

    if result.destination.exists():
        console.print(
            f"[yellow]Component {result.display_name} already exists. Nothing to do.[/yellow]"
        )
    else:
        try:
            fetch_component(request.remote_url(config), name, result.destination, client=client)
        except ZenoError as e:
            result.error = e
            return result
        result.fetched = True

        try:
            registry = ExportRegistry.load(config.export_path)
            result.registered = registry.register(result.display_name)
        except ExportFileError as e:
            # A component left on disk must also be registered
            result.destination.unlink(missing_ok=True)
            result.error = e
            return result
        console.print(
            f"[green]Component {result.display_name} added to "
            f"{escape(config.components_dir)}/ui/[/green]"
        )

    try:
        _install_dependencies(result, config, run)
    except DependencyError as e:
        err_console.print(f"[red]Failed to check or install dependencies:[/red] {escape(str(e))}")
        result.error = e

    return result
