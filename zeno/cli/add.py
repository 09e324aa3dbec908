"""Add subcommand for zeno - fetch a component into the project."""

from typing import Annotated, Optional

import typer

from zeno.component import validate_component_name
from zeno.config import load_config
from zeno.exceptions import ZenoError
from zeno.generator import generate_component


def add(
    name: Annotated[
        Optional[str],
        typer.Argument(help="Component name (e.g., button)", show_default=False),
    ] = None,
) -> None:
    """Add a UI component to src/components/ui/.

    Downloads the component source, exports it from src/components/index.ts
    and installs any packages it imports that package.json does not declare.

    Examples:
      zeno add button
      zeno add card
    """
    try:
        name = validate_component_name(name)
        config = load_config()
    except ZenoError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = generate_component(name, config)

    if result.failed:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(1)
