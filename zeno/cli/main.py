"""Main CLI entry point for zeno."""

from typing import Annotated, Optional

import typer

from zeno import __version__
from zeno.cli.add import add

app = typer.Typer(
    name="zeno",
    help="Add UI components from the zeno repository to your project.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"zeno {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """Add UI components from the zeno repository to your project."""


app.command("add")(add)


if __name__ == "__main__":
    app()
