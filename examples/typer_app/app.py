"""Small typer application whose help lives in YAML files next to it.

Check it with:
    cd examples/typer_app && helpparity check
"""

from typing import Annotated

import typer

app = typer.Typer(help="Deploy tool")


@app.command()
def deploy(
    environment: Annotated[str, typer.Argument(help="Target environment")],
    replicas: Annotated[int, typer.Option(help="Number of replicas")] = 1,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Plan only")] = False,
) -> None:
    """Deploy the current build."""


@app.command()
def rollback(
    environment: Annotated[str, typer.Argument(help="Target environment")],
) -> None:
    """Roll back to the previous build."""
