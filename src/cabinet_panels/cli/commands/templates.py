"""Templates commands for listing, showing and initializing templates."""

from pathlib import Path
from typing import Annotated

import typer

from cabinet_panels.application.templates import TemplateManager, TemplateNotFoundError

templates_app = typer.Typer(
    name="templates",
    help="Manage cabinet configuration templates.",
)


def _not_found(manager: TemplateManager, name: str) -> typer.Exit:
    available = ", ".join(n for n, _ in manager.list_templates())
    typer.echo(f"Error: Template not found: {name}", err=True)
    typer.echo(f"Available templates: {available}", err=True)
    return typer.Exit(code=1)


@templates_app.command(name="list")
def list_templates() -> None:
    """List all available cabinet templates.

    Example:
        cabinet-panels templates list
    """
    manager = TemplateManager()
    templates = manager.list_templates()

    typer.echo("Available templates:")
    typer.echo()
    max_name_width = max(len(name) for name, _ in templates) if templates else 0
    for name, description in templates:
        typer.echo(f"  {name:<{max_name_width}}  - {description}")
    typer.echo()
    typer.echo(
        "Use 'cabinet-panels templates init <name>' to create a configuration "
        "file from a template."
    )


@templates_app.command(name="show")
def show_template(
    name: Annotated[str, typer.Argument(help="Name of the template to show")],
) -> None:
    """Print the JSON content of a template."""
    manager = TemplateManager()
    try:
        typer.echo(manager.get_template(name))
    except TemplateNotFoundError:
        raise _not_found(manager, name)


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to initialize"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Initialize a new configuration file from a template.

    Examples:
        cabinet-panels templates init wardrobe
        cabinet-panels templates init bookcase --output my-bookcase.json
        cabinet-panels templates init bookcase --force
    """
    manager = TemplateManager()
    if output is None:
        output = Path(f"{name}.json")

    if not manager.template_exists(name):
        raise _not_found(manager, name)

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_template(name, output, force=force)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Created: {output}")
