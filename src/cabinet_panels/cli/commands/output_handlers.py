"""Output handling for the cabinet-panels CLI.

Console rendering of a generated layout and multi-format file export.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from cabinet_panels.infrastructure.exporters import ExporterRegistry
from cabinet_panels.infrastructure.formatters import JsonExporter

if TYPE_CHECKING:
    from cabinet_panels.application import LayoutOutput, ServiceFactory

__all__ = [
    "display_errors",
    "display_output",
    "handle_multi_format_export",
    "parse_formats",
]


def parse_formats(formats: list[str] | str) -> list[str]:
    """Normalize a format list; "all" expands to every registered format."""
    if isinstance(formats, str):
        formats = formats.split(",")
    names = [f.strip().lower() for f in formats if f.strip()]
    if "all" in names:
        return ExporterRegistry.available_formats()
    return names


def display_errors(result: "LayoutOutput") -> None:
    """Print generation errors and the input they point at to stderr."""
    for message, details in zip(result.errors, result.error_details):
        typer.echo(f"Error: {message}", err=True)
        context = [
            f"{key}={details[key]}"
            for key in ("field", "level", "axis", "cell_index")
            if details.get(key) is not None
        ]
        if context:
            typer.echo(f"  ({', '.join(context)})", err=True)


def display_output(result: "LayoutOutput", factory: "ServiceFactory", output_format: str) -> None:
    """Print a layout to the console in the requested format."""
    if output_format == "json":
        data = JsonExporter().to_dict(result.panel_list, result.cut_list)
        typer.echo(json.dumps(data, indent=2))
        return

    if output_format in ("all", "panels"):
        typer.echo(factory.get_panel_list_formatter().format(result.panel_list))
    if output_format == "all":
        typer.echo()
    if output_format in ("all", "cutlist"):
        typer.echo(factory.get_cut_list_formatter().format(result.cut_list))


def handle_multi_format_export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str,
    result: "LayoutOutput",
    factory: "ServiceFactory",
) -> dict[str, Path]:
    """Export a layout to several file formats.

    Args:
        formats: Format names, already expanded by ``parse_formats``.
        output_dir: Output directory for exported files (default: cwd).
        project_name: Project name for file naming.
        result: The layout output to export.
        factory: Service factory supplying the export manager.

    Returns:
        Mapping of format names to the written files.
    """
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = factory.get_export_manager(output_dir or Path("."), project_name)
    try:
        files = manager.export_all(formats, result.panel_list, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")
    return files
