"""Typer CLI for cabinet panel decomposition."""

from pathlib import Path
from typing import Annotated

import pydantic
import typer

from cabinet_panels.application import LayoutOutput, ServiceFactory
from cabinet_panels.application.config import (
    CabinetConfiguration,
    ConfigError,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from cabinet_panels.cli.commands import templates_app, validate_command
from cabinet_panels.cli.commands.output_handlers import (
    display_errors,
    display_output,
    handle_multi_format_export,
    parse_formats,
)

app = typer.Typer(
    name="cabinet-panels",
    help="Decompose a parametric cabinet into its constituent panels.",
)

app.command(name="validate")(validate_command)
app.add_typer(templates_app, name="templates")


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Overall width in mm")
]
HeightOption = Annotated[
    float | None, typer.Option("--height", "-h", help="Overall height in mm")
]
DepthOption = Annotated[
    float | None, typer.Option("--depth", "-d", help="Overall depth in mm")
]
ThicknessOption = Annotated[
    float | None, typer.Option("--thickness", "-t", help="Board thickness in mm")
]
RoofStyleOption = Annotated[
    str | None,
    typer.Option("--roof-style", help="Roof placement: between or over the sides"),
]
BackingOption = Annotated[
    bool | None,
    typer.Option("--backing/--no-backing", help="Fit a rear MDF backing panel"),
]
KickplateOption = Annotated[
    bool | None,
    typer.Option("--kickplate/--no-kickplate", help="Stand the cabinet on a plinth"),
]
KickplateHeightOption = Annotated[
    float | None, typer.Option("--kickplate-height", help="Plinth height in mm")
]
ModeOption = Annotated[
    str | None,
    typer.Option(
        "--mode",
        "-m",
        help="Distribution mode: horizontal (shelves first) or vertical (dividers first)",
    ),
]
PrimaryCountOption = Annotated[
    int | None,
    typer.Option("--primary-count", "-p", help="Number of primary members"),
]
SecondaryCountsOption = Annotated[
    str | None,
    typer.Option(
        "--secondary-counts",
        "-s",
        help="Comma-separated secondary member counts per cell, e.g. 0,2,1",
    ),
]
DoorsOption = Annotated[
    bool | None, typer.Option("--doors/--no-doors", help="Fit doors")
]
HingeStyleOption = Annotated[
    str | None,
    typer.Option("--hinge-style", help="Door hinge style: lateral, central or internal"),
]
DoorCountOption = Annotated[
    int | None, typer.Option("--door-count", help="Number of doors")
]


def _parse_secondary_counts(value: str | None) -> list[int] | None:
    if value is None:
        return None
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        typer.echo(
            f"Error: --secondary-counts must be comma-separated integers, got {value!r}",
            err=True,
        )
        raise typer.Exit(code=1)


def _resolve_config(config_file: Path | None, **overrides) -> CabinetConfiguration:
    """Load the configuration file (if any) and apply CLI overrides.

    Without a configuration file, --width, --height and --depth are required.
    """
    try:
        if config_file is not None:
            config = load_config(config_file)
        else:
            missing = [
                f"--{name}"
                for name in ("width", "height", "depth")
                if overrides.get(name) is None
            ]
            if missing:
                typer.echo(
                    f"Error: {', '.join(missing)} required when --config is not provided",
                    err=True,
                )
                raise typer.Exit(code=1)
            config = load_config_from_dict(
                {
                    "schema_version": "1.0",
                    "cabinet": {
                        name: overrides[name] for name in ("width", "height", "depth")
                    },
                }
            )
        return merge_config_with_cli(config, **overrides)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except pydantic.ValidationError as e:
        for error in e.errors():
            path = ".".join(str(part) for part in error["loc"])
            typer.echo(f"Error: {path}: {error['msg']}", err=True)
        raise typer.Exit(code=1)


def _generate(factory: ServiceFactory, config: CabinetConfiguration) -> LayoutOutput:
    result = factory.create_generate_command().execute_config(config)
    if not result.is_valid:
        display_errors(result)
        raise typer.Exit(code=1)
    return result


@app.command()
def generate(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    thickness: ThicknessOption = None,
    roof_style: RoofStyleOption = None,
    backing: BackingOption = None,
    kickplate: KickplateOption = None,
    kickplate_height: KickplateHeightOption = None,
    mode: ModeOption = None,
    primary_count: PrimaryCountOption = None,
    secondary_counts: SecondaryCountsOption = None,
    doors: DoorsOption = None,
    hinge_style: HingeStyleOption = None,
    door_count: DoorCountOption = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Console output: all, panels, cutlist, json"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated file formats to export (stl,svg,dxf,json,bom) or 'all'",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = None,
    door_open_angle: Annotated[
        float | None,
        typer.Option("--door-open-angle", help="Draw doors open by this angle in the STL"),
    ] = None,
) -> None:
    """Generate the panel list of a cabinet.

    Parameters come from CLI options, a JSON configuration file, or both;
    CLI options override configuration values.

    Examples:
        cabinet-panels generate -w 900 -h 1800 -d 500 --kickplate -p 3
        cabinet-panels generate --config wardrobe.json --format cutlist
        cabinet-panels generate --config wardrobe.json --output-formats stl,svg -o out
    """
    config = _resolve_config(
        config_file,
        width=width,
        height=height,
        depth=depth,
        thickness=thickness,
        roof_style=roof_style,
        backing=backing,
        kickplate=kickplate,
        kickplate_height=kickplate_height,
        distribution_mode=mode,
        primary_count=primary_count,
        secondary_counts=_parse_secondary_counts(secondary_counts),
        doors=doors,
        hinge_style=hinge_style,
        door_count=door_count,
        output_format=output_format,
        output_formats=parse_formats(output_formats) if output_formats else None,
        output_dir=str(output_dir) if output_dir is not None else None,
        project_name=project_name,
        door_open_angle=door_open_angle,
    )

    factory = ServiceFactory(door_open_angle=config.output.door_open_angle)
    result = _generate(factory, config)

    if config.output.formats:
        out_dir = Path(config.output.output_dir) if config.output.output_dir else None
        handle_multi_format_export(
            parse_formats(config.output.formats),
            out_dir,
            config.output.project_name,
            result,
            factory,
        )
        return

    display_output(result, factory, config.output.format)


@app.command()
def cutlist(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    thickness: ThicknessOption = None,
    roof_style: RoofStyleOption = None,
    backing: BackingOption = None,
    kickplate: KickplateOption = None,
    kickplate_height: KickplateHeightOption = None,
    mode: ModeOption = None,
    primary_count: PrimaryCountOption = None,
    secondary_counts: SecondaryCountsOption = None,
    doors: DoorsOption = None,
    hinge_style: HingeStyleOption = None,
    door_count: DoorCountOption = None,
) -> None:
    """Display the consolidated cut list for a cabinet."""
    config = _resolve_config(
        config_file,
        width=width,
        height=height,
        depth=depth,
        thickness=thickness,
        roof_style=roof_style,
        backing=backing,
        kickplate=kickplate,
        kickplate_height=kickplate_height,
        distribution_mode=mode,
        primary_count=primary_count,
        secondary_counts=_parse_secondary_counts(secondary_counts),
        doors=doors,
        hinge_style=hinge_style,
        door_count=door_count,
    )
    factory = ServiceFactory()
    result = _generate(factory, config)
    typer.echo(factory.get_cut_list_formatter().format(result.cut_list))


if __name__ == "__main__":
    app()
