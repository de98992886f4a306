"""Typer CLI for patio roof quotes."""

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from patioroof.application.config import (
    ConfigError,
    PatioRoofConfiguration,
    config_to_domain,
    load_config,
    merge_config_with_cli,
)
from patioroof.application.dtos import QuoteOutput
from patioroof.application.factory import get_factory
from patioroof.cli.commands import (
    emit,
    handle_multi_format_export,
    render_quote,
    validate_command,
)
from patioroof.domain.value_objects import (
    ConfigurationError,
    PriceUnavailableError,
    UnknownOptionError,
)

app = typer.Typer(
    name="patioroof",
    help="Compute the structural layout and price of a patio roof.",
)

app.command(name="validate")(validate_command)


# Shared options. Values are checked by the configuration schema, so
# enumerated options are plain strings and ints here.
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Width in mm (1000-7060)")
]
DepthOption = Annotated[
    float | None, typer.Option("--depth", "-d", help="Depth in mm (1000-3500, 3000 with glass)")
]
GutterHeightOption = Annotated[
    float | None, typer.Option("--gutter-height", help="Gutter height in mm (2000-3000)")
]
MountTypeOption = Annotated[
    str | None, typer.Option("--mount-type", help="Mount type: wall, freestanding")
]
PostLengthOption = Annotated[
    int | None, typer.Option("--post-length", help="Post length in mm: 2500, 3000, 3500")
]
PostMountingOption = Annotated[
    str | None,
    typer.Option(
        "--post-mounting", help="Post mounting: alu-l, alu-u-3, alu-u-6, steel-3, steel-6"
    ),
]
SlopeOption = Annotated[
    int | None, typer.Option("--slope", help="Roof slope in degrees (5-10)")
]
DeliveryOption = Annotated[
    str | None,
    typer.Option("--delivery", help="Delivery: with-mounting-set, without-mounting-set"),
]
CoveringOption = Annotated[
    str | None,
    typer.Option(
        "--covering",
        help="Roof covering: polycarbonate-opal, polycarbonate-clear, "
        "polycarbonate-reflex-pearl, vsg-clear, vsg-matt",
    ),
]
FrameColorOption = Annotated[
    str | None, typer.Option("--frame-color", help="Frame colour, e.g. RAL7016st")
]
SideLeftOption = Annotated[
    str | None, typer.Option("--side-left", help="Left side panel: none, wedge-clear, wall-clear")
]
SideRightOption = Annotated[
    str | None, typer.Option("--side-right", help="Right side panel: none, wedge-clear, wall-clear")
]
GridPolicyOption = Annotated[
    str | None, typer.Option("--grid-policy", help="Grid lookup: snap, bilinear")
]
PinnedXOption = Annotated[
    float | None, typer.Option("--pinned-x", help="x of the pinned right edge in m")
]
PinnedBackZOption = Annotated[
    float | None, typer.Option("--pinned-back-z", help="Also pin the back edge at this z in m")
]
FormatOption = Annotated[
    str | None, typer.Option("--format", "-f", help="Output format: text, json, csv")
]
OutputOption = Annotated[
    Path | None, typer.Option("--output", "-o", help="Write output to this file")
]


def _load_and_merge(
    config_file: Path | None,
    overrides: dict[str, Any],
    **settings: Any,
) -> PatioRoofConfiguration:
    """Load the optional config file and apply CLI overrides; exit 1 on error."""
    try:
        base = load_config(config_file) if config_file is not None else None
        return merge_config_with_cli(base, overrides=overrides, **settings)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _run_quote(config: PatioRoofConfiguration, include_accessories: bool = False) -> QuoteOutput:
    """Run the quote command; domain errors exit with code 1."""
    try:
        roof, policy, pinned_edge = config_to_domain(config)
        return get_factory().get_quote_command().execute(
            roof,
            policy=policy,
            pinned_edge=pinned_edge,
            include_accessories=include_accessories,
        )
    except (ConfigurationError, PriceUnavailableError, UnknownOptionError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _roof_overrides(**values: Any) -> dict[str, Any]:
    return {field: value for field, value in values.items() if value is not None}


@app.command()
def quote(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    depth: DepthOption = None,
    gutter_height: GutterHeightOption = None,
    mount_type: MountTypeOption = None,
    post_length: PostLengthOption = None,
    post_mounting: PostMountingOption = None,
    slope: SlopeOption = None,
    delivery: DeliveryOption = None,
    covering: CoveringOption = None,
    frame_color: FrameColorOption = None,
    side_left: SideLeftOption = None,
    side_right: SideRightOption = None,
    grid_policy: GridPolicyOption = None,
    pinned_x: PinnedXOption = None,
    pinned_back_z: PinnedBackZOption = None,
    output_format: FormatOption = None,
    output_file: OutputOption = None,
    accessories: Annotated[
        bool, typer.Option("--accessories", help="Include accessory prices")
    ] = False,
) -> None:
    """Quote a patio roof: layout summary and itemized price.

    Options override values from --config; omitted values use the
    configurator defaults (5000 x 3000 mm, wall mount, 8 deg).

    Examples:
        patioroof quote
        patioroof quote --width 4000 --depth 2500 --covering vsg-clear
        patioroof quote --config my-roof.json --format json --output quote.json
    """
    config = _load_and_merge(
        config_file,
        _roof_overrides(
            width=width,
            depth=depth,
            gutter_height=gutter_height,
            mount_type=mount_type,
            post_length=post_length,
            post_mounting=post_mounting,
            roof_slope=slope,
            delivery_option=delivery,
            roof_covering=covering,
            frame_color=frame_color,
            side_panel_left=side_left,
            side_panel_right=side_right,
        ),
        grid_policy=grid_policy,
        pinned_x=pinned_x,
        pinned_back_z=pinned_back_z,
        output_format=output_format,
        output_file=output_file,
    )
    result = _run_quote(config, include_accessories=accessories)

    target = Path(config.output.file) if config.output.file else None
    emit(render_quote(result, config.output.format.value), target)


@app.command()
def price(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    depth: DepthOption = None,
    gutter_height: GutterHeightOption = None,
    mount_type: MountTypeOption = None,
    post_length: PostLengthOption = None,
    post_mounting: PostMountingOption = None,
    slope: SlopeOption = None,
    delivery: DeliveryOption = None,
    covering: CoveringOption = None,
    side_left: SideLeftOption = None,
    side_right: SideRightOption = None,
    grid_policy: GridPolicyOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the breakdown as JSON")] = False,
) -> None:
    """Show the itemized price of a patio roof."""
    config = _load_and_merge(
        config_file,
        _roof_overrides(
            width=width,
            depth=depth,
            gutter_height=gutter_height,
            mount_type=mount_type,
            post_length=post_length,
            post_mounting=post_mounting,
            roof_slope=slope,
            delivery_option=delivery,
            roof_covering=covering,
            side_panel_left=side_left,
            side_panel_right=side_right,
        ),
        grid_policy=grid_policy,
    )
    result = _run_quote(config)

    if as_json:
        typer.echo(json.dumps(result.price.to_dict(), indent=2))
    else:
        typer.echo(get_factory().get_price_formatter().format(result.price))


@app.command()
def layout(
    config_file: ConfigOption = None,
    width: WidthOption = None,
    depth: DepthOption = None,
    gutter_height: GutterHeightOption = None,
    mount_type: MountTypeOption = None,
    slope: SlopeOption = None,
    covering: CoveringOption = None,
    side_left: SideLeftOption = None,
    side_right: SideRightOption = None,
    pinned_x: PinnedXOption = None,
    pinned_back_z: PinnedBackZOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the full layout as JSON")] = False,
) -> None:
    """Show the structural layout of a patio roof."""
    config = _load_and_merge(
        config_file,
        _roof_overrides(
            width=width,
            depth=depth,
            gutter_height=gutter_height,
            mount_type=mount_type,
            roof_slope=slope,
            roof_covering=covering,
            side_panel_left=side_left,
            side_panel_right=side_right,
        ),
        pinned_x=pinned_x,
        pinned_back_z=pinned_back_z,
    )
    result = _run_quote(config)

    if as_json:
        typer.echo(json.dumps(result.layout.to_dict(), indent=2))
    else:
        typer.echo(get_factory().get_layout_formatter().format(result.layout))


@app.command()
def catalog(
    width: Annotated[float, typer.Option("--width", "-w", help="Width in mm")],
    depth: Annotated[float, typer.Option("--depth", "-d", help="Depth in mm")],
    gutter_height: Annotated[
        float, typer.Option("--gutter-height", help="Gutter height in mm")
    ] = 2200.0,
) -> None:
    """Show accessory prices for a roof size."""
    factory = get_factory()
    try:
        prices = factory.get_catalog().quote(width, depth, gutter_height)
    except PriceUnavailableError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(factory.get_catalog_formatter().format(prices))


@app.command()
def export(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON configuration file")
    ],
    formats: Annotated[
        str,
        typer.Option("--formats", help="Comma-separated export formats: json,csv (or 'all')"),
    ] = "all",
    output_dir: Annotated[
        Path, typer.Option("--output-dir", help="Directory for the exported files")
    ] = Path("."),
    project_name: Annotated[
        str, typer.Option("--project-name", help="Base name for exported files")
    ] = "patio_roof",
) -> None:
    """Export a quote to several file formats.

    Example:
        patioroof export my-roof.json --formats json,csv --output-dir ./out
    """
    config = _load_and_merge(config_file, {})
    result = _run_quote(config, include_accessories=True)
    handle_multi_format_export(formats, output_dir, project_name, result)


if __name__ == "__main__":
    app()
