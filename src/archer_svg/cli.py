"""CLI for archer-svg."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from archer_svg import __version__
from archer_svg.layout import compute_layout
from archer_svg.layout.routing import path_d, route_connectors
from archer_svg.layout.routing.core import groups_rounded_corners
from archer_svg.parser import Diagram, parse_archer
from archer_svg.parser.archer import parse_line_style
from archer_svg.render import render_svg
from archer_svg.themes import THEMES


def _load(input_file: Path) -> Diagram:
    """Parse a diagram file, exiting with status 1 on malformed input."""
    text = input_file.read_text()
    try:
        return parse_archer(text)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _layout(diagram: Diagram, **kwargs) -> None:
    try:
        compute_layout(diagram, **kwargs)
    except ValueError as e:
        click.echo(f"Layout error: {e}", err=True)
        raise SystemExit(1)


def _apply_overrides(
    diagram: Diagram,
    line_style: str | None,
    round_corner: float | None,
    offset: float | None,
) -> None:
    if line_style is not None:
        diagram.defaults.line_style = parse_line_style(line_style)
    if round_corner is not None:
        diagram.defaults.round_corner = round_corner
    if offset is not None:
        diagram.defaults.offset = offset


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", count=True,
              help="Log warnings (-v) or debug detail (-vv) to stderr")
def cli(verbose: int) -> None:
    """archer-svg: Draw arrows between boxes as SVG."""
    level = logging.ERROR
    if verbose == 1:
        level = logging.WARNING
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="default",
              help="Visual theme (default: default)")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
@click.option("--line-style", type=click.Choice(["straight", "curve", "angle"]),
              default=None, help="Override the diagram's line style")
@click.option("--round-corner", type=float, default=None,
              help="Override the corner rounding radius for angle lines")
@click.option("--offset", type=float, default=None,
              help="Override the connector offset")
@click.option("--x-spacing", type=float, default=80.0,
              help="Horizontal spacing between auto-placed columns (default: 80)")
@click.option("--y-spacing", type=float, default=40.0,
              help="Vertical spacing between auto-placed boxes (default: 40)")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    width: int | None,
    height: int | None,
    line_style: str | None,
    round_corner: float | None,
    offset: float | None,
    x_spacing: float,
    y_spacing: float,
) -> None:
    """Render a diagram definition to SVG."""
    diagram = _load(input_file)
    _apply_overrides(diagram, line_style, round_corner, offset)
    _layout(diagram, x_spacing=x_spacing, y_spacing=y_spacing)

    routes = route_connectors(diagram)
    theme_obj = THEMES[theme]
    svg = render_svg(diagram, theme_obj, width=width, height=height, routes=routes)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg + "\n")
    drawn = sum(1 for r in routes if not r.geometry.is_suppressed)
    click.echo(f"Rendered {len(diagram.elements)} elements, "
               f"{drawn} of {len(diagram.relations)} connectors -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a diagram definition."""
    diagram = _load(input_file)

    errors = []

    # Manual layouts must box every element a relation touches
    if diagram.layout == "manual":
        for relation in diagram.relations:
            for anchor in (relation.source, relation.target):
                element = diagram.elements[anchor.element_id]
                if not element.is_measured:
                    errors.append(f"Relation {relation.key} uses element "
                                  f"'{element.id}' which has no box")

    if diagram.defaults.round_corner < 0:
        errors.append("round_corner must not be negative")

    if not errors:
        try:
            compute_layout(diagram)
        except ValueError as e:
            errors.append(str(e))

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(diagram.elements)} elements, "
               f"{len(diagram.relations)} relations")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a diagram definition."""
    diagram = _load(input_file)
    defaults = diagram.defaults

    line_style = defaults.line_style.value if defaults.line_style else (
        "angle" if defaults.no_curves else "curve"
    )
    click.echo(f"Title: {diagram.title or '(none)'}")
    click.echo(f"Layout: {diagram.layout}")
    click.echo(f"Line style: {line_style}")
    click.echo(f"Round corner: {defaults.round_corner:g}")
    click.echo(f"Offset: {defaults.offset:g}")
    click.echo(f"Elements: {len(diagram.elements)}")
    for element in diagram.elements.values():
        boxed = " (box)" if diagram.has_explicit_box(element.id) else ""
        click.echo(f"  {element.id}: {element.label}{boxed}")
    click.echo(f"Relations: {len(diagram.relations)}")
    for relation in diagram.relations:
        label = f" [{relation.label}]" if relation.label else ""
        click.echo(f"  {relation.source.element_id}:{relation.source.side.value} -> "
                   f"{relation.target.element_id}:{relation.target.side.value}{label}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
def paths(input_file: Path, as_json: bool) -> None:
    """Print the computed path and label box of every connector."""
    diagram = _load(input_file)
    _layout(diagram)
    routes = route_connectors(diagram)

    group_type = None
    if groups_rounded_corners(diagram) and routes:
        group_type = routes[0].spec.group_type.value

    if as_json:
        records = []
        for route in routes:
            box = route.geometry.label
            records.append({
                "source": route.relation.source.element_id,
                "target": route.relation.target.element_id,
                "d": path_d(route.geometry.path),
                "suppressed": route.geometry.is_suppressed,
                "label_box": {"x": box.x, "y": box.y,
                              "width": box.width, "height": box.height},
            })
        click.echo(json.dumps({"group": group_type, "connectors": records}, indent=2))
        return

    if group_type is not None:
        click.echo(f"Group: {group_type}")
    for route in routes:
        box = route.geometry.label
        d = path_d(route.geometry.path) or "(suppressed)"
        click.echo(f"{route.relation.key}: {d}")
        click.echo(f"  label box: x={box.x:g} y={box.y:g} "
                   f"w={box.width:g} h={box.height:g}")
