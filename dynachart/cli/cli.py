"""Command Line Interface"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

import click
import simplejson as json

from dynachart.chart import sorted_notes
from dynachart.formats import parse
from dynachart.geometry import Borders, GeometryError
from dynachart.painter import Painter
from dynachart.schema import dump_sheet

from .helpers import borders_option


@click.command()
@click.argument("src", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    "dst",
    type=click.Path(dir_okay=False, writable=True),
    help="Write the sheet to this file instead of the standard output",
)
@click.option(
    "--bar-interval",
    type=click.FloatRange(min=0, min_open=True),
    default=2.0,
    show_default=True,
    help="Chart time covered by a single bar",
)
@click.option(
    "--row-interval",
    type=click.FloatRange(min=0, min_open=True),
    default=1 / 16,
    show_default=True,
    help="Chart time covered by a single row",
)
@click.option(
    "--container-width",
    type=click.IntRange(min=1),
    default=864,
    show_default=True,
    help="Width of the sheet in pixels",
)
@click.option(
    "--bar-height",
    "container_bar_height",
    type=click.IntRange(min=1),
    default=480,
    show_default=True,
    help="Height in pixels of one unit of chart time",
)
@click.option(
    "--sort",
    "sort_notes",
    is_flag=True,
    help="Output notes in canonical order (holds, normal notes, chains, by time)",
)
@borders_option("--center", type=float, help="Center of the front lane")
@borders_option("--front-border", type=float)
@borders_option("--front-visible-limit", type=float)
@borders_option("--side-border", type=float)
@borders_option("--side-visible-cap", type=float)
@borders_option("--side-visible-limit", type=float)
@borders_option(
    "--side-width-ratio", type=float, help="Horizontal scale of the side lanes"
)
@borders_option("--note-width-bias", type=float)
@borders_option("--note-width-limit", type=float, help="Minimum drawn note width")
def render(
    src: str,
    dst: Optional[str],
    bar_interval: float,
    row_interval: float,
    container_width: int,
    container_bar_height: int,
    sort_notes: bool,
    borders_options: Optional[Dict[str, Any]] = None,
) -> None:
    """Lay out the chart asset SRC and dump the resulting sheet as json"""
    try:
        borders = Borders(**(borders_options or {}))
    except GeometryError as e:
        raise click.BadParameter(str(e)) from None

    payload = Path(src).read_text(encoding="utf-8-sig")
    chart = parse(payload)
    if chart is None:
        raise click.ClickException("Chart could not be parsed")

    if sort_notes:
        chart = replace(chart, notes=tuple(sorted_notes(chart.notes)))

    painter = Painter(
        borders=borders,
        bar_interval=bar_interval,
        row_interval=row_interval,
        container_width=container_width,
        container_bar_height=container_bar_height,
    )
    sheet = painter.layout(chart)
    text = json.dumps(dump_sheet(sheet), indent=4)
    if dst is None:
        click.echo(text)
    else:
        Path(dst).write_text(text + "\n", encoding="utf-8")


if __name__ == "__main__":
    render()
