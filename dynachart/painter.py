"""Everything a renderer needs to draw a chart, computed in one go"""

from dataclasses import dataclass, field
from typing import List, Union

from dynachart.chart import Chart
from dynachart.formats import parse
from dynachart.geometry import Borders
from dynachart.layout import (
    NotePlacement,
    RenderDescriptor,
    place_note,
    project_notes,
)
from dynachart.timeline import Timeline, quantize


@dataclass(frozen=True)
class Sheet:
    chart: Chart
    descriptors: List[RenderDescriptor]
    # same order as descriptors
    placements: List[NotePlacement]
    timeline: Timeline
    # size of the whole sheet in pixels
    width: int
    height: float


@dataclass(frozen=True)
class Painter:
    borders: Borders = field(default_factory=Borders)
    bar_interval: float = 2.0
    row_interval: float = 1 / 16
    container_width: int = 864
    # pixels per unit of chart time
    container_bar_height: int = 480

    def layout(self, chart: Union[Chart, str]) -> Sheet:
        """Lay out an already decoded chart or a raw chart asset payload"""
        if not isinstance(chart, Chart):
            decoded = parse(chart)
            if decoded is None:
                raise ValueError("Unrecognized chart format")
            chart = decoded

        descriptors = project_notes(chart.notes, self.borders)
        timeline = quantize(
            chart.time,
            self.borders,
            bar_interval=self.bar_interval,
            row_interval=self.row_interval,
            bar_per_min=chart.bar_per_min,
            time_offset=chart.time_offset,
        )
        placements = [
            place_note(d, timeline.total_time, self.row_interval) for d in descriptors
        ]
        return Sheet(
            chart=chart,
            descriptors=descriptors,
            placements=placements,
            timeline=timeline,
            width=self.container_width,
            height=timeline.total_time * self.container_bar_height,
        )
