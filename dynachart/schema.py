"""Serialized form of a Sheet, what gets handed over to a renderer.

Enums are written as their integer values, None values are left out"""

from dataclasses import dataclass
from typing import Any, List, Optional

from marshmallow import EXCLUDE, Schema, post_dump
from marshmallow_dataclass import class_schema

from dynachart import chart as dc
from dynachart import layout, painter, timeline


@dataclass
class Note:
    position: float
    width: float
    side: int
    type: int
    start: float
    end: float


@dataclass
class Chart:
    name: str
    map_id: str
    time: float
    left_slide: bool
    right_slide: bool
    bar_per_min: float
    time_offset: float
    notes: List[Note]


@dataclass
class RenderDescriptor:
    type: int
    x: float
    y: float
    width: float
    height: Optional[float]


@dataclass
class NotePlacement:
    left: float
    bottom: float
    width: float
    height: Optional[float]


@dataclass
class TimeLabel:
    bar_index: int
    text: str
    position: float


@dataclass
class Timeline:
    total_time: float
    bar_count: int
    bar_size: float
    row_count: int
    row_size: float
    row_lines: List[float]
    bar_lines: List[float]
    column_lines: List[float]
    labels: List[TimeLabel]
    label_anchor: float


@dataclass
class Sheet:
    width: int
    height: float
    chart: Chart
    timeline: Timeline
    descriptors: List[RenderDescriptor]
    placements: List[NotePlacement]


class BaseSchema(Schema):
    class Meta:
        ordered = True
        unknown = EXCLUDE

    @post_dump
    def _remove_none_values(self, data: dict, **kwargs: Any) -> dict:
        return {key: value for key, value in data.items() if value is not None}


SHEET_SCHEMA = class_schema(Sheet, base_schema=BaseSchema)()


def dump_sheet(s: painter.Sheet) -> dict:
    return SHEET_SCHEMA.dump(
        Sheet(
            width=s.width,
            height=s.height,
            chart=dump_chart(s.chart),
            timeline=dump_timeline(s.timeline),
            descriptors=[dump_descriptor(d) for d in s.descriptors],
            placements=[dump_placement(p) for p in s.placements],
        )
    )


def dump_chart(c: dc.Chart) -> Chart:
    return Chart(
        name=c.name,
        map_id=c.map_id,
        time=c.time,
        left_slide=c.left_slide,
        right_slide=c.right_slide,
        bar_per_min=c.bar_per_min,
        time_offset=c.time_offset,
        notes=[dump_note(n) for n in c.notes],
    )


def dump_note(n: dc.Note) -> Note:
    return Note(
        position=n.position,
        width=n.width,
        side=n.side.value,
        type=n.type.value,
        start=n.start,
        end=n.end,
    )


def dump_descriptor(d: layout.RenderDescriptor) -> RenderDescriptor:
    return RenderDescriptor(
        type=d.type.value,
        x=d.x,
        y=d.y,
        width=d.width,
        height=d.height,
    )


def dump_placement(p: layout.NotePlacement) -> NotePlacement:
    return NotePlacement(
        left=p.left,
        bottom=p.bottom,
        width=p.width,
        height=p.height,
    )


def dump_timeline(t: timeline.Timeline) -> Timeline:
    return Timeline(
        total_time=t.total_time,
        bar_count=t.bar_count,
        bar_size=t.bar_size,
        row_count=t.row_count,
        row_size=t.row_size,
        row_lines=list(t.row_lines),
        bar_lines=list(t.bar_lines),
        column_lines=list(t.column_lines),
        labels=[dump_label(label) for label in t.labels],
        label_anchor=t.label_anchor,
    )


def dump_label(label: timeline.TimeLabel) -> TimeLabel:
    return TimeLabel(
        bar_index=label.bar_index,
        text=label.text,
        position=label.position,
    )
