"""Projection of notes onto the sheet.

Horizontal values of a RenderDescriptor are fractions of the sheet width
(0 is the left cap line, 1 the right cap line). Vertical values are left in
chart time units, the timeline decides how much time the sheet covers"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from dynachart.chart import Note, NoteType, Side
from dynachart.geometry import Borders


@dataclass(frozen=True)
class RenderDescriptor:
    type: NoteType
    x: float
    y: float
    width: float
    # only set for hold notes
    height: Optional[float]


@dataclass(frozen=True)
class NotePlacement:
    """Position of a note on the sheet, every value is a percentage of the
    sheet's width (left, width) or height (bottom, height)"""

    left: float
    bottom: float
    width: float
    height: Optional[float]


def effective_width(note: Note, borders: Borders) -> float:
    """Notes are drawn slightly narrower than they are, but never narrower
    than note_width_limit"""
    return max(
        borders.note_width_limit,
        note.width - borders.note_width_bias,
        borders.note_width_bias - note.width,
    )


def _left_x(note: Note, borders: Borders) -> float:
    # the left lane is mirrored : the note's right edge is drawn leftmost
    return borders.side_width_ratio * (
        borders.side_visible_cap - (note.position + note.width / 2)
    )


def _right_x(note: Note, borders: Borders) -> float:
    return borders.width - borders.side_width_ratio * (
        borders.side_visible_cap - (note.position - note.width / 2)
    )


def _front_x(note: Note, borders: Borders) -> float:
    return borders.width / 2 + (note.position - note.width / 2) - borders.center


X_POSITION: Dict[Side, Callable[[Note, Borders], float]] = {
    Side.LEFT: _left_x,
    Side.FRONT: _front_x,
    Side.RIGHT: _right_x,
}


def project_note(note: Note, borders: Borders) -> RenderDescriptor:
    x = X_POSITION[note.side](note, borders)
    width = effective_width(note, borders)
    if note.side != Side.FRONT:
        width *= borders.side_width_ratio

    return RenderDescriptor(
        type=note.type,
        x=x / borders.width,
        y=note.start,
        width=width / borders.width,
        height=note.end - note.start if note.type == NoteType.HOLD else None,
    )


def project_notes(notes: Iterable[Note], borders: Borders) -> List[RenderDescriptor]:
    return [project_note(n, borders) for n in notes]


def place_note(
    descriptor: RenderDescriptor, total_time: float, row_interval: float
) -> NotePlacement:
    """Convert a descriptor to sheet percentages. Holds are at least a
    quarter row tall so zero-length holds remain visible"""
    if descriptor.height is None:
        height = None
    else:
        height = 100 * max(descriptor.height, row_interval / 4) / total_time

    return NotePlacement(
        left=100 * descriptor.x,
        bottom=100 * descriptor.y / total_time,
        width=100 * descriptor.width,
        height=height,
    )
