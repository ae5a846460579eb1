"""Format-independent part of chart loading : hold note reconciliation and
chart assembly. Format loaders only have to turn their raw note records into
NoteRecord instances and their header into a ChartHeader"""

import math
import warnings
from dataclasses import dataclass, replace
from typing import Any, Dict, Hashable, Iterable, List, NamedTuple, Optional, Tuple

from dynachart.chart import Chart, Note, NoteType, Side
from dynachart.utils import coerce_or_default

# Record field defaults shared by both formats
DEFAULT_ID = ""
DEFAULT_TIME = 0.0
DEFAULT_POSITION = 2.5
DEFAULT_WIDTH = 1.0
DEFAULT_SUB_ID = -1


@dataclass(frozen=True)
class NoteRecord:
    """One raw entry from a lane, after field coercion"""

    id: Any
    # None marks a terminus record : it only carries the release time of a
    # hold note and is not a note itself
    type: Optional[NoteType]
    time: float = DEFAULT_TIME
    position: float = DEFAULT_POSITION
    width: float = DEFAULT_WIDTH
    sub_id: int = DEFAULT_SUB_ID

    @property
    def is_terminus(self) -> bool:
        return self.type is None


@dataclass(frozen=True)
class ChartHeader:
    name: str
    map_id: str
    bar_per_min: float
    time_offset: float
    left_slide: bool
    right_slide: bool


class Lane(NamedTuple):
    notes: List[Note]
    # latest start among emitted notes, terminus records don't count
    max_start: float


def record_key(raw_id: Any) -> Hashable:
    """Ids are compared by value, "12" and 12 are the same id"""
    as_number = coerce_or_default(raw_id, int, None)
    if as_number is not None:
        return as_number
    elif isinstance(raw_id, str):
        return raw_id
    else:
        return str(raw_id)


def read_lane(records: Iterable[NoteRecord], side: Side) -> Lane:
    """Turn the records of a single lane into notes, hold notes get their
    end from the terminus record their sub_id points to. Holds without a
    matching terminus are kept with a zero length.

    The lookup tables only live for the duration of the call, a terminus
    from another lane can never be matched"""
    notes: List[Note] = []
    terminus_times: Dict[Hashable, float] = {}
    # hold note id -> (index in notes, terminus id)
    holds: Dict[Hashable, Tuple[int, Hashable]] = {}
    max_start = 0.0
    for record in records:
        key = record_key(record.id)
        if record.is_terminus:
            terminus_times[key] = record.time
            continue

        assert record.type is not None
        note = Note.from_raw(
            position=record.position,
            width=record.width,
            side=side,
            type=record.type,
            start=record.time,
        )
        if note.type == NoteType.HOLD:
            if key in holds:
                warnings.warn(
                    f"Several hold notes share the id {key!r} in the {side.name} "
                    "lane, only the last one can get an end time"
                )
            holds[key] = (len(notes), record_key(record.sub_id))

        notes.append(note)
        max_start = max(max_start, note.start)

    for index, terminus_id in holds.values():
        try:
            end = terminus_times[terminus_id]
        except KeyError:
            continue

        note = notes[index]
        notes[index] = replace(note, end=max(note.start, end))

    return Lane(notes=notes, max_start=max_start)


def assemble_chart(
    header: ChartHeader,
    front: Iterable[NoteRecord],
    left: Iterable[NoteRecord],
    right: Iterable[NoteRecord],
) -> Chart:
    lanes = [
        read_lane(front, Side.FRONT),
        read_lane(left, Side.LEFT),
        read_lane(right, Side.RIGHT),
    ]
    return Chart(
        name=header.name,
        map_id=header.map_id,
        notes=tuple(note for lane in lanes for note in lane.notes),
        time=float(math.ceil(max(lane.max_start for lane in lanes))),
        left_slide=header.left_slide,
        right_slide=header.right_slide,
        bar_per_min=header.bar_per_min,
        time_offset=header.time_offset,
    )
