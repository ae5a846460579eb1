"""Provides the Chart class, the central model of a decoded chart asset
Both input formats are converted to a Chart instance
Everything the layout code computes is derived from a Chart instance

Times are stored as raw chart time units (bars), positions and widths as
lane-local units"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple


# int is here to allow sorting
class Side(int, Enum):
    LEFT = -1
    FRONT = 0
    RIGHT = 1


# Ordinals matter : canonical note order is by descending type value
class NoteType(int, Enum):
    CHAIN = 0
    NORMAL = 1
    HOLD = 2


@dataclass(frozen=True)
class Note:
    """A playable note. position is the note's center in lane-local units"""

    position: float
    width: float
    side: Side
    type: NoteType
    start: float
    end: float

    @classmethod
    def from_raw(
        cls,
        position: float,
        width: float = 1.0,
        side: Side = Side.FRONT,
        type: NoteType = NoteType.CHAIN,
        start: float = 0.0,
        end: Optional[float] = None,
    ) -> Note:
        """Chart assets store the left edge of the note, convert it to the
        center. An end before the start is clamped to the start"""
        return cls(
            position=position + width / 2,
            width=width,
            side=side,
            type=type,
            start=start,
            end=start if end is None else max(start, end),
        )

    @property
    def duration(self) -> float:
        return self.end - self.start


def note_sort_key(note: Note) -> Tuple[int, float]:
    return (-note.type, note.start)


def sorted_notes(notes: Iterable[Note]) -> List[Note]:
    """Holds first, then normal notes, then chains, each group by start
    time"""
    return sorted(notes, key=note_sort_key)


@dataclass(frozen=True)
class Chart:
    name: str = ""
    map_id: str = ""
    notes: Tuple[Note, ...] = field(default_factory=tuple)
    # ceiling of the latest note *start*, hold tails are not accounted for
    time: float = 0.0
    left_slide: bool = False
    right_slide: bool = False
    bar_per_min: float = 0.0
    time_offset: float = 0.0

    def notes_on(self, side: Side) -> List[Note]:
        return [n for n in self.notes if n.side == side]
