"""
Hypothesis strategies to generate raw charts, notes and geometries
"""

from itertools import count
from typing import List, Optional

import hypothesis.strategies as st

from dynachart.chart import Note, NoteType, Side
from dynachart.geometry import Borders

from .payloads import CHAIN, HOLD, NORMAL, SUB, RawChart, RawNote
from .typing import DrawFunc


def chart_time(max_bars: int = 64) -> st.SearchStrategy[float]:
    """Multiples of 1/16th, exactly representable as floats and as text"""
    return st.integers(min_value=0, max_value=max_bars * 16).map(lambda i: i / 16)


def lane_position() -> st.SearchStrategy[float]:
    return st.integers(min_value=-20, max_value=70).map(lambda i: i / 10)


def note_width() -> st.SearchStrategy[float]:
    return st.integers(min_value=1, max_value=60).map(lambda i: i / 10)


@st.composite
def raw_note(
    draw: DrawFunc,
    id_strat: st.SearchStrategy[int] = st.integers(min_value=0, max_value=10_000),
    type_strat: st.SearchStrategy[str] = st.sampled_from([NORMAL, CHAIN]),
    sub_id: Optional[int] = None,
) -> RawNote:
    return RawNote(
        id=draw(id_strat),
        type=draw(type_strat),
        time=draw(chart_time()),
        position=draw(lane_position()),
        width=draw(note_width()),
        sub_id=sub_id,
    )


@st.composite
def raw_lane(draw: DrawFunc, max_holds: int = 4) -> List[RawNote]:
    """Taps and chains plus holds that each have their own terminus. Every
    id is unique within the lane"""
    ids = count(draw(st.integers(min_value=0, max_value=10_000)))
    notes: List[RawNote] = draw(
        st.lists(raw_note(id_strat=st.just(0)), max_size=16)
    )
    for n in notes:
        n.id = next(ids)

    for _ in range(draw(st.integers(min_value=0, max_value=max_holds))):
        hold_id, terminus_id = next(ids), next(ids)
        hold: RawNote = draw(raw_note(st.just(hold_id), st.just(HOLD), terminus_id))
        length = draw(chart_time(max_bars=4))
        terminus = RawNote(id=terminus_id, type=SUB, time=hold.time + length)
        # a terminus can come before or after its hold
        index = draw(st.integers(min_value=0, max_value=len(notes)))
        notes.insert(index, hold)
        notes.append(terminus)

    return notes


@st.composite
def raw_chart(draw: DrawFunc) -> RawChart:
    return RawChart(
        name=draw(st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", max_size=12)),
        map_id=draw(st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", max_size=12)),
        bar_per_min=draw(st.integers(min_value=1, max_value=200).map(float)),
        time_offset=draw(chart_time(max_bars=1)),
        left_pad=draw(st.booleans()),
        right_pad=draw(st.booleans()),
        front=draw(raw_lane()),
        left=draw(raw_lane()),
        right=draw(raw_lane()),
    )


@st.composite
def note(draw: DrawFunc) -> Note:
    note_type = draw(st.sampled_from(list(NoteType)))
    start = draw(chart_time())
    if note_type == NoteType.HOLD:
        end: Optional[float] = start + draw(chart_time(max_bars=4))
    else:
        end = None
    return Note.from_raw(
        position=draw(lane_position()),
        width=draw(note_width()),
        side=draw(st.sampled_from(list(Side))),
        type=note_type,
        start=start,
        end=end,
    )


def tenths(low: int, high: int) -> st.SearchStrategy[float]:
    return st.integers(min_value=low, max_value=high).map(lambda i: i / 10)


@st.composite
def borders(draw: DrawFunc) -> Borders:
    """Geometries with a strictly positive width"""
    return Borders(
        center=draw(tenths(0, 50)),
        front_border=draw(tenths(10, 40)),
        front_visible_limit=draw(tenths(10, 50)),
        side_border=draw(tenths(-20, 10)),
        side_visible_cap=draw(tenths(30, 100)),
        side_visible_limit=draw(tenths(-30, 0)),
        side_width_ratio=draw(tenths(1, 10)),
        note_width_bias=draw(tenths(0, 5)),
        note_width_limit=draw(tenths(0, 5)),
    )
