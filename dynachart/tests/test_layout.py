import pytest
from hypothesis import given

from dynachart.chart import Note, NoteType, Side
from dynachart.geometry import Borders
from dynachart.layout import effective_width, place_note, project_note, project_notes
from dynachart.testutils import strategies as dcst

BORDERS = Borders()


@given(dcst.note(), dcst.borders())
def test_that_drawn_width_is_never_below_the_limit(note: Note, b: Borders) -> None:
    assert effective_width(note, b) >= b.note_width_limit


@pytest.mark.parametrize(
    "width, expected",
    [(1.0, 0.9), (0.25, 0.2), (0.1, 0.2), (0.05, 0.2), (3.0, 2.9)],
)
def test_effective_width(width: float, expected: float) -> None:
    note = Note.from_raw(position=0, width=width)
    assert effective_width(note, BORDERS) == pytest.approx(expected)


def test_front_note() -> None:
    note = Note.from_raw(position=2.0, width=1.0, side=Side.FRONT, type=NoteType.NORMAL)
    d = project_note(note, BORDERS)
    assert d.type == NoteType.NORMAL
    assert d.x == pytest.approx((7.1 + 2.0 - 2.5) / 14.2)
    assert d.width == pytest.approx(0.9 / 14.2)
    assert d.height is None


def test_that_a_centered_front_note_is_centered_on_the_sheet() -> None:
    note = Note.from_raw(position=2.0, width=1.0, side=Side.FRONT)
    d = project_note(note, BORDERS)
    # left edge of the unbiased note sits half a width left of the middle
    assert d.x + 0.5 / BORDERS.width == pytest.approx(0.5)


def test_side_notes_are_squeezed() -> None:
    left = project_note(Note.from_raw(position=2.5, side=Side.LEFT), BORDERS)
    right = project_note(Note.from_raw(position=2.5, side=Side.RIGHT), BORDERS)
    assert left.x == pytest.approx(0.5 * (6.5 - 3.5) / 14.2)
    assert right.x == pytest.approx((14.2 - 0.5 * (6.5 - 2.5)) / 14.2)
    assert left.width == right.width == pytest.approx(0.5 * 0.9 / 14.2)


@given(dcst.borders())
def test_that_side_lanes_are_mirror_images(b: Borders) -> None:
    """Same raw note on both side lanes : the left one's left edge mirrors the
    right one's right edge around the middle of the sheet"""
    left_note = Note.from_raw(position=2.5, width=1.0, side=Side.LEFT)
    right_note = Note.from_raw(position=2.5, width=1.0, side=Side.RIGHT)
    left = project_note(left_note, b)
    right = project_note(right_note, b)
    lane_width = b.side_width_ratio * 1.0 / b.width
    assert 0.5 - left.x == pytest.approx((right.x + lane_width) - 0.5)


def test_hold_height() -> None:
    note = Note.from_raw(position=0, type=NoteType.HOLD, start=1.0, end=2.5)
    d = project_note(note, BORDERS)
    assert d.y == 1.0
    assert d.height == 1.5


def test_that_zero_length_holds_have_a_zero_height() -> None:
    note = Note.from_raw(position=0, type=NoteType.HOLD, start=1.0)
    assert project_note(note, BORDERS).height == 0


def test_that_descriptors_keep_note_order() -> None:
    notes = [Note.from_raw(position=0, start=t) for t in (3.0, 1.0, 2.0)]
    assert [d.y for d in project_notes(notes, BORDERS)] == [3.0, 1.0, 2.0]


def test_note_placement() -> None:
    note = Note.from_raw(position=2.0, type=NoteType.HOLD, start=1.0, end=3.0)
    d = project_note(note, BORDERS)
    p = place_note(d, total_time=4.0, row_interval=1 / 16)
    assert p.left == pytest.approx(100 * d.x)
    assert p.width == pytest.approx(100 * d.width)
    assert p.bottom == pytest.approx(25)
    assert p.height == pytest.approx(50)


def test_that_zero_length_holds_are_placed_a_quarter_row_tall() -> None:
    note = Note.from_raw(position=2.0, type=NoteType.HOLD, start=1.0)
    p = place_note(project_note(note, BORDERS), total_time=2.0, row_interval=1 / 16)
    assert p.height == pytest.approx(100 * (1 / 64) / 2)


def test_that_taps_have_no_placement_height() -> None:
    note = Note.from_raw(position=2.0, type=NoteType.CHAIN, start=1.0)
    assert place_note(project_note(note, BORDERS), 2.0, 1 / 16).height is None
