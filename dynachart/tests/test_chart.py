from hypothesis import given
from hypothesis import strategies as st

from dynachart.chart import Chart, Note, NoteType, Side, note_sort_key, sorted_notes
from dynachart.testutils import strategies as dcst


def test_that_position_is_stored_as_the_center() -> None:
    note = Note.from_raw(position=2.0, width=1.5)
    assert note.position == 2.75
    assert note.width == 1.5


def test_that_a_missing_end_means_a_zero_length_note() -> None:
    note = Note.from_raw(position=0, type=NoteType.HOLD, start=3.0)
    assert note.end == 3.0
    assert note.duration == 0


def test_that_an_end_before_the_start_is_clamped() -> None:
    note = Note.from_raw(position=0, type=NoteType.HOLD, start=3.0, end=1.0)
    assert note.end == 3.0


@given(dcst.note())
def test_that_end_is_never_before_start(note: Note) -> None:
    assert note.end >= note.start


def test_canonical_order() -> None:
    chain = Note.from_raw(0, type=NoteType.CHAIN, start=0.0)
    late_normal = Note.from_raw(0, type=NoteType.NORMAL, start=2.0)
    early_normal = Note.from_raw(0, type=NoteType.NORMAL, start=1.0)
    hold = Note.from_raw(0, type=NoteType.HOLD, start=5.0, end=6.0)
    notes = [chain, late_normal, early_normal, hold]
    assert sorted_notes(notes) == [hold, early_normal, late_normal, chain]


@given(st.lists(dcst.note()))
def test_that_canonical_order_does_not_depend_on_input_order(notes: list) -> None:
    forward = [note_sort_key(n) for n in sorted_notes(notes)]
    backward = [note_sort_key(n) for n in sorted_notes(reversed(notes))]
    assert forward == backward


def test_notes_on_side() -> None:
    left = Note.from_raw(0, side=Side.LEFT)
    front = Note.from_raw(0, side=Side.FRONT)
    chart = Chart(notes=(left, front))
    assert chart.notes_on(Side.LEFT) == [left]
    assert chart.notes_on(Side.RIGHT) == []
