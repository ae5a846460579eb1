from hypothesis import given

from dynachart.chart import Chart, NoteType
from dynachart.formats import parse
from dynachart.testutils import strategies as dcst
from dynachart.testutils.payloads import (
    HOLD,
    SUB,
    RawChart,
    RawNote,
    to_json,
    to_xml,
)


def parse_or_fail(payload: str) -> Chart:
    chart = parse(payload)
    assert chart is not None
    return chart


@given(dcst.raw_chart())
def test_that_decoding_twice_gives_the_same_chart(raw: RawChart) -> None:
    for payload in (to_json(raw), to_xml(raw)):
        assert parse_or_fail(payload) == parse_or_fail(payload)


@given(dcst.raw_chart())
def test_that_both_formats_decode_to_the_same_chart(raw: RawChart) -> None:
    from_json = parse_or_fail(to_json(raw))
    from_xml = parse_or_fail(to_xml(raw))
    assert from_xml == from_json


@given(dcst.raw_chart())
def test_that_holds_end_on_their_terminus(raw: RawChart) -> None:
    chart = parse_or_fail(to_json(raw))
    expected_ends = []
    for lane in (raw.front, raw.left, raw.right):
        terminus_times = {n.id: n.time for n in lane if n.type == SUB}
        for n in lane:
            if n.type == HOLD:
                expected_ends.append(terminus_times[n.sub_id])
            elif n.type != SUB:
                expected_ends.append(n.time)

    assert [n.end for n in chart.notes] == expected_ends
    assert all(n.end >= n.start for n in chart.notes)


@given(dcst.raw_chart())
def test_that_terminus_records_are_not_notes(raw: RawChart) -> None:
    chart = parse_or_fail(to_xml(raw))
    expected = sum(
        1 for lane in (raw.front, raw.left, raw.right) for n in lane if n.type != SUB
    )
    assert len(chart.notes) == expected


def test_that_a_hold_pointing_to_another_terminus_has_zero_length() -> None:
    raw = RawChart(
        front=[
            RawNote(id=1, type=HOLD, time=2.0),
            RawNote(id=2, type=SUB, time=4.0),
        ]
    )
    chart = parse_or_fail(to_xml(raw))
    [note] = chart.notes
    assert note.type == NoteType.HOLD
    assert note.start == 2.0
    assert note.end == 2.0


def test_that_hold_tails_are_not_counted_in_chart_time() -> None:
    raw = RawChart(
        front=[
            RawNote(id=1, type=HOLD, time=1.5, sub_id=2),
            RawNote(id=2, type=SUB, time=6.0),
        ],
        right=[RawNote(id=1, time=2.5)],
    )
    for payload in (to_json(raw), to_xml(raw)):
        chart = parse_or_fail(payload)
        assert chart.time == 3.0
        assert max(n.end for n in chart.notes) == 6.0
