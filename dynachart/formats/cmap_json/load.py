from typing import Any, List

import simplejson as json

from dynachart.chart import Chart, NoteType
from dynachart.formats.load_tools import (
    DEFAULT_ID,
    DEFAULT_POSITION,
    DEFAULT_SUB_ID,
    DEFAULT_TIME,
    DEFAULT_WIDTH,
    ChartHeader,
    NoteRecord,
    assemble_chart,
)
from dynachart.utils import coerce_or_default

DEFAULT_BAR_PER_MIN = 1.0
DEFAULT_TIME_OFFSET = 0.0
DEFAULT_REGION = 2
PAD_REGION = 1

DEFAULT_TYPE = 0
TERMINUS_TYPE = 3
NOTE_TYPES = {
    1: NoteType.CHAIN,
    2: NoteType.HOLD,
}


def parse_json(payload: str) -> Chart:
    return load_cmap_json(json.loads(payload))


def load_cmap_json(document: Any) -> Chart:
    header = load_header(document)
    return assemble_chart(
        header,
        front=load_lane(document, "m_notes"),
        left=load_lane(document, "m_notesLeft"),
        right=load_lane(document, "m_notesRight"),
    )


def safe_get(obj: Any, key: str, default: Any) -> Any:
    if isinstance(obj, dict):
        return obj.get(key, default)
    else:
        return default


def safe_get_str(obj: Any, key: str) -> str:
    value = safe_get(obj, key, "")
    return value if isinstance(value, str) else ""


def load_header(document: Any) -> ChartHeader:
    left_region = coerce_or_default(
        safe_get(document, "m_leftRegion", ""), int, DEFAULT_REGION
    )
    right_region = coerce_or_default(
        safe_get(document, "m_rightRegion", ""), int, DEFAULT_REGION
    )
    return ChartHeader(
        name=safe_get_str(document, "m_Name"),
        map_id=safe_get_str(document, "m_mapID"),
        bar_per_min=coerce_or_default(
            safe_get(document, "m_barPerMin", ""), float, DEFAULT_BAR_PER_MIN
        ),
        time_offset=coerce_or_default(
            safe_get(document, "m_timeOffset", ""), float, DEFAULT_TIME_OFFSET
        ),
        left_slide=left_region == PAD_REGION,
        right_slide=right_region == PAD_REGION,
    )


def load_lane(document: Any, tag: str) -> List[NoteRecord]:
    container = safe_get(document, tag, None)
    raw_notes = safe_get(container, "m_notes", None)
    if not isinstance(raw_notes, list):
        return []

    return [load_record(n) for n in raw_notes]


def load_record(raw: Any) -> NoteRecord:
    type_code = coerce_or_default(safe_get(raw, "m_type", ""), int, DEFAULT_TYPE)
    if type_code == TERMINUS_TYPE:
        type_ = None
    else:
        type_ = NOTE_TYPES.get(type_code, NoteType.NORMAL)

    return NoteRecord(
        id=safe_get(raw, "m_id", DEFAULT_ID),
        type=type_,
        time=coerce_or_default(safe_get(raw, "m_time", ""), float, DEFAULT_TIME),
        position=coerce_or_default(
            safe_get(raw, "m_position", ""), float, DEFAULT_POSITION
        ),
        width=coerce_or_default(safe_get(raw, "m_width", ""), float, DEFAULT_WIDTH),
        sub_id=coerce_or_default(safe_get(raw, "m_subId", ""), int, DEFAULT_SUB_ID),
    )
