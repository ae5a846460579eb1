import xml.etree.ElementTree as ET
from typing import List, Optional

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
from dynachart.utils import coerce_or_default, none_or

DEFAULT_BAR_PER_MIN = 1.0
DEFAULT_TIME_OFFSET = 1.0
DEFAULT_REGION = "multi"
PAD_REGION = "pad"

DEFAULT_TYPE = "normal"
TERMINUS_TYPE = "sub"
NOTE_TYPES = {
    "chain": NoteType.CHAIN,
    "hold": NoteType.HOLD,
}


def parse_xml(payload: str) -> Chart:
    return load_cmap_xml(ET.fromstring(payload))


def load_cmap_xml(root: ET.Element) -> Chart:
    header = load_header(root)
    return assemble_chart(
        header,
        front=load_lane(root, "m_notes"),
        left=load_lane(root, "m_notesLeft"),
        right=load_lane(root, "m_notesRight"),
    )


def find_first(element: ET.Element, tag: str) -> Optional[ET.Element]:
    """First element with the given tag among all the descendants of element,
    in document order"""
    return element.find(f".//{tag}")


def text_content(element: ET.Element) -> str:
    return "".join(element.itertext())


def find_text(element: ET.Element, tag: str, default: str) -> str:
    text = none_or(text_content, find_first(element, tag))
    return default if text is None else text


def load_header(root: ET.Element) -> ChartHeader:
    left_region = find_text(root, "m_leftRegion", DEFAULT_REGION)
    right_region = find_text(root, "m_rightRegion", DEFAULT_REGION)
    return ChartHeader(
        name=find_text(root, "m_path", ""),
        map_id=find_text(root, "m_mapID", ""),
        bar_per_min=coerce_or_default(
            find_text(root, "m_barPerMin", ""), float, DEFAULT_BAR_PER_MIN
        ),
        time_offset=coerce_or_default(
            find_text(root, "m_timeOffset", ""), float, DEFAULT_TIME_OFFSET
        ),
        left_slide=left_region.lower() == PAD_REGION,
        right_slide=right_region.lower() == PAD_REGION,
    )


def load_lane(root: ET.Element, tag: str) -> List[NoteRecord]:
    container = find_first(root, tag)
    if container is None:
        return []

    # <m_notesLeft><m_notes><CMapNoteAsset/>...</m_notes></m_notesLeft>
    note_list = find_first(container, "m_notes")
    if note_list is None:
        return []

    return [load_record(n) for n in note_list.iter("CMapNoteAsset")]


def load_record(element: ET.Element) -> NoteRecord:
    type_name = find_text(element, "m_type", DEFAULT_TYPE).lower()
    if type_name == TERMINUS_TYPE:
        type_ = None
    else:
        type_ = NOTE_TYPES.get(type_name, NoteType.NORMAL)

    return NoteRecord(
        id=find_text(element, "m_id", DEFAULT_ID),
        type=type_,
        time=coerce_or_default(find_text(element, "m_time", ""), float, DEFAULT_TIME),
        position=coerce_or_default(
            find_text(element, "m_position", ""), float, DEFAULT_POSITION
        ),
        width=coerce_or_default(
            find_text(element, "m_width", ""), float, DEFAULT_WIDTH
        ),
        sub_id=coerce_or_default(
            find_text(element, "m_subId", str(DEFAULT_SUB_ID)), int, DEFAULT_SUB_ID
        ),
    )
