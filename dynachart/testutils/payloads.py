"""Writers for both chart asset formats, tests use them to build payloads
out of the same raw description"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import simplejson as json

# raw type names, as found in xml files
NORMAL = "normal"
CHAIN = "chain"
HOLD = "hold"
SUB = "sub"

JSON_TYPE_CODES = {NORMAL: 0, CHAIN: 1, HOLD: 2, SUB: 3}


@dataclass
class RawNote:
    id: int
    type: str = NORMAL
    time: float = 0.0
    position: float = 2.5
    width: float = 1.0
    sub_id: Optional[int] = None


@dataclass
class RawChart:
    name: str = "song"
    map_id: str = "_map_song_H"
    bar_per_min: float = 60.0
    time_offset: float = 0.5
    left_pad: bool = False
    right_pad: bool = False
    front: List[RawNote] = field(default_factory=list)
    left: List[RawNote] = field(default_factory=list)
    right: List[RawNote] = field(default_factory=list)


LANE_TAGS = ("m_notes", "m_notesLeft", "m_notesRight")


def _lanes(chart: RawChart) -> Sequence[List[RawNote]]:
    return (chart.front, chart.left, chart.right)


def json_note(note: RawNote) -> Dict[str, Any]:
    res: Dict[str, Any] = {
        "m_id": note.id,
        "m_type": JSON_TYPE_CODES[note.type],
        "m_time": note.time,
        "m_position": note.position,
        "m_width": note.width,
    }
    if note.sub_id is not None:
        res["m_subId"] = note.sub_id
    return res


def to_json(chart: RawChart) -> str:
    obj: Dict[str, Any] = {
        "m_Name": chart.name,
        "m_mapID": chart.map_id,
        "m_barPerMin": chart.bar_per_min,
        "m_timeOffset": chart.time_offset,
        "m_leftRegion": 1 if chart.left_pad else 2,
        "m_rightRegion": 1 if chart.right_pad else 2,
    }
    for tag, notes in zip(LANE_TAGS, _lanes(chart)):
        obj[tag] = {"m_notes": [json_note(n) for n in notes]}
    return json.dumps(obj, indent=2)


def _sub_element(parent: ET.Element, tag: str, text: Any) -> None:
    ET.SubElement(parent, tag).text = str(text)


def xml_note(parent: ET.Element, note: RawNote) -> None:
    element = ET.SubElement(parent, "CMapNoteAsset")
    _sub_element(element, "m_id", note.id)
    _sub_element(element, "m_type", note.type.upper())
    _sub_element(element, "m_time", note.time)
    _sub_element(element, "m_position", note.position)
    _sub_element(element, "m_width", note.width)
    if note.sub_id is not None:
        _sub_element(element, "m_subId", note.sub_id)


def to_xml(chart: RawChart) -> str:
    root = ET.Element("CMap")
    _sub_element(root, "m_path", chart.name)
    _sub_element(root, "m_barPerMin", chart.bar_per_min)
    _sub_element(root, "m_timeOffset", chart.time_offset)
    _sub_element(root, "m_leftRegion", "PAD" if chart.left_pad else "MULTI")
    _sub_element(root, "m_rightRegion", "PAD" if chart.right_pad else "MULTI")
    _sub_element(root, "m_mapID", chart.map_id)
    for tag, notes in zip(LANE_TAGS, _lanes(chart)):
        note_list = ET.SubElement(ET.SubElement(root, tag), "m_notes")
        for note in notes:
            xml_note(note_list, note)
    return ET.tostring(root, encoding="unicode")
