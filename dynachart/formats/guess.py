import xml.etree.ElementTree as ET
from typing import Any, NamedTuple, Optional

import simplejson as json

from .enum import Format


class Detected(NamedTuple):
    """Outcome of format detection : the format and the document parsed
    while probing, so loaders don't have to parse the payload again"""

    format: Format
    document: Any


def detect_format(payload: str) -> Optional[Detected]:
    """Try each format in turn, returns None when none of them fits"""
    try:
        return recognize_json(payload)
    except ValueError:
        pass

    try:
        return recognize_xml(payload)
    except ET.ParseError:
        pass

    return None


def recognize_json(payload: str) -> Detected:
    # simplejson.JSONDecodeError is a ValueError
    obj = json.loads(payload)
    if not isinstance(obj, dict):
        raise ValueError("Top level value is not an object")

    return Detected(Format.JSON, obj)


def recognize_xml(payload: str) -> Detected:
    return Detected(Format.XML, ET.fromstring(payload))
