from enum import Enum


class Format(str, Enum):
    JSON = "json"
    XML = "xml"
