"""
Module containing the decoding code for all chart asset formats
"""
from .cmap_json import parse_json
from .cmap_xml import parse_xml
from .decode import parse
from .enum import Format
from .guess import Detected, detect_format
from .loaders import LOADERS
