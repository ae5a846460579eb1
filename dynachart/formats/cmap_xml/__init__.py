"""Xml flavor of the CMap chart asset. Every value is the text content of an
element, note types and region modes are written out as words ("hold",
"pad" ...)"""

from .load import load_cmap_xml, parse_xml
