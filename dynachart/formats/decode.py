from typing import Optional

from dynachart.chart import Chart

from .guess import detect_format
from .loaders import LOADERS


def parse(payload: str) -> Optional[Chart]:
    """Decode a chart asset in any supported format. Returns None if the
    payload is in none of them"""
    detected = detect_format(payload)
    if detected is None:
        return None

    loader = LOADERS[detected.format]
    return loader(detected.document)
