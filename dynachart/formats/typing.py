from typing import Any, Protocol

from dynachart.chart import Chart


class Loader(Protocol):
    """A Loader turns the document produced by format detection (a parsed
    json value or an xml element) into a Chart object. Loaders never fail on
    malformed fields, they use default values instead"""

    def __call__(self, document: Any) -> Chart:
        ...
