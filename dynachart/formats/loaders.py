from typing import Dict

from .cmap_json import load_cmap_json
from .cmap_xml import load_cmap_xml
from .enum import Format
from .typing import Loader

LOADERS: Dict[Format, Loader] = {
    Format.JSON: load_cmap_json,
    Format.XML: load_cmap_xml,
}
