from .chart import Chart, Note, NoteType, Side
from .formats import parse
from .geometry import Borders, GeometryError
from .painter import Painter, Sheet
from .version import __version__
