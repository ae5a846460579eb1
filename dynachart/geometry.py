"""Geometry of the playfield as drawn on a chart sheet.

The sheet is split in three columns, left lane | front lane | right lane.
The side lanes are drawn mirrored and squeezed by side_width_ratio, the front
lane is drawn at scale 1 in the middle. Every "line" property is an absolute
horizontal position in the same units as note positions, going from
left_cap_line (0) to right_cap_line (the total width). Every "ratio" property
is that line divided by the total width.

    left_cap  left_border  front_left       front_right  right_border  right_cap
       |          |            |                 |            |           |
       |    left lane          |   front lane    |         right lane     |
"""

from dataclasses import dataclass
from typing import Tuple


class GeometryError(ValueError):
    """Raised for a Borders configuration that does not describe a sheet
    with a positive width"""


@dataclass(frozen=True)
class Borders:
    center: float = 2.5
    front_border: float = 2.8
    front_visible_limit: float = 3.2
    side_border: float = -0.2
    side_visible_cap: float = 6.5
    side_visible_limit: float = -1.3
    side_width_ratio: float = 0.5
    note_width_bias: float = 0.1
    note_width_limit: float = 0.2

    def __post_init__(self) -> None:
        if not self.right_cap_line > 0:
            raise GeometryError(
                "Total sheet width must be strictly positive, "
                f"got {self.right_cap_line}"
            )

    @property
    def left_cap_line(self) -> float:
        return 0

    @property
    def left_cap_line_ratio(self) -> float:
        return 0

    @property
    def left_border_line(self) -> float:
        return self.side_width_ratio * (self.side_visible_cap - self.side_border)

    @property
    def left_border_line_ratio(self) -> float:
        return self.left_border_line / self.right_cap_line

    @property
    def front_left_line(self) -> float:
        return self.side_width_ratio * (
            self.side_visible_cap - self.side_visible_limit
        ) + (self.front_visible_limit - self.front_border)

    @property
    def front_left_line_ratio(self) -> float:
        return self.front_left_line / self.right_cap_line

    @property
    def right_cap_line(self) -> float:
        return 2 * (
            self.side_width_ratio * (self.side_visible_cap - self.side_visible_limit)
            + self.front_visible_limit
        )

    @property
    def width(self) -> float:
        return self.right_cap_line

    @property
    def right_cap_line_ratio(self) -> float:
        return 1

    @property
    def right_border_line(self) -> float:
        return self.right_cap_line - self.left_border_line

    @property
    def right_border_line_ratio(self) -> float:
        return self.right_border_line / self.right_cap_line

    @property
    def front_right_line(self) -> float:
        return self.right_cap_line - self.front_left_line

    @property
    def front_right_line_ratio(self) -> float:
        return self.front_right_line / self.right_cap_line

    @property
    def column_ratios(self) -> Tuple[float, float, float, float]:
        """Inner column separators, from left to right"""
        return (
            self.left_border_line_ratio,
            self.front_left_line_ratio,
            self.front_right_line_ratio,
            self.right_border_line_ratio,
        )
