"""Vertical grid of a chart sheet.

The sheet covers a whole number of bars. Vertical positions are percentages
of the sheet height, measured from the bottom (time zero). Column lines are
horizontal ratios straight from the Borders"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from dynachart.geometry import Borders
from dynachart.utils import round_half_up

# row lines closer than this to a bar line are not drawn
ROW_EPSILON = 1e-4
MIN_BAR_PER_MIN = 1e-4


@dataclass(frozen=True)
class TimeLabel:
    bar_index: int
    text: str
    position: float


@dataclass(frozen=True)
class Timeline:
    # amount of chart time covered by the sheet, use it to normalize note
    # descriptors' y and height
    total_time: float
    bar_count: int
    bar_size: float
    row_count: int
    row_size: float
    row_lines: List[float]
    bar_lines: List[float]
    column_lines: Tuple[float, float, float, float]
    labels: List[TimeLabel]
    # distance between the label column and the right side of the sheet
    label_anchor: float


def quantize(
    duration: float,
    borders: Borders,
    bar_interval: float = 2.0,
    row_interval: float = 1 / 16,
    bar_per_min: float = 1.0,
    time_offset: float = 0.0,
) -> Timeline:
    if bar_interval <= 0:
        raise ValueError(f"bar_interval must be strictly positive : {bar_interval}")
    if row_interval <= 0:
        raise ValueError(f"row_interval must be strictly positive : {row_interval}")
    if duration < 0:
        raise ValueError(f"duration cannot be negative : {duration}")

    # an empty chart still gets a single bar
    bar_count = max(1, math.ceil(duration / bar_interval))
    total_time = bar_interval * bar_count
    bar_size = 100 / bar_count
    row_count = math.floor(total_time / row_interval)
    bar_row_ratio = bar_interval / row_interval
    row_size = bar_size / bar_row_ratio

    return Timeline(
        total_time=total_time,
        bar_count=bar_count,
        bar_size=bar_size,
        row_count=row_count,
        row_size=row_size,
        row_lines=[
            i * row_size
            for i in range(row_count)
            if not is_on_bar_line(i, bar_row_ratio)
        ],
        bar_lines=[i * bar_size for i in range(bar_count)],
        column_lines=borders.column_ratios,
        labels=[
            TimeLabel(
                bar_index=i,
                text=format_timestamp(
                    bar_time_ms(i, bar_interval, bar_per_min, time_offset)
                ),
                position=i * bar_size,
            )
            for i in range(bar_count)
        ],
        label_anchor=(1 - borders.left_border_line_ratio) * 100,
    )


def is_on_bar_line(row_index: int, bar_row_ratio: float) -> bool:
    nearest_bar_row = round_half_up(row_index / bar_row_ratio) * bar_row_ratio
    return abs(row_index - nearest_bar_row) < ROW_EPSILON


def bar_time_ms(
    bar_index: int, bar_interval: float, bar_per_min: float, time_offset: float
) -> int:
    """Real time at which the given bar starts, in milliseconds"""
    seconds = bar_index * bar_interval * 60 / max(bar_per_min, MIN_BAR_PER_MIN)
    seconds += time_offset
    return round_half_up(seconds * 1000)


def format_timestamp(time_ms: int) -> str:
    """[HH:]MM:SS.mmm, hours only appear when there are some"""
    sign = "-" if time_ms < 0 else ""
    hours, rest = divmod(abs(time_ms), 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    hours_part = f"{hours:02}:" if hours else ""
    return f"{sign}{hours_part}{minutes:02}:{seconds:02}.{millis:03}"
