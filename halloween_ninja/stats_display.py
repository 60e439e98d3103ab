"""Layout of a bar graph of a data set: bars, average line and colours."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from halloween_ninja.regions import Rect

BACKGROUND_COLOR = (22, 25, 28)
DATA_BAR_COLOR = (38, 120, 254)
DATA_BAR_COLOR_ERROR = (255, 32, 32)
AVERAGE_LINE_COLOR = (255, 255, 255, 64)
DEFAULT_SIZE = (1000, 500)


def _halve_sum(a, b):
    if isinstance(a, int) and isinstance(b, int):
        total = a + b
        return total // 2 if total >= 0 else -((-total) // 2)
    return (a + b) / 2


def half_size(values: Sequence) -> list:
    """Average neighbouring pairs; an odd last value is kept as it is."""
    it = iter(values)
    result = []
    for a in it:
        b = next(it, None)
        result.append(a if b is None else _halve_sum(a, b))
    return result


def reduce_to_width(values: Sequence, width: int) -> list:
    """Halve the data set until it has no more values than *width*."""
    data = list(values)
    while len(data) > width:
        data = half_size(data)
    return data


def data_bar_width(count: int, width: int) -> float:
    """Whole-pixel width of one bar, at least one."""
    if count == 0:
        return 1.0
    return max(1.0, float(math.floor(width / count)))


def data_bar_rects(values: Sequence, max_value, size: tuple[int, int]) -> list[Rect]:
    """One rectangle per value, side by side, standing on the bottom edge."""
    if max_value <= 0:
        return []
    width, height = size
    bar_width = data_bar_width(len(values), width)
    rects = []
    left = 0.0
    for value in values:
        bar_height = float(height) * (float(value) / float(max_value))
        rects.append(Rect(left, float(height) - bar_height, bar_width, bar_height))
        left += bar_width
    return rects


def average_line_height(average, max_value, height: int) -> Optional[float]:
    """Vertical position of the average line, or None when there is no positive maximum."""
    if not max_value > 0:
        return None
    magnitude = math.floor(float(average) * float(height) / float(max_value))
    return float(height) - magnitude


class GraphLayout:
    """Everything needed to draw a bar graph of *data* into *size* (width, height)."""

    def __init__(self, data: Sequence, size: tuple[int, int] = DEFAULT_SIZE) -> None:
        self.size = (int(size[0]), int(size[1]))
        original = list(data)
        self.data = reduce_to_width(original, self.size[0])
        self.was_dataset_changed = len(original) != len(self.data)

        self.count = len(self.data)
        self.max = max(self.data) if self.data else 0
        self.min = min(self.data) if self.data else 0
        self.average = sum(self.data) / self.count if self.count else 0

        self.bar_rects = data_bar_rects(self.data, self.max, self.size)
        self.data_width = int(self.bar_rects[-1].right) if self.bar_rects else 0
        self.bar_color = DATA_BAR_COLOR_ERROR if self.was_dataset_changed else DATA_BAR_COLOR
        self.average_line = (
            average_line_height(self.average, self.max, self.size[1]) if self.count else None
        )

    @property
    def outlined(self) -> bool:
        """Whether bars are wide enough to get a dark outline."""
        return bool(self.bar_rects) and self.bar_rects[0].width > 4.0