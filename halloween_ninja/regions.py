"""Rectangles and the fixed screen layout of the game window."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def floored(self) -> Rect:
        """Return a copy with every coordinate rounded down to a whole number."""
        return Rect(
            float(math.floor(self.x)),
            float(math.floor(self.y)),
            float(math.floor(self.width)),
            float(math.floor(self.height)),
        )

    def _span(self) -> tuple[float, float, float, float]:
        left, right = sorted((self.x, self.right))
        top, bottom = sorted((self.y, self.bottom))
        return left, top, right, bottom

    def intersects(self, other: Rect) -> bool:
        """Whether the two rectangles overlap by a non-empty area."""
        left1, top1, right1, bottom1 = self._span()
        left2, top2, right2, bottom2 = other._span()
        return max(left1, left2) < min(right1, right2) and max(top1, top2) < min(
            bottom1, bottom2
        )


class ScreenRegions:
    """Splits the window into an info bar along the top and the map below it."""

    INFO_HEIGHT_RATIO = 0.075

    def __init__(self) -> None:
        self._whole_size = (0.0, 0.0)
        self._whole_region = Rect()
        self._map_region = Rect()
        self._info_region = Rect()

    @property
    def whole_size(self) -> tuple[float, float]:
        return self._whole_size

    @property
    def whole_region(self) -> Rect:
        return self._whole_region

    @property
    def map_region(self) -> Rect:
        return self._map_region

    @property
    def info_region(self) -> Rect:
        return self._info_region

    def setup(self, window_size: tuple[int, int]) -> None:
        """Lay the regions out for a window of *window_size* (width, height)."""
        width, height = (float(v) for v in window_size)
        self._whole_size = (width, height)
        self._whole_region = Rect(0.0, 0.0, width, height)

        self._info_region = Rect(0.0, 0.0, width, height * self.INFO_HEIGHT_RATIO).floored()

        map_top = self._info_region.height + 1.0
        self._map_region = Rect(0.0, map_top, width, height - map_top).floored()