"""A point that drifts around inside a rectangle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from halloween_ninja.sliders import SliderDrift

if TYPE_CHECKING:
    from halloween_ninja.regions import Rect
    from halloween_ninja.rng import Random


class PositionDrifter:
    """Drifts horizontally and vertically between random places in a region."""

    def __init__(self) -> None:
        self._horiz = SliderDrift()
        self._vert = SliderDrift()

    def setup(self, random: Random, region: Rect, speed: tuple[float, float]) -> None:
        """Start drifting inside *region* at speeds drawn from *speed* (low, high)."""
        self._horiz = SliderDrift(random, (region.x, region.right), speed)
        self._horiz.restart(random)
        self._vert = SliderDrift(random, (region.y, region.bottom), speed)
        self._vert.restart(random)

    def position(self) -> tuple[float, float]:
        return (self._horiz.value, self._vert.value)

    def update(self, random: Random, frame_time_sec: float) -> None:
        self._horiz.update(random, frame_time_sec)
        self._vert.update(random, frame_time_sec)