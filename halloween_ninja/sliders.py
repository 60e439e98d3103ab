"""Values that slide smoothly with sine motion.

All sliders start moving at their given value, move towards their target on
each update, stop on their own when the target is reached, and stay put after
stop(). An idle slider, built without a speed, never moves.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from halloween_ninja.rng import Random

_TOLERANCE = 1e-9


def is_real_close(a, b) -> bool:
    """Whether two numbers are equal, allowing float rounding error."""
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    return math.isclose(a, b, rel_tol=_TOLERANCE, abs_tol=_TOLERANCE)


def _clamp(value, low, high):
    return max(low, min(value, high))


class SliderRatio:
    """Slides a value from zero to one; fastest when starting at 0.5."""

    RADIANS_FROM = math.pi * 0.5
    RADIANS_TO = math.pi * 1.5

    def __init__(self, speed: float | None = None, start_at: float = 0.0) -> None:
        self.speed = 0.0
        self._value = 0.0
        self._radians = 0.0
        self._is_moving = speed is not None
        if speed is not None:
            self.restart(speed, start_at)

    @property
    def value(self) -> float:
        return self._value

    @property
    def radians(self) -> float:
        return self._radians

    @property
    def is_moving(self) -> bool:
        return self._is_moving

    def stop(self) -> None:
        self._is_moving = False

    def restart(self, speed: float, start_at: float = 0.0) -> None:
        self.speed = speed
        self._value = _clamp(start_at, 0.0, 1.0)
        self._radians = self.RADIANS_FROM + math.pi * self._value
        self.update(0.0)

    def update(self, adjustment: float) -> float:
        if self._is_moving:
            self._radians += adjustment * self.speed
            self._value = _clamp((2.0 - (math.sin(self._radians) + 1.0)) * 0.5, 0.0, 1.0)
            if self._radians > self.RADIANS_TO or is_real_close(self._radians, self.RADIANS_TO):
                self._radians = self.RADIANS_TO
                self._value = 1.0
                self.stop()
        return self._value


class SliderFromTo:
    """Slides a value over [start, end] and then stops."""

    def __init__(self, start=0, end=0, speed: float | None = None) -> None:
        self._start = start
        self._end = end
        self._low = min(start, end)
        self._high = max(start, end)
        self._diff = end - start
        self._integral = isinstance(start, int) and isinstance(end, int)
        self._value = start
        self._slider = SliderRatio(speed)
        self._speed = 0.0 if speed is None else speed

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def value(self):
        return self._value

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, new_speed: float) -> None:
        self._speed = new_speed
        self._slider.speed = new_speed

    @property
    def radians(self) -> float:
        return self._slider.radians

    @property
    def ratio(self) -> float:
        return self._slider.value

    @property
    def is_moving(self) -> bool:
        return self._slider.is_moving

    def stop(self) -> None:
        self._slider.stop()

    def update(self, adjustment: float):
        ratio = self._slider.update(adjustment)
        delta = self._diff * ratio
        if self._integral:
            delta = int(delta)
        self._value = _clamp(self._start + delta, self._low, self._high)
        return self._value


class SliderOscillator:
    """Slides a value back and forth over [start, end]."""

    def __init__(self, start=0, end=0, speed: float | None = None, start_at=None) -> None:
        self._start = start
        self._end = end
        self._slider = SliderFromTo()
        if speed is not None:
            self.restart(start, end, speed, start if start_at is None else start_at)

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def value(self):
        return self._slider.value

    @property
    def radians(self) -> float:
        return self._slider.radians

    @property
    def speed(self) -> float:
        return self._slider.speed

    @speed.setter
    def speed(self, new_speed: float) -> None:
        self._slider.speed = new_speed

    @property
    def is_moving(self) -> bool:
        return self._slider.is_moving

    def stop(self) -> None:
        self._slider.stop()

    def update(self, adjustment: float):
        if self._slider.is_moving:
            self._slider.update(adjustment)
            if not self._slider.is_moving:
                if is_real_close(self._slider.end, self._end):
                    self._slider = SliderFromTo(self._end, self._start, self.speed)
                else:
                    self._slider = SliderFromTo(self._start, self._end, self.speed)
        return self._slider.value

    def restart(self, start, end, speed: float, start_at) -> None:
        self._start = start
        self._end = end
        # starting at the end means starting on the way back
        if is_real_close(start_at, end):
            self._slider = SliderFromTo(end, start, speed)
        else:
            self._slider = SliderFromTo(start_at, end, speed)


class SliderDrift:
    """Slides between random places within a range, at random speeds."""

    def __init__(
        self,
        random: Random | None = None,
        value_range: tuple[float, float] = (0.0, 0.0),
        speed_range: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self._value_range = value_range
        self._speed_range = speed_range
        if random is None:
            self._slider = SliderFromTo(0.0, 0.0)
        else:
            self._slider = SliderFromTo(
                float(random.from_to(*value_range)),
                float(random.from_to(*value_range)),
                float(random.from_to(*speed_range)),
            )

    @property
    def value(self) -> float:
        return self._slider.value

    @property
    def speed(self) -> float:
        return self._slider.speed

    @speed.setter
    def speed(self, new_speed: float) -> None:
        self._slider.speed = new_speed

    @property
    def is_moving(self) -> bool:
        return self._slider.is_moving

    def update(self, random: Random, adjustment: float) -> None:
        self._slider.update(adjustment)
        if not self._slider.is_moving:
            self.restart(random)

    def stop(self) -> None:
        self._slider.stop()

    def ratio(self) -> float:
        """Where the value sits within the value range, as 0..1."""
        low, high = self._value_range
        if is_real_close(low, high):
            return 0.0
        return (self._slider.value - low) / (high - low)

    def restart(self, random: Random) -> None:
        self._slider = SliderFromTo(
            float(self._slider.value),
            float(random.from_to(*self._value_range)),
            float(random.from_to(*self._speed_range)),
        )