"""Time-driven alpha fading."""

from __future__ import annotations

import time

__all__ = ["DEFAULT_FADE_MILLIS", "Fadable", "FadableRect"]

DEFAULT_FADE_MILLIS = 1000


def _now_millis() -> int:
    return time.monotonic_ns() // 1_000_000


class Fadable:
    """An alpha value that fades between 0 and 1 over a set duration.

    Call ``fade_in`` or ``fade_out`` to start a fade, then ``update_fade``
    regularly with the current time in milliseconds to advance it.
    """

    def __init__(self, fade_millis: int = DEFAULT_FADE_MILLIS) -> None:
        self.alpha = 1.0
        self.fade_millis = fade_millis
        self._begin = False
        self._fading_in = False
        self._fading_out = False
        self._start_time = 0
        self._end_time = 0

    @property
    def fading_in(self) -> bool:
        return self._fading_in

    @property
    def fading_out(self) -> bool:
        return self._fading_out

    @property
    def fade_seconds(self) -> float:
        return self.fade_millis * 0.001

    @fade_seconds.setter
    def fade_seconds(self, seconds: float) -> None:
        self.fade_millis = int(seconds * 1000.0)

    def update_fade(self, current_time: int | None = None) -> None:
        """Advance the fade to ``current_time`` (milliseconds; now if omitted)."""
        if current_time is None:
            current_time = _now_millis()

        if self._begin:
            self._begin = False
            self._start_time = current_time
            if self._fading_in:
                remaining = int((1.0 - self.alpha) * self.fade_millis)
            else:
                remaining = int(self.alpha * self.fade_millis)
            self._end_time = current_time + remaining
            if self._end_time == current_time:
                if self._fading_in:
                    self._fading_in = False
                    self.alpha = 1.0
                else:
                    self._fading_out = False
                    self.alpha = 0.0

        if self._fading_in:
            if current_time > self._end_time:
                self._fading_in = False
                self.alpha = 1.0
            else:
                self.alpha = 1.0 - (self._end_time - current_time) / self.fade_millis
        elif self._fading_out:
            if current_time > self._end_time:
                self._fading_out = False
                self.alpha = 0.0
            else:
                self.alpha = (self._end_time - current_time) / self.fade_millis

    def fade_in(self) -> None:
        """Start fading towards fully opaque, unless already there or on the way."""
        if self._fading_in or self.alpha == 1.0:
            return
        self._begin = True
        self._fading_in = True
        self._fading_out = False

    def fade_out(self) -> None:
        """Start fading towards fully transparent, unless already there or on the way."""
        if self._fading_out or self.alpha == 0.0:
            return
        self._begin = True
        self._fading_out = True
        self._fading_in = False

    def stop_fade(self) -> None:
        """Halt any fade, leaving alpha where it is."""
        self._begin = self._fading_in = self._fading_out = False


class FadableRect(Fadable):
    """A fadable rectangle with a unit-range RGB colour."""

    def __init__(self, fade_millis: int = DEFAULT_FADE_MILLIS) -> None:
        super().__init__(fade_millis)
        self.r = self.g = self.b = 1.0

    def set_color(self, r: int, g: int, b: int) -> None:
        """Set the colour from 0..255 components."""
        self.set_unit_color(r / 255.0, g / 255.0, b / 255.0)

    def set_unit_color(self, r: float, g: float, b: float) -> None:
        """Set the colour from 0..1 components."""
        self.r, self.g, self.b = r, g, b

    @property
    def color(self) -> tuple[float, float, float, float]:
        """The colour with the current alpha, as ``(r, g, b, a)``."""
        return (self.r, self.g, self.b, self.alpha)

    @property
    def visible(self) -> bool:
        """Whether drawing would show anything."""
        return self.alpha > 0.0