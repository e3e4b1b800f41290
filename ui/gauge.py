#!/usr/bin/env python3
"""Speed → speedometer mapping: arc fill, colour band and needle."""

from __future__ import annotations

import math
import random
from typing import Optional

from sim.physics import RandomSource, clamp, round_half_up
from .types import GaugeBand, GaugeVisual, Point

START_ANGLE: float = -135.0
END_ANGLE: float = 135.0
LOW_LIMIT: float = 0.55
MID_LIMIT: float = 0.82
JITTER_FROM: float = 0.97
JITTER_SPAN: float = 1.2        # degrees, peak to peak

NEEDLE_PIVOT: Point = (110.0, 140.0)
NEEDLE_LENGTH: float = 60.0


def band_for(t: float) -> GaugeBand:
    if t < LOW_LIMIT:
        return GaugeBand.LOW
    if t < MID_LIMIT:
        return GaugeBand.MID
    return GaugeBand.HIGH


class GaugeMapper:
    """Maps a speed to a :class:`GaugeVisual`.

    Deterministic apart from the needle flutter near the red line, which
    draws from *rng*.  Call it every frame; results are not cached.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        pivot: Point = NEEDLE_PIVOT,
        needle_length: float = NEEDLE_LENGTH,
    ) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self.pivot = pivot
        self.needle_length = needle_length

    def map(self, speed: float, max_speed: float = 120.0) -> GaugeVisual:
        t = clamp(speed, 0.0, max_speed) / max_speed
        angle = START_ANGLE + (END_ANGLE - START_ANGLE) * t
        if t > JITTER_FROM:
            angle += (self._rng.random() - 0.5) * JITTER_SPAN
        angle = clamp(angle, START_ANGLE, END_ANGLE)

        rad = math.radians(angle)
        cx, cy = self.pivot
        end = (cx + self.needle_length * math.cos(rad),
               cy + self.needle_length * math.sin(rad))

        return GaugeVisual(
            arc_fraction=t,
            band=band_for(t),
            needle_angle_deg=angle,
            needle_end=end,
            speed_text=str(round_half_up(speed)),
        )
