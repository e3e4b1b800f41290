#!/usr/bin/env python3
"""
sim/physics.py
==============
Low-level kinematic helpers used by :mod:`sim.braking` and :mod:`ui.gauge`.

Keeping these in a separate module avoids circular imports and makes unit
testing straightforward.
"""

from __future__ import annotations

import math
from typing import Protocol


class RandomSource(Protocol):
    """Anything exposing ``random() -> float`` in ``[0, 1)``.

    :class:`random.Random` satisfies this; tests substitute a fixed
    sequence to make resets and needle jitter deterministic.
    """

    def random(self) -> float: ...


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into ``[low, high]``."""
    return max(low, min(value, high))


def stopping_distance(speed: float, divisor: float = 220.0) -> float:
    """Speed-squared stopping heuristic.

    Parameters
    ----------
    speed : float
        Current speed in display units (0–120).
    divisor : float
        Tuning constant; 220 gives roughly 65 px of lead at full speed.

    Returns
    -------
    float
        Distance in road pixels the car should reserve for braking.
    """
    return (speed * speed) / divisor


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (gauge readout)."""
    return int(math.floor(value + 0.5))
