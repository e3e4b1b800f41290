"""
ui/types.py
===========
Lightweight data containers used across every UI module.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

ColorRGB = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]
Point = Tuple[float, float]


@dataclass
class ViewState:
    """Pan / zoom state of the plot: screen position of the logical origin."""
    origin_x: float
    origin_y: float
    scale: float = 80.0
    drag_anchor: Optional[Point] = None


@dataclass(frozen=True)
class VisibleBounds:
    """Logical-plane extent of the viewport."""
    left: float
    right: float
    top: float
    bottom: float


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point


@dataclass(frozen=True)
class Label:
    text: str
    pos: Point


@dataclass(frozen=True)
class ReferencePoint:
    """Fixed annotation on the logical plane."""
    x: float
    y: float
    label: str


@dataclass(frozen=True)
class Marker:
    """A reference point already mapped to screen space."""
    pos: Point
    label: str


class GaugeBand(Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"


@dataclass(frozen=True)
class GaugeVisual:
    """Everything the speedometer needs for one frame."""
    arc_fraction: float
    band: GaugeBand
    needle_angle_deg: float
    needle_end: Point
    speed_text: str


@dataclass
class ButtonRect:
    """Stores a button's screen rect and label for click detection."""
    label: str
    x: int
    y: int
    w: int
    h: int

    def contains(self, mx: int, my: int) -> bool:
        return self.x <= mx <= self.x + self.w and self.y <= my <= self.y + self.h
