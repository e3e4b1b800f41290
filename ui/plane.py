"""
ui/plane.py
===========
Pure geometry for the policy plot: grid lines, axes, integer labels, the
decision-boundary polyline and the reference points.  Everything here
reads a :class:`~ui.view_transform.ViewTransform` and returns screen-space
data; nothing draws.

Grid and label generation is bounded to the integers inside the visible
bounds so the work stays proportional to what is on screen.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np

from sim.policy_catalog import Policy
from .types import Label, Marker, Point, ReferencePoint, Segment, VisibleBounds
from .view_transform import ViewTransform

BOUNDARY_X_MIN: float = -50.0
BOUNDARY_X_MAX: float = 50.0
BOUNDARY_STEP: float = 0.1

REFERENCE_POINTS: Tuple[ReferencePoint, ...] = (
    ReferencePoint(0.0, 1.0, "(far, fast)"),
    ReferencePoint(1.0, 1.0, "(near, fast)"),
    ReferencePoint(0.0, 0.0, "(far, slow)"),
    ReferencePoint(1.0, 0.0, "(near, slow)"),
)


def _check_viewport(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"viewport must be positive, got {width}x{height}")


def integer_range(low: float, high: float) -> range:
    """Integers ``floor(low) .. n <= high``."""
    return range(math.floor(low), math.floor(high) + 1)


def grid_lines(
    transform: ViewTransform, width: float, height: float
) -> Tuple[List[Segment], VisibleBounds]:
    """Vertical and horizontal unit grid lines covering the viewport."""
    _check_viewport(width, height)
    bounds = transform.visible_bounds(width, height)
    ox, oy = transform.origin
    scale = transform.scale

    lines: List[Segment] = []
    for x in integer_range(bounds.left, bounds.right):
        px = ox + x * scale
        lines.append(Segment((px, 0.0), (px, float(height))))
    for y in integer_range(bounds.bottom, bounds.top):
        py = oy - y * scale
        lines.append(Segment((0.0, py), (float(width), py)))
    return lines, bounds


def axes(transform: ViewTransform, width: float, height: float) -> List[Segment]:
    """The x and y axes through the screen origin."""
    ox, oy = transform.origin
    return [
        Segment((0.0, oy), (float(width), oy)),
        Segment((ox, 0.0), (ox, float(height))),
    ]


def axis_labels(transform: ViewTransform, bounds: VisibleBounds) -> List[Label]:
    """Integer tick labels along both axes for the visible range."""
    ox, oy = transform.origin
    scale = transform.scale
    labels = [
        Label(str(x), (ox + x * scale + 2, oy - 4))
        for x in integer_range(bounds.left, bounds.right)
    ]
    labels.extend(
        Label(str(y), (ox + 4, oy - y * scale - 2))
        for y in integer_range(bounds.bottom, bounds.top)
    )
    return labels


def boundary_samples() -> np.ndarray:
    count = int(round((BOUNDARY_X_MAX - BOUNDARY_X_MIN) / BOUNDARY_STEP)) + 1
    return np.linspace(BOUNDARY_X_MIN, BOUNDARY_X_MAX, count)


def decision_line(transform: ViewTransform, policy: Policy) -> List[Point]:
    """Screen polyline of ``y = slope * x + intercept`` over x in [-50, 50]."""
    xs = boundary_samples()
    ys = policy.slope * xs + policy.intercept
    pxs, pys = transform.to_screen_many(xs, ys)
    return list(zip(pxs.tolist(), pys.tolist()))


def reference_markers(transform: ViewTransform) -> List[Marker]:
    return [Marker(transform.to_screen(p.x, p.y), p.label) for p in REFERENCE_POINTS]
