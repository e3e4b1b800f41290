#!/usr/bin/env python3
"""
ui/view_transform.py
====================
Affine mapping between the unbounded logical plane of the policy plot and
the finite plot panel.  The logical y-axis points up, the screen y-axis
points down.

Zoom is anchored at the screen position of the logical origin, not at the
pointer.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from sim.physics import clamp
from .types import Point, ViewState, VisibleBounds

log = logging.getLogger("view")

MIN_SCALE: float = 20.0
MAX_SCALE: float = 300.0
ZOOM_OUT_FACTOR: float = 0.9
ZOOM_IN_FACTOR: float = 1.1


class ViewTransform:
    """Owns a :class:`ViewState` and exposes the pan / zoom operations."""

    def __init__(
        self,
        origin_x: float,
        origin_y: float,
        scale: float = 80.0,
    ) -> None:
        self.state = ViewState(
            origin_x=origin_x,
            origin_y=origin_y,
            scale=clamp(scale, MIN_SCALE, MAX_SCALE),
        )

    @property
    def scale(self) -> float:
        return self.state.scale

    @property
    def origin(self) -> Point:
        return self.state.origin_x, self.state.origin_y

    # ── Mapping ───────────────────────────────────────────────────────────────

    def to_screen(self, x: float, y: float) -> Point:
        s = self.state
        return s.origin_x + x * s.scale, s.origin_y - y * s.scale

    def to_logical(self, px: float, py: float) -> Point:
        s = self.state
        return (px - s.origin_x) / s.scale, (s.origin_y - py) / s.scale

    def to_screen_many(
        self, xs: np.ndarray, ys: np.ndarray
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Vectorised :meth:`to_screen` for polylines."""
        s = self.state
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)
        return s.origin_x + xs * s.scale, s.origin_y - ys * s.scale

    def visible_bounds(self, width: float, height: float) -> VisibleBounds:
        """Logical coordinates of the viewport edges."""
        s = self.state
        return VisibleBounds(
            left=(-s.origin_x) / s.scale,
            right=(width - s.origin_x) / s.scale,
            top=s.origin_y / s.scale,
            bottom=(s.origin_y - height) / s.scale,
        )

    # ── Pan ───────────────────────────────────────────────────────────────────

    def pan(self, dx: float, dy: float) -> None:
        self.state.origin_x += dx
        self.state.origin_y += dy

    def begin_drag(self, x: float, y: float) -> None:
        self.state.drag_anchor = (x, y)

    def drag_to(self, x: float, y: float) -> None:
        """Pan by the pointer motion since the last anchor (no-op when idle)."""
        anchor: Optional[Point] = self.state.drag_anchor
        if anchor is None:
            return
        self.pan(x - anchor[0], y - anchor[1])
        self.state.drag_anchor = (x, y)

    def end_drag(self) -> None:
        self.state.drag_anchor = None

    @property
    def dragging(self) -> bool:
        return self.state.drag_anchor is not None

    # ── Zoom ──────────────────────────────────────────────────────────────────

    def zoom_by(self, wheel_delta: float) -> float:
        """Scroll down (positive delta) zooms out, anything else zooms in.

        Returns the new scale, always within ``[MIN_SCALE, MAX_SCALE]``.
        """
        factor = ZOOM_OUT_FACTOR if wheel_delta > 0 else ZOOM_IN_FACTOR
        self.state.scale = clamp(self.state.scale * factor, MIN_SCALE, MAX_SCALE)
        log.debug("zoom %.2f px/unit", self.state.scale)
        return self.state.scale
