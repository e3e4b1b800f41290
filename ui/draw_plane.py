#!/usr/bin/env python3
"""Policy plot: grid, axes, tick labels, reference points and boundary line (mixin)."""

from __future__ import annotations

import pygame

from .frame_driver import Frame


class PlaneRenderer:
    """Mixin that draws the logical plane of a :class:`Frame` onto a panel."""

    def draw_plane(self, surface: pygame.Surface, frame: Frame) -> None:
        palette = self.palette
        surface.fill(palette["panel"])

        for seg in frame.grid:
            pygame.draw.line(surface, palette["grid"], seg.start, seg.end, 1)
        for seg in frame.axes:
            pygame.draw.line(surface, palette["axis"], seg.start, seg.end, 2)

        if self.font_tiny is not None:
            for label in frame.labels:
                self.render_text(
                    surface, self.font_tiny, label.text, label.pos,
                    palette["label"], anchor="bottomleft",
                )

        self.draw_markers(surface, frame)
        self.draw_decision_line(surface, frame)

    def draw_markers(self, surface: pygame.Surface, frame: Frame) -> None:
        palette = self.palette
        for marker in frame.markers:
            px, py = marker.pos
            pygame.draw.circle(
                surface, palette["marker"], (int(px), int(py)), self.MARKER_RADIUS
            )
            if self.font_tiny is not None:
                self.render_text(
                    surface, self.font_tiny, marker.label, (px + 10, py - 10),
                    palette["marker_label"], anchor="bottomleft",
                )

    def draw_decision_line(self, surface: pygame.Surface, frame: Frame) -> None:
        if len(frame.decision_line) < 2:
            return
        color = self.POLICY_COLORS.get(frame.policy.color, (34, 160, 80))
        pygame.draw.lines(surface, color, False, frame.decision_line, 2)
