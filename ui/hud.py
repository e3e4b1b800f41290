#!/usr/bin/env python3
"""Speedometer, mode buttons, pedal lamps, debug overlay and pause banner (mixin)."""

from __future__ import annotations

import pygame

from .frame_driver import Frame
from .gauge import END_ANGLE, START_ANGLE


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    # ------------------------------------------------------------------ #
    #  Speedometer                                                         #
    # ------------------------------------------------------------------ #

    def draw_gauge(self, surface: pygame.Surface, frame: Frame) -> None:
        palette = self.palette
        gauge = frame.gauge
        pivot = self.driver.gauge.pivot
        surface.fill(palette["panel"])

        track = self.arc_points(pivot, self.GAUGE_RADIUS, START_ANGLE, END_ANGLE)
        pygame.draw.lines(surface, palette["gauge_track"], False, track, self.GAUGE_THICKNESS)

        if gauge.arc_fraction > 0:
            fill_end = START_ANGLE + (END_ANGLE - START_ANGLE) * gauge.arc_fraction
            steps = max(2, int(48 * gauge.arc_fraction))
            fill = self.arc_points(pivot, self.GAUGE_RADIUS, START_ANGLE, fill_end, steps)
            pygame.draw.lines(
                surface, self.BAND_COLORS[gauge.band], False, fill, self.GAUGE_THICKNESS
            )

        pygame.draw.line(surface, palette["text"], pivot, gauge.needle_end, 3)
        pygame.draw.circle(surface, palette["text"], (int(pivot[0]), int(pivot[1])), 6)

        if self.font_title is not None and self.font_tiny is not None:
            self.render_text(
                surface, self.font_title, gauge.speed_text,
                (pivot[0], pivot[1] + 38), palette["text"], anchor="center",
            )
            self.render_text(
                surface, self.font_tiny, "SPEED", (pivot[0], pivot[1] + 62),
                palette["text_dim"], anchor="center",
            )

    # ------------------------------------------------------------------ #
    #  Mode buttons                                                        #
    # ------------------------------------------------------------------ #

    def draw_mode_buttons(self, surface: pygame.Surface, frame: Frame) -> None:
        if self.font_small is None:
            return
        palette = self.palette
        for button, mode in self._mode_buttons:
            rect = pygame.Rect(button.x, button.y, button.w, button.h)
            policy = self.driver.catalog.get(mode)
            accent = self.POLICY_COLORS.get(policy.color, palette["text"])
            active = frame.policy.mode is mode
            pygame.draw.rect(
                surface, accent if active else palette["panel"], rect, border_radius=6
            )
            pygame.draw.rect(surface, accent, rect, width=2, border_radius=6)
            self.render_text(
                surface, self.font_small, button.label, rect.center,
                (255, 255, 255) if active else palette["text"], anchor="center",
            )

    # ------------------------------------------------------------------ #
    #  Gas / brake lamps                                                   #
    # ------------------------------------------------------------------ #

    def draw_pedals(self, surface: pygame.Surface, frame: Frame, x: int, y: int) -> None:
        if self.font_small is None:
            return
        palette = self.palette
        lamps = (
            ("GAS", frame.throttle, self.GAS_COLOR),
            ("BRAKE", frame.brake, self.BRAKE_COLOR),
        )
        for i, (label, lit, color) in enumerate(lamps):
            rect = pygame.Rect(x, y + i * 44, 96, 34)
            pygame.draw.rect(
                surface, color if lit else palette["lamp_off"], rect, border_radius=6
            )
            self.render_text(
                surface, self.font_small, label, rect.center,
                (255, 255, 255) if lit else palette["text_dim"], anchor="center",
            )

        phase = self.driver.state.phase.value.upper()
        self.render_text(
            surface, self.font_small, phase, (x, y + 96), palette["text"]
        )

    # ------------------------------------------------------------------ #
    #  Debug / help overlay                                                #
    # ------------------------------------------------------------------ #

    def _draw_debug_overlay(self, surface: pygame.Surface, frame: Frame, dt: float) -> None:
        if self.font_tiny is None:
            return
        fps = self.clock.get_fps() if self.clock else 0.0
        sim = self.driver.simulation
        b = frame.bounds
        lines = [
            f"FPS   {fps:.1f}",
            f"DT    {dt * 1000:.1f} ms",
            f"SCALE {self.driver.transform.scale:.1f} px/unit",
            f"X     {b.left:.2f} .. {b.right:.2f}",
            f"Y     {b.bottom:.2f} .. {b.top:.2f}",
            f"GAP   {sim.gap():.1f}",
            f"BRAKE {sim.brake_threshold(frame.policy):.1f}",
            f"RESET {sim.resets}",
        ]
        x, y = 12, 12
        for line in lines:
            self.render_text(surface, self.font_tiny, line, (x, y), (0, 200, 110))
            y += 14

    def _draw_help(self, surface: pygame.Surface, x: int, y: int) -> None:
        if self.font_tiny is None:
            return
        lines = (
            "1/2/3  Cautious / Risky / Timid",
            "Drag   Pan plot    Wheel  Zoom",
            "SPACE  Pause       R  Restart",
            "T      Theme       F3 Debug",
        )
        for line in lines:
            self.render_text(surface, self.font_tiny, line, (x, y), self.palette["text_dim"])
            y += 15

    # ------------------------------------------------------------------ #
    #  Pause banner                                                        #
    # ------------------------------------------------------------------ #

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        self.draw_alpha_rect(
            surface, (0, 0, 0, 100), pygame.Rect(0, 0, self.width, self.height)
        )
        if self.font_title:
            self.render_text(
                surface, self.font_title, "PAUSED",
                (self.width // 2, self.height // 2), (220, 220, 220), anchor="center",
            )
