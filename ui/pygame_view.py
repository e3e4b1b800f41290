#!/usr/bin/env python3
"""
Main view class — combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – data containers (ViewState, GaugeVisual, …)
    ├── constants.py       – ViewConstants mixin (colours, themes, layout)
    ├── helpers.py         – ViewHelpers mixin  (fonts, text, arcs)
    ├── view_transform.py  – ViewTransform      (pan / zoom mapping)
    ├── plane.py           – grid, labels, boundary line geometry
    ├── gauge.py           – GaugeMapper        (speed → speedometer)
    ├── frame_driver.py    – FrameDriver        (one tick → Frame)
    ├── draw_plane.py      – PlaneRenderer mixin (policy plot)
    ├── draw_road.py       – RoadRenderer mixin (road, car, cone)
    ├── hud.py             – HudRenderer mixin  (gauge, buttons, overlays)
    └── pygame_view.py     – PygameBrakingView (this file – main loop)
"""

from __future__ import annotations

import logging
import os
import random
from datetime import datetime
from typing import List, Optional, Tuple

import pygame

from sim.policy_catalog import PolicyMode
from .constants import ViewConstants
from .draw_plane import PlaneRenderer
from .draw_road import RoadRenderer
from .frame_driver import FrameDriver
from .helpers import ViewHelpers
from .hud import HudRenderer
from .types import ButtonRect

log = logging.getLogger("view")

_MODE_KEYS = {
    pygame.K_1: PolicyMode.CAUTIOUS,
    pygame.K_2: PolicyMode.RISKY,
    pygame.K_3: PolicyMode.TIMID,
}


class PygameBrakingView(
    ViewConstants,
    ViewHelpers,
    PlaneRenderer,
    RoadRenderer,
    HudRenderer,
):
    """Braking-policy visualiser powered by Pygame.

    The left panel is the pannable / zoomable policy plot; the right
    column holds the mode buttons, the road scene and the speedometer.
    All state lives in the :class:`FrameDriver`; this class only routes
    input to it and paints the frames it returns.
    """

    def __init__(
        self,
        driver: Optional[FrameDriver] = None,
        width: int = 1200,
        height: int = 760,
        fps: int = 60,
        mode: PolicyMode = PolicyMode.CAUTIOUS,
        seed: Optional[int] = None,
        dark: bool = False,
        scale: float = 80.0,
    ):
        self.width = max(self.MIN_WINDOW_W, width)
        self.height = max(self.MIN_WINDOW_H, height)
        if (self.width, self.height) != (width, height):
            log.warning("Window %dx%d is below the minimum, using %dx%d",
                        width, height, self.width, self.height)
        self.fps = fps
        self.dark = dark

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

        self.show_debug = False
        self._mode_buttons: List[Tuple[ButtonRect, PolicyMode]] = []
        self._layout()

        if driver is None:
            driver = FrameDriver(
                self.plot_rect.w, self.plot_rect.h,
                mode=mode, rng=random.Random(seed), scale=scale,
            )
        self.driver = driver

    @property
    def palette(self):
        return self.THEMES["dark" if self.dark else "light"]

    # ------------------------------------------------------------------ #
    #  Layout / resize                                                     #
    # ------------------------------------------------------------------ #
    def _layout(self) -> None:
        m = self.PANEL_MARGIN
        plot_w = int(self.width * self.PLOT_FRACTION)
        self.plot_rect = pygame.Rect(m, m, plot_w - m, self.height - 2 * m)

        side_x = self.plot_rect.right + m
        side_w = max(200, self.width - side_x - m)
        self._mode_buttons = []
        bw = (side_w - 2 * 8) // 3
        for i, mode in enumerate(PolicyMode):
            button = ButtonRect(mode.value.capitalize(), side_x + i * (bw + 8), m, bw, self.BUTTON_H)
            self._mode_buttons.append((button, mode))

        road_y = m + self.BUTTON_H + m
        self.road_rect = pygame.Rect(side_x, road_y, side_w, self.ROAD_PANEL_H)
        gauge_y = self.road_rect.bottom + m
        self.gauge_rect = pygame.Rect(side_x, gauge_y, self.GAUGE_PANEL_W, self.GAUGE_PANEL_H)
        self.pedal_pos = (self.gauge_rect.right + 2 * m, gauge_y + m)
        self.help_pos = (side_x, self.gauge_rect.bottom + m)

    def _handle_resize(self, new_w: int, new_h: int) -> None:
        self.width = max(self.MIN_WINDOW_W, new_w)
        self.height = max(self.MIN_WINDOW_H, new_h)
        self._layout()
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )

    # ------------------------------------------------------------------ #
    #  Screenshot                                                          #
    # ------------------------------------------------------------------ #
    def _take_screenshot(self) -> None:
        if self.screen is None:
            return
        os.makedirs(self.SCREENSHOT_DIR, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(self.SCREENSHOT_DIR, f"braking_{stamp}.png")
        pygame.image.save(self.screen, path)
        log.info("Screenshot saved to %s", path)

    # ------------------------------------------------------------------ #
    #  Input                                                               #
    # ------------------------------------------------------------------ #
    def _plot_local(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        return pos[0] - self.plot_rect.x, pos[1] - self.plot_rect.y

    def _handle_mouse_down(self, event: pygame.event.Event) -> None:
        if event.button != 1:
            return
        for button, mode in self._mode_buttons:
            if button.contains(*event.pos):
                self.driver.select_mode(mode)
                return
        if self.plot_rect.collidepoint(event.pos):
            self.driver.transform.begin_drag(*self._plot_local(event.pos))

    def _handle_wheel(self, wheel_y: int, pos: Tuple[int, int]) -> None:
        # Only the plot panel zooms. Wheel up is positive in pygame; the
        # transform expects scroll-down-positive deltas.
        if self.plot_rect.collidepoint(pos):
            self.driver.transform.zoom_by(-wheel_y)

    def _handle_key(self, key: int) -> bool:
        """Returns False when the window should close."""
        if key == pygame.K_ESCAPE:
            return False
        if key in _MODE_KEYS:
            self.driver.select_mode(_MODE_KEYS[key])
        elif key == pygame.K_SPACE:
            self.driver.paused = not self.driver.paused
        elif key == pygame.K_r:
            self.driver.restart()
        elif key == pygame.K_t:
            self.dark = not self.dark
        elif key == pygame.K_F3:
            self.show_debug = not self.show_debug
        elif key == pygame.K_F12:
            self._take_screenshot()
        return True

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("BRAKING POLICY SIM")
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )
        self.clock = pygame.time.Clock()
        self.font_small = self._load_font(14, bold=True)
        self.font_tiny = self._load_font(12, bold=False)
        self.font_title = self._load_font(30, bold=True)
        log.info("View started (%dx%d @ %d fps, policy %s)",
                 self.width, self.height, self.fps, self.driver.policy.mode.value)

        running = True
        while running:
            delta_time = self.clock.tick(self.fps) / 1000.0

            # ---- events ------------------------------------------------- #
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self._handle_mouse_down(event)
                elif event.type == pygame.MOUSEMOTION:
                    self.driver.transform.drag_to(*self._plot_local(event.pos))
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    self.driver.transform.end_drag()
                elif event.type == pygame.MOUSEWHEEL:
                    self._handle_wheel(event.y, pygame.mouse.get_pos())
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event.key) and running

            # ---- tick --------------------------------------------------- #
            frame = self.driver.tick(self.plot_rect.w, self.plot_rect.h)

            # ---- render ------------------------------------------------- #
            palette = self.palette
            self.screen.fill(palette["background"])

            plot = self.screen.subsurface(self.plot_rect)
            self.draw_plane(plot, frame)
            pygame.draw.rect(self.screen, palette["panel_border"], self.plot_rect, 1)

            self.draw_mode_buttons(self.screen, frame)

            road = self.screen.subsurface(self.road_rect)
            self.draw_road(road, frame)
            pygame.draw.rect(self.screen, palette["panel_border"], self.road_rect, 1)

            gauge = self.screen.subsurface(self.gauge_rect)
            self.draw_gauge(gauge, frame)
            pygame.draw.rect(self.screen, palette["panel_border"], self.gauge_rect, 1)

            self.draw_pedals(self.screen, frame, *self.pedal_pos)
            self._draw_help(self.screen, *self.help_pos)

            if self.show_debug:
                self._draw_debug_overlay(self.screen, frame, delta_time)
            if self.driver.paused:
                self._draw_pause_banner(self.screen)

            pygame.display.flip()

        log.info("View closed after %d ticks", self.driver.simulation.ticks)
        pygame.quit()


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    width: int = 1200,
    height: int = 760,
    fps: int = 60,
    mode: PolicyMode = PolicyMode.CAUTIOUS,
    seed: Optional[int] = None,
    dark: bool = False,
    scale: float = 80.0,
) -> None:
    view = PygameBrakingView(
        width=width, height=height, fps=fps, mode=mode, seed=seed, dark=dark,
        scale=scale,
    )
    view.run()


if __name__ == "__main__":
    raise SystemExit(
        "pygame_view.py is not a standalone script. Run `python main.py` "
        "or call run_pygame_view()."
    )
