#!/usr/bin/env python3
"""
Headless tests for the Pygame host: layout, input routing and a few
rendered frames on the SDL dummy video driver.
"""

from __future__ import annotations

import os
import unittest
from unittest import mock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from ui.pygame_view import PygameBrakingView  # noqa: E402


def _run_with_events(view: PygameBrakingView, *batches) -> None:
    """Run the main loop, feeding one batch of events per frame."""
    frames = [list(batch) for batch in batches]
    frames.append([pygame.event.Event(pygame.QUIT)])
    with mock.patch.object(pygame.event, "get", side_effect=frames):
        view.run()


class LayoutTests(unittest.TestCase):
    def test_small_window_is_raised_to_the_minimum(self) -> None:
        view = PygameBrakingView(width=640, height=480, seed=1)
        self.assertEqual((view.width, view.height), (800, 600))
        for rect in (view.plot_rect, view.road_rect, view.gauge_rect):
            with self.subTest(rect=rect):
                self.assertGreaterEqual(rect.left, 0)
                self.assertGreaterEqual(rect.top, 0)
                self.assertLessEqual(rect.right, view.width)
                self.assertLessEqual(rect.bottom, view.height)

    def test_default_window_is_kept(self) -> None:
        view = PygameBrakingView(seed=1)
        self.assertEqual((view.width, view.height), (1200, 760))

    def test_initial_scale_reaches_the_plot(self) -> None:
        view = PygameBrakingView(seed=1, scale=150.0)
        self.assertEqual(view.driver.transform.scale, 150.0)


class InputTests(unittest.TestCase):
    def setUp(self) -> None:
        self.view = PygameBrakingView(seed=1)

    def test_wheel_zooms_over_the_plot(self) -> None:
        self.view._handle_wheel(1, self.view.plot_rect.center)
        self.assertAlmostEqual(self.view.driver.transform.scale, 88.0)
        self.view._handle_wheel(-1, self.view.plot_rect.center)
        self.assertAlmostEqual(self.view.driver.transform.scale, 79.2)

    def test_wheel_outside_the_plot_is_ignored(self) -> None:
        for pos in (self.view.road_rect.center, self.view.gauge_rect.center):
            with self.subTest(pos=pos):
                self.view._handle_wheel(1, pos)
                self.assertEqual(self.view.driver.transform.scale, 80.0)

    def test_keys(self) -> None:
        self.assertTrue(self.view._handle_key(pygame.K_2))
        self.assertEqual(self.view.driver.policy.mode.value, "risky")
        self.view._handle_key(pygame.K_SPACE)
        self.assertTrue(self.view.driver.paused)
        self.view._handle_key(pygame.K_t)
        self.assertTrue(self.view.dark)
        self.assertFalse(self.view._handle_key(pygame.K_ESCAPE))


class HeadlessRunTests(unittest.TestCase):
    def test_single_frame_at_a_small_window(self) -> None:
        view = PygameBrakingView(width=640, height=480, seed=3)
        _run_with_events(view)
        self.assertEqual(view.driver.simulation.ticks, 1)

    def test_frames_with_overlays_and_dark_theme(self) -> None:
        view = PygameBrakingView(seed=3, dark=True)
        _run_with_events(
            view,
            [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F3)],
            [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_3)],
            [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)],
        )
        self.assertTrue(view.show_debug)
        self.assertTrue(view.driver.paused)
        # The paused frame and the closing frame do not step.
        self.assertEqual(view.driver.simulation.ticks, 2)


if __name__ == "__main__":
    unittest.main()
