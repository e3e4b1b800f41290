#!/usr/bin/env python3
"""
Tests for the per-tick orchestrator, using synthetic viewports and a fixed
random source instead of a window.
"""

from __future__ import annotations

import unittest

from sim.braking import Phase
from sim.policy_catalog import PolicyMode, UnknownPolicyError
from ui.frame_driver import FrameDriver


class FixedRandom:
    def __init__(self, values) -> None:
        self._values = list(values)
        self._i = 0

    def random(self) -> float:
        value = self._values[self._i % len(self._values)]
        self._i += 1
        return value


class FrameDriverTests(unittest.TestCase):
    W, H = 600, 400

    def setUp(self) -> None:
        self.driver = FrameDriver(self.W, self.H, mode="cautious", rng=FixedRandom([0.5]))

    def test_first_tick(self) -> None:
        frame = self.driver.tick(self.W, self.H)

        self.assertIs(frame.policy.mode, PolicyMode.CAUTIOUS)
        self.assertEqual(frame.speed, 1.0)
        self.assertTrue(frame.throttle)
        self.assertFalse(frame.brake)
        self.assertAlmostEqual(frame.car.x, 50.02)
        self.assertEqual(frame.obstacle.x, 420.0)
        self.assertAlmostEqual(frame.gauge.arc_fraction, 1.0 / 120.0)
        self.assertEqual(frame.gauge.speed_text, "1")

        self.assertEqual(len(frame.grid), 14)
        self.assertEqual(len(frame.labels), 14)
        self.assertEqual(len(frame.axes), 2)
        self.assertEqual(len(frame.markers), 4)
        self.assertEqual(len(frame.decision_line), 1001)

    def test_origin_starts_at_plot_centre(self) -> None:
        self.assertEqual(self.driver.transform.to_screen(0, 0), (300.0, 200.0))
        self.assertEqual(self.driver.transform.scale, 80.0)

    def test_mode_switch_is_seen_next_tick(self) -> None:
        self.driver.tick(self.W, self.H)
        self.driver.select_mode("risky")
        frame = self.driver.tick(self.W, self.H)
        self.assertIs(frame.policy.mode, PolicyMode.RISKY)
        # Risky line: y = -0.68x + 2 passes through (0, 2).
        ox, oy = self.driver.transform.origin
        mid = frame.decision_line[500]
        self.assertAlmostEqual(mid[0], ox)
        self.assertAlmostEqual(mid[1], oy - 2.0 * 80.0)

    def test_unknown_mode_keeps_current_policy(self) -> None:
        with self.assertRaises(UnknownPolicyError):
            self.driver.select_mode("arriesgada")
        self.assertIs(self.driver.policy.mode, PolicyMode.CAUTIOUS)

    def test_pan_and_zoom_between_ticks(self) -> None:
        self.driver.transform.pan(10, -5)
        self.driver.transform.zoom_by(-1)
        frame = self.driver.tick(self.W, self.H)
        y_axis = frame.axes[1]
        self.assertEqual(y_axis.start[0], 310.0)
        self.assertAlmostEqual(frame.bounds.top, 195.0 / 88.0)

    def test_pause_freezes_the_simulation(self) -> None:
        self.driver.tick(self.W, self.H)
        self.driver.paused = True
        before = self.driver.simulation.ticks
        frame = self.driver.tick(self.W, self.H)
        self.assertEqual(self.driver.simulation.ticks, before)
        self.assertEqual(frame.speed, 1.0)

    def test_restart(self) -> None:
        for _ in range(50):
            self.driver.tick(self.W, self.H)
        self.driver.restart()
        s = self.driver.state
        self.assertEqual(s.car_position, 50.0)
        self.assertEqual(s.speed, 0.0)
        self.assertEqual(s.obstacle_position, 380.0)
        self.assertIs(s.phase, Phase.MOVING)

    def test_speed_and_gauge_stay_in_range_over_a_long_run(self) -> None:
        for i in range(3000):
            if i == 1000:
                self.driver.select_mode(PolicyMode.RISKY)
            elif i == 2000:
                self.driver.select_mode(PolicyMode.TIMID)
            frame = self.driver.tick(self.W, self.H)
            self.assertGreaterEqual(frame.speed, 0.0)
            self.assertLessEqual(frame.speed, 120.0)
            self.assertGreaterEqual(frame.gauge.needle_angle_deg, -135.0)
            self.assertLessEqual(frame.gauge.needle_angle_deg, 135.0)
            self.assertAlmostEqual(frame.gauge.arc_fraction, frame.speed / 120.0)


if __name__ == "__main__":
    unittest.main()
