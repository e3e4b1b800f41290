#!/usr/bin/env python3
"""
test_main.py
============
Environment-override parsing for the entry point.
"""

import logging
import unittest

import config
from main import load_settings
from sim.policy_catalog import PolicyMode


class LoadSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        s = load_settings({})
        self.assertIs(s["mode"], PolicyMode.CAUTIOUS)
        self.assertEqual(s["fps"], config.TARGET_FPS)
        self.assertEqual(s["width"], config.WINDOW_WIDTH)
        self.assertEqual(s["height"], config.WINDOW_HEIGHT)
        self.assertIsNone(s["seed"])
        self.assertFalse(s["dark"])
        self.assertEqual(s["scale"], config.INITIAL_SCALE)
        self.assertEqual(s["log_level"], logging.INFO)

    def test_overrides(self) -> None:
        s = load_settings({
            "BRAKING_MODE": "Risky",
            "BRAKING_FPS": "30",
            "BRAKING_SEED": "7",
            "BRAKING_DARK": "yes",
            "BRAKING_SCALE": "120",
            "BRAKING_LOG_LEVEL": "debug",
        })
        self.assertIs(s["mode"], PolicyMode.RISKY)
        self.assertEqual(s["fps"], 30)
        self.assertEqual(s["seed"], 7)
        self.assertTrue(s["dark"])
        self.assertEqual(s["log_level"], logging.DEBUG)
        self.assertEqual(s["scale"], 120.0)

    def test_blank_values_fall_back_to_defaults(self) -> None:
        s = load_settings({"BRAKING_MODE": "  ", "BRAKING_FPS": ""})
        self.assertIs(s["mode"], PolicyMode.CAUTIOUS)
        self.assertEqual(s["fps"], config.TARGET_FPS)

    def test_dark_flag_spellings(self) -> None:
        for raw, expected in (("1", True), ("ON", True), ("true", True),
                              ("0", False), ("off", False), ("No", False)):
            with self.subTest(raw=raw):
                self.assertIs(load_settings({"BRAKING_DARK": raw})["dark"], expected)

    def test_bad_values_exit(self) -> None:
        bad = (
            {"BRAKING_MODE": "prudente"},
            {"BRAKING_FPS": "fast"},
            {"BRAKING_FPS": "0"},
            {"BRAKING_WIDTH": "-5"},
            {"BRAKING_SEED": "x"},
            {"BRAKING_LOG_LEVEL": "loud"},
            {"BRAKING_DARK": "maybe"},
            {"BRAKING_SCALE": "0"},
            {"BRAKING_SCALE": "wide"},
        )
        for env in bad:
            with self.subTest(env=env):
                with self.assertRaises(SystemExit):
                    load_settings(env)


if __name__ == "__main__":
    unittest.main()
