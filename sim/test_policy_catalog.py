#!/usr/bin/env python3
"""
Tests for the policy table and mode parsing.
"""

from __future__ import annotations

import dataclasses
import unittest

from sim.policy_catalog import (
    Policy,
    PolicyCatalog,
    PolicyMode,
    UnknownPolicyError,
)


class PolicyCatalogTests(unittest.TestCase):
    def setUp(self) -> None:
        self.catalog = PolicyCatalog()

    def test_three_policies_with_fixed_parameters(self) -> None:
        expected = {
            PolicyMode.CAUTIOUS: (-4.0, 2.5, 28.0, 1.0, "green"),
            PolicyMode.RISKY: (-0.68, 2.0, -100.0, 0.75, "red"),
            PolicyMode.TIMID: (-1.13, 0.45, 95.0, 1.0, "orange"),
        }
        self.assertEqual(len(self.catalog), 3)
        for mode, (slope, intercept, base, factor, color) in expected.items():
            with self.subTest(mode=mode):
                p = self.catalog.get(mode)
                self.assertIs(p.mode, mode)
                self.assertEqual(p.slope, slope)
                self.assertEqual(p.intercept, intercept)
                self.assertEqual(p.base_offset, base)
                self.assertEqual(p.mode_factor, factor)
                self.assertEqual(p.color, color)

    def test_lookup_by_name_is_forgiving_about_case_and_spaces(self) -> None:
        self.assertIs(self.catalog.get(" Risky "), self.catalog.get(PolicyMode.RISKY))
        self.assertIs(self.catalog.get("TIMID"), self.catalog.get(PolicyMode.TIMID))

    def test_unknown_name_fails_loudly(self) -> None:
        for bad in ("prudente", "", "cautious-ish", None, 3):
            with self.subTest(name=bad):
                with self.assertRaises(UnknownPolicyError) as ctx:
                    self.catalog.get(bad)
                self.assertIsInstance(ctx.exception, ValueError)
                self.assertIn("cautious", str(ctx.exception))

    def test_modes_in_display_order(self) -> None:
        self.assertEqual(
            self.catalog.modes(),
            (PolicyMode.CAUTIOUS, PolicyMode.RISKY, PolicyMode.TIMID),
        )
        self.assertEqual([p.mode for p in self.catalog], list(self.catalog.modes()))

    def test_catalog_and_policies_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.catalog._policies[PolicyMode.RISKY] = self.catalog.get("timid")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.catalog.get("cautious").slope = 0.0

    def test_boundary_line(self) -> None:
        p: Policy = self.catalog.get("cautious")
        self.assertEqual(p.boundary_y(0.0), 2.5)
        self.assertEqual(p.boundary_y(1.0), -1.5)

    def test_parse_passes_enum_through(self) -> None:
        self.assertIs(PolicyMode.parse(PolicyMode.TIMID), PolicyMode.TIMID)
        self.assertIs(PolicyMode.parse("cautious"), PolicyMode.CAUTIOUS)


if __name__ == "__main__":
    unittest.main()
