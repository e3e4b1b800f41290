#!/usr/bin/env python3
"""
sim/policy_catalog.py
=====================
The three driving policies of the visualiser.  Every constant lives in the
frozen :class:`Policy` dataclass so the simulation and the plot read the
same numbers.

* :class:`PolicyMode` — closed set of mode keys accepted at the boundary.
* :class:`PolicyCatalog` — read-only lookup ``mode → Policy``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union


class UnknownPolicyError(ValueError):
    """Raised when a mode name does not match any known policy."""

    def __init__(self, name: object) -> None:
        valid = ", ".join(m.value for m in PolicyMode)
        super().__init__(f"unknown policy mode {name!r} (expected one of: {valid})")
        self.name = name


class PolicyMode(str, Enum):
    CAUTIOUS = "cautious"
    RISKY = "risky"
    TIMID = "timid"

    @classmethod
    def parse(cls, name: Union["PolicyMode", str]) -> "PolicyMode":
        """Resolve a user-facing name; fails loudly on anything unknown."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnknownPolicyError(name)
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownPolicyError(name) from None


@dataclass(frozen=True)
class Policy:
    """One driving-risk profile.

    The decision boundary ``y = slope * x + intercept`` is drawn on the
    plot; ``base_offset`` and ``mode_factor`` shape the braking threshold.
    """

    mode: PolicyMode
    label: str

    # ── Decision boundary ─────────────────────────────────────────────────
    slope: float
    intercept: float

    # ── Braking model ─────────────────────────────────────────────────────
    base_offset: float
    """Minimum braking lead distance (road px).  Negative means *past* the cone."""

    mode_factor: float = 1.0
    """Multiplier on the speed-squared stopping term."""

    color: str = "green"
    """Colour tag for the boundary line (see ``ViewConstants.POLICY_COLORS``)."""

    def boundary_y(self, x: float) -> float:
        return self.slope * x + self.intercept


_DEFAULT_POLICIES: Tuple[Policy, ...] = (
    Policy(
        mode=PolicyMode.CAUTIOUS,
        label="Cautious",
        slope=-4.0,
        intercept=2.5,
        base_offset=28.0,
        color="green",
    ),
    Policy(
        mode=PolicyMode.RISKY,
        label="Risky",
        slope=-0.68,
        intercept=2.0,
        base_offset=-100.0,   # brakes only once it is on top of the cone
        mode_factor=0.75,
        color="red",
    ),
    Policy(
        mode=PolicyMode.TIMID,
        label="Timid",
        slope=-1.13,
        intercept=0.45,
        base_offset=95.0,
        color="orange",
    ),
)


class PolicyCatalog:
    """Read-only table of the known policies."""

    def __init__(self) -> None:
        self._policies: Mapping[PolicyMode, Policy] = MappingProxyType(
            {p.mode: p for p in _DEFAULT_POLICIES}
        )

    def get(self, mode: Union[PolicyMode, str]) -> Policy:
        """Return the policy for *mode*, raising :class:`UnknownPolicyError`."""
        return self._policies[PolicyMode.parse(mode)]

    def modes(self) -> Tuple[PolicyMode, ...]:
        """Modes in display order (button order)."""
        return tuple(self._policies.keys())

    def __iter__(self):
        return iter(self._policies.values())

    def __len__(self) -> int:
        return len(self._policies)
