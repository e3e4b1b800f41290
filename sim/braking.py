#!/usr/bin/env python3
"""
sim/braking.py
==============
Single-car braking state machine.

A car drives along a one-lane road towards a cone.  Each tick the active
:class:`~sim.policy_catalog.Policy` decides whether the remaining gap is
small enough to start braking.  Once stopped the car waits, then the
scene resets with the cone at a fresh random position.

Positions are road-surface pixels; speed is in gauge units (0–120).
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from sim.physics import RandomSource, clamp, stopping_distance
from sim.policy_catalog import Policy

log = logging.getLogger("braking")

# ── Scene geometry ────────────────────────────────────────────────────────────
CAR_WIDTH: float = 80.0
CAR_HEIGHT: float = 40.0
OBSTACLE_WIDTH: float = 30.0
OBSTACLE_HEIGHT: float = 30.0
LANE_Y: float = 118.0
SAFE_GAP: float = 6.0

# ── Kinematics ────────────────────────────────────────────────────────────────
MAX_SPEED: float = 120.0
ACCELERATION: float = 1.0       # speed units per tick
DECELERATION: float = 3.0       # speed units per tick
POSITION_PER_SPEED: float = 0.02
BRAKING_DIVISOR: float = 220.0
WAIT_TIME: int = 120            # ticks spent stopped before a reset

# ── Reset envelope ────────────────────────────────────────────────────────────
RESET_CAR_POSITION: float = 50.0
RESET_OBSTACLE_BASE: float = 300.0
RESET_OBSTACLE_SPREAD: float = 160.0
INITIAL_OBSTACLE_POSITION: float = 420.0


class Phase(Enum):
    MOVING = "moving"
    BRAKING = "braking"
    WAITING = "waiting"


ALLOWED_TRANSITIONS: FrozenSet[Tuple[Phase, Phase]] = frozenset({
    (Phase.MOVING, Phase.BRAKING),
    (Phase.BRAKING, Phase.WAITING),
    (Phase.WAITING, Phase.MOVING),
})


@dataclass
class SimulationState:
    """Mutable state of the one simulated car.

    Attributes
    ----------
    car_position : float
        Left edge of the car on the road surface.
    obstacle_position : float
        Left edge of the cone.
    speed : float
        Current speed, always within ``[0, MAX_SPEED]`` after a tick.
    phase : Phase
        Current state of the braking machine.
    wait_ticks_remaining : int
        Countdown while :attr:`Phase.WAITING`; may dip below zero.
    throttle, brake : bool
        Whether the accelerator / brake was applied on the last tick.
    """

    car_position: float = RESET_CAR_POSITION
    obstacle_position: float = INITIAL_OBSTACLE_POSITION
    speed: float = 0.0
    phase: Phase = Phase.MOVING
    wait_ticks_remaining: int = 0
    throttle: bool = False
    brake: bool = False


@dataclass(frozen=True)
class DrawRect:
    """Axis-aligned rectangle on the road surface."""
    x: float
    y: float
    w: float
    h: float


class BrakingSimulation:
    """Per-tick state machine for the car, the cone and the wait timer.

    Parameters
    ----------
    rng : RandomSource or None
        Source for the cone's reset position.  Defaults to a
        :class:`random.Random` seeded with *seed*.
    seed : int or None
        Seed for the default generator; ignored when *rng* is given.
    state : SimulationState or None
        Starting state, mainly for tests.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        state: Optional[SimulationState] = None,
    ) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.state = state if state is not None else SimulationState()
        self.ticks = 0
        self.resets = 0
        self.transitions: Counter = Counter()

    # ── Read-only helpers ─────────────────────────────────────────────────────

    def gap(self) -> float:
        """Distance between the car's front bumper and the cone."""
        return self.state.obstacle_position - (self.state.car_position + CAR_WIDTH)

    def brake_threshold(self, policy: Policy) -> float:
        """Gap at or below which *policy* starts braking at the current speed."""
        stopping = stopping_distance(self.state.speed, BRAKING_DIVISOR)
        return policy.base_offset + stopping * policy.mode_factor + SAFE_GAP

    def car_rect(self) -> DrawRect:
        return DrawRect(self.state.car_position, LANE_Y, CAR_WIDTH, CAR_HEIGHT)

    def obstacle_rect(self) -> DrawRect:
        return DrawRect(
            self.state.obstacle_position, LANE_Y + 6, OBSTACLE_WIDTH, OBSTACLE_HEIGHT
        )

    def transition_counts(self) -> Dict[Tuple[Phase, Phase], int]:
        return dict(self.transitions)

    # ── State machine ─────────────────────────────────────────────────────────

    def step(self, policy: Policy) -> SimulationState:
        """Advance one tick under *policy* and return the (same) state object.

        The MOVING, BRAKING and WAITING blocks run in that order within one
        tick, so a car entering BRAKING already sheds speed on that tick.
        """
        s = self.state
        gap = self.gap()
        threshold = self.brake_threshold(policy)
        s.throttle = False
        s.brake = False

        if s.phase is Phase.MOVING:
            if gap <= threshold:
                self._enter(Phase.BRAKING, gap=gap, threshold=threshold)
            else:
                s.speed += ACCELERATION
                s.throttle = True

        if s.phase is Phase.BRAKING:
            s.speed -= DECELERATION
            s.brake = True
            # Reaching the cone and running out of speed stop the car the same way.
            if gap <= 0 or s.speed <= 0:
                s.speed = 0.0
                self._enter(Phase.WAITING, gap=gap, threshold=threshold)
                s.wait_ticks_remaining = WAIT_TIME

        if s.phase is Phase.WAITING:
            s.wait_ticks_remaining -= 1
            if s.wait_ticks_remaining <= 0:
                self._enter(Phase.MOVING)
                self.reset()

        s.speed = clamp(s.speed, 0.0, MAX_SPEED)
        s.car_position += s.speed * POSITION_PER_SPEED
        self.ticks += 1
        return s

    def reset(self) -> None:
        """Put the car back at the start and drop the cone somewhere new."""
        s = self.state
        s.phase = Phase.MOVING
        s.car_position = RESET_CAR_POSITION
        s.obstacle_position = (
            RESET_OBSTACLE_BASE + self._rng.random() * RESET_OBSTACLE_SPREAD
        )
        s.speed = 0.0
        s.throttle = False
        s.brake = False
        self.resets += 1
        log.info("Scene reset #%d: cone at %.1f", self.resets, s.obstacle_position)

    def _enter(self, phase: Phase, gap: Optional[float] = None,
               threshold: Optional[float] = None) -> None:
        edge = (self.state.phase, phase)
        if edge not in ALLOWED_TRANSITIONS:
            raise RuntimeError(f"illegal phase transition {edge[0].name} -> {phase.name}")
        self.transitions[edge] += 1
        if gap is None:
            log.debug("%s -> %s", edge[0].name, phase.name)
        else:
            log.debug("%s -> %s  speed=%.1f gap=%.2f threshold=%.2f",
                      edge[0].name, phase.name, self.state.speed, gap, threshold)
        self.state.phase = phase
