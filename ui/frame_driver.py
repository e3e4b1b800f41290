#!/usr/bin/env python3
"""
ui/frame_driver.py
==================
Per-tick orchestrator.  One call to :meth:`FrameDriver.tick` advances the
braking simulation once and collects everything the renderers need into
an immutable :class:`Frame`.  It never touches a pygame surface, so it can
be driven from tests with synthetic viewports.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from sim.braking import BrakingSimulation, DrawRect, SimulationState
from sim.physics import RandomSource
from sim.policy_catalog import Policy, PolicyCatalog, PolicyMode
from . import plane
from .gauge import GaugeMapper
from .types import GaugeVisual, Label, Marker, Point, Segment, VisibleBounds
from .view_transform import ViewTransform

log = logging.getLogger("frame")


@dataclass(frozen=True)
class Frame:
    """Screen-space description of one rendered frame."""
    policy: Policy
    bounds: VisibleBounds
    grid: Tuple[Segment, ...]
    axes: Tuple[Segment, ...]
    labels: Tuple[Label, ...]
    decision_line: Tuple[Point, ...]
    markers: Tuple[Marker, ...]
    car: DrawRect
    obstacle: DrawRect
    gauge: GaugeVisual
    speed: float
    throttle: bool
    brake: bool


class FrameDriver:
    """Sequences simulation, plot geometry and gauge once per frame.

    Parameters
    ----------
    plot_width, plot_height : int
        Size of the plot panel; the logical origin starts at its centre.
    mode : PolicyMode or str
        Initial policy.
    rng : RandomSource or None
        Shared random source for cone resets and needle jitter.
    scale : float
        Initial pixels per logical unit.
    """

    def __init__(
        self,
        plot_width: int,
        plot_height: int,
        mode: Union[PolicyMode, str] = PolicyMode.CAUTIOUS,
        rng: Optional[RandomSource] = None,
        scale: float = 80.0,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.catalog = PolicyCatalog()
        self.policy: Policy = self.catalog.get(mode)
        self.simulation = BrakingSimulation(rng=rng)
        self.transform = ViewTransform(plot_width / 2, plot_height / 2, scale=scale)
        self.gauge = GaugeMapper(rng=rng)
        self.paused = False

    @property
    def state(self) -> SimulationState:
        return self.simulation.state

    def select_mode(self, mode: Union[PolicyMode, str]) -> Policy:
        """Switch the active policy; unknown names raise ``UnknownPolicyError``."""
        policy = self.catalog.get(mode)
        if policy is not self.policy:
            log.info("Policy %s -> %s", self.policy.mode.value, policy.mode.value)
        self.policy = policy
        return policy

    def restart(self) -> None:
        self.simulation.reset()

    def tick(self, plot_width: int, plot_height: int) -> Frame:
        if not self.paused:
            self.simulation.step(self.policy)
        return self.build_frame(plot_width, plot_height)

    def build_frame(self, plot_width: int, plot_height: int) -> Frame:
        grid, bounds = plane.grid_lines(self.transform, plot_width, plot_height)
        s = self.simulation.state
        return Frame(
            policy=self.policy,
            bounds=bounds,
            grid=tuple(grid),
            axes=tuple(plane.axes(self.transform, plot_width, plot_height)),
            labels=tuple(plane.axis_labels(self.transform, bounds)),
            decision_line=tuple(plane.decision_line(self.transform, self.policy)),
            markers=tuple(plane.reference_markers(self.transform)),
            car=self.simulation.car_rect(),
            obstacle=self.simulation.obstacle_rect(),
            gauge=self.gauge.map(s.speed),
            speed=s.speed,
            throttle=s.throttle,
            brake=s.brake,
        )
