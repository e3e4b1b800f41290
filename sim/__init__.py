"""
sim — Simulation core
=====================

Modules
-------
braking
    :class:`BrakingSimulation` per-tick car / cone state machine.
policy_catalog
    :class:`Policy` parameters and the read-only :class:`PolicyCatalog`.
physics
    Clamp, stopping-distance and random-source helpers.
"""
