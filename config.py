#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf — it never imports from
other project packages.
"""

# ── Simulation defaults ──────────────────────────────────────────────────────
DEFAULT_MODE: str = "cautious"
DEFAULT_RANDOM_SEED = None

# ── Plot defaults ────────────────────────────────────────────────────────────
INITIAL_SCALE: float = 80.0

# ── UI defaults ──────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = 1200
WINDOW_HEIGHT: int = 760
TARGET_FPS: int = 60
DARK_THEME: bool = False

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL: str = "INFO"
LOG_FILE: str = "braking.log"
DEBUG_LOG_FILE: str = "braking_debug.log"

# ── Environment variable names ───────────────────────────────────────────────
ENV_PREFIX: str = "BRAKING_"
