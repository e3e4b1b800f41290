#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Dict, Mapping

from .types import ColorRGB, GaugeBand


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    # ── Themes ────────────────────────────────────────────────────────────
    THEMES: Mapping[str, Dict[str, ColorRGB]] = {
        "light": {
            "background": (243, 244, 246),
            "panel": (255, 255, 255),
            "panel_border": (209, 213, 219),
            "grid": (224, 224, 224),
            "axis": (0, 0, 0),
            "label": (0, 0, 0),
            "marker": (37, 99, 235),
            "marker_label": (17, 24, 39),
            "text": (17, 24, 39),
            "text_dim": (107, 114, 128),
            "gauge_track": (229, 231, 235),
            "lamp_off": (209, 213, 219),
        },
        "dark": {
            "background": (15, 15, 15),
            "panel": (22, 22, 22),
            "panel_border": (42, 42, 42),
            "grid": (42, 42, 42),
            "axis": (220, 220, 220),
            "label": (200, 200, 200),
            "marker": (86, 168, 255),
            "marker_label": (230, 230, 235),
            "text": (230, 230, 235),
            "text_dim": (140, 140, 140),
            "gauge_track": (45, 45, 45),
            "lamp_off": (58, 58, 58),
        },
    }

    POLICY_COLORS: Mapping[str, ColorRGB] = {
        "green": (34, 160, 80),
        "red": (239, 68, 68),
        "orange": (245, 158, 11),
    }

    BAND_COLORS: Mapping[GaugeBand, ColorRGB] = {
        GaugeBand.LOW: (59, 130, 246),
        GaugeBand.MID: (245, 158, 11),
        GaugeBand.HIGH: (239, 68, 68),
    }

    # ── Road scene ────────────────────────────────────────────────────────
    GRASS_COLOR: ColorRGB = (96, 160, 82)
    ASPHALT_COLOR: ColorRGB = (52, 52, 56)
    LANE_LINE_COLOR: ColorRGB = (240, 240, 240)
    CAR_COLOR: ColorRGB = (86, 168, 255)
    CONE_COLOR: ColorRGB = (255, 120, 20)
    CONE_STRIPE_COLOR: ColorRGB = (250, 250, 250)
    GAS_COLOR: ColorRGB = (0, 200, 110)
    BRAKE_COLOR: ColorRGB = (255, 60, 60)

    ROAD_TOP = 95
    ROAD_BOTTOM = 185
    DASH_LEN = 24
    DASH_GAP = 18

    # ── Layout ────────────────────────────────────────────────────────────
    # Smallest window that still holds the fixed road and gauge panels.
    MIN_WINDOW_W = 800
    MIN_WINDOW_H = 600
    PLOT_FRACTION = 0.55
    PANEL_MARGIN = 16
    BUTTON_H = 32
    ROAD_PANEL_H = 280
    GAUGE_PANEL_W = 220
    GAUGE_PANEL_H = 230
    GAUGE_RADIUS = 78
    GAUGE_THICKNESS = 12
    MARKER_RADIUS = 6

    SCREENSHOT_DIR = "screenshots"
