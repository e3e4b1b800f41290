#!/usr/bin/env python3

from .types import ColorRGB, ColorRGBA, GaugeBand, GaugeVisual, ViewState
from .constants import ViewConstants
from .helpers import ViewHelpers
from .view_transform import ViewTransform
from .gauge import GaugeMapper
from .frame_driver import Frame, FrameDriver
from .draw_plane import PlaneRenderer
from .draw_road import RoadRenderer
from .hud import HudRenderer
from .pygame_view import PygameBrakingView, run_pygame_view

__all__ = [
    "ColorRGB",
    "ColorRGBA",
    "GaugeBand",
    "GaugeVisual",
    "ViewState",
    "ViewConstants",
    "ViewHelpers",
    "ViewTransform",
    "GaugeMapper",
    "Frame",
    "FrameDriver",
    "PlaneRenderer",
    "RoadRenderer",
    "HudRenderer",
    "PygameBrakingView",
    "run_pygame_view",
]
