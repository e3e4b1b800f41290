"""
ui/helpers.py
=============
Pure utility functions shared across UI modules:
font loading, alpha-surface drawing, text rendering and arc sampling.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import pygame


class ViewHelpers:
    """Mixin with small drawing utilities used by every renderer."""

    @staticmethod
    def _load_font(size: int, bold: bool = False) -> pygame.font.Font:
        return pygame.font.SysFont("arial", size, bold=bold)

    @staticmethod
    def draw_alpha_rect(
        target: pygame.Surface,
        color: Tuple[int, ...],
        rect: pygame.Rect,
        border_radius: int = 0,
    ) -> None:
        """Draw a semi-transparent rectangle (colour tuple with 4 channels)."""
        tmp = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
        pygame.draw.rect(tmp, color, (0, 0, rect.w, rect.h), border_radius=border_radius)
        target.blit(tmp, rect.topleft)

    @staticmethod
    def render_text(
        surface: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        pos: Tuple[float, float],
        color: Tuple[int, ...] = (230, 230, 235),
        anchor: str = "topleft",
    ) -> pygame.Rect:
        """Render text with flexible *anchor* ('topleft', 'center', 'bottomleft' …)."""
        img = font.render(text, True, color)
        rect = img.get_rect(**{anchor: (int(pos[0]), int(pos[1]))})
        surface.blit(img, rect)
        return rect

    @staticmethod
    def arc_points(
        centre: Tuple[float, float],
        radius: float,
        start_deg: float,
        end_deg: float,
        steps: int = 48,
    ) -> List[Tuple[float, float]]:
        """Points along a circular arc in screen space (y down, degrees)."""
        cx, cy = centre
        pts = []
        for i in range(steps + 1):
            a = math.radians(start_deg + (end_deg - start_deg) * i / steps)
            pts.append((cx + radius * math.cos(a), cy + radius * math.sin(a)))
        return pts
