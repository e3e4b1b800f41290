"""
ui/draw_road.py
===============
Renders the side-view road scene: grass, asphalt, lane dashes, the car
and the cone.  Positions come straight from the simulation's draw
rectangles, which are already in road-panel pixels.

All functions are *pure renderers* — they read data and draw to a surface.
"""

from __future__ import annotations

import pygame

from sim.braking import DrawRect
from .frame_driver import Frame


class RoadRenderer:
    """Mixin that draws the road panel."""

    def draw_road(self, surface: pygame.Surface, frame: Frame) -> None:
        w = surface.get_width()
        surface.fill(self.GRASS_COLOR)
        pygame.draw.rect(
            surface, self.ASPHALT_COLOR,
            (0, self.ROAD_TOP, w, self.ROAD_BOTTOM - self.ROAD_TOP),
        )
        pygame.draw.line(surface, self.LANE_LINE_COLOR, (0, self.ROAD_TOP), (w, self.ROAD_TOP), 2)
        pygame.draw.line(
            surface, self.LANE_LINE_COLOR, (0, self.ROAD_BOTTOM), (w, self.ROAD_BOTTOM), 2
        )
        # Centre dashes sit above the lane the car drives in.
        dash_y = self.ROAD_TOP + 12
        x = 0
        while x < w:
            pygame.draw.line(
                surface, self.LANE_LINE_COLOR, (x, dash_y), (x + self.DASH_LEN, dash_y), 2
            )
            x += self.DASH_LEN + self.DASH_GAP

        self.draw_obstacle(surface, frame.obstacle)
        self.draw_car(surface, frame.car, frame.brake)

    def draw_car(self, surface: pygame.Surface, rect: DrawRect, braking: bool) -> None:
        w, h = int(rect.w), int(rect.h)
        sprite = pygame.Surface((w, h), pygame.SRCALPHA)

        # Body
        body = pygame.Rect(0, h // 4, w, h // 2 + 4)
        pygame.draw.rect(sprite, self.CAR_COLOR, body, border_radius=6)
        cabin = pygame.Rect(w // 4, 2, w // 2, h // 4 + 4)
        pygame.draw.rect(sprite, self.CAR_COLOR, cabin, border_radius=6)

        # Windshield
        r, g, b = self.CAR_COLOR
        glass = (max(0, r - 60), max(0, g - 60), max(0, b - 60), 200)
        pygame.draw.rect(sprite, glass, (w // 2 + 2, 6, w // 4 - 6, h // 4 - 2), border_radius=2)

        # Wheels
        for wx in (w // 5, w - w // 5):
            pygame.draw.circle(sprite, (20, 20, 20), (wx, h - 7), 7)
            pygame.draw.circle(sprite, (150, 150, 150), (wx, h - 7), 3)

        # Headlight / brake light
        pygame.draw.circle(sprite, (255, 248, 200), (w - 3, h // 2), 3)
        tail = (255, 40, 40) if braking else (120, 30, 30)
        pygame.draw.circle(sprite, tail, (3, h // 2), 3)

        surface.blit(sprite, (int(rect.x), int(rect.y)))

    def draw_obstacle(self, surface: pygame.Surface, rect: DrawRect) -> None:
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        apex = (x + w / 2, y)
        base_l = (x + 2, y + h - 4)
        base_r = (x + w - 2, y + h - 4)
        pygame.draw.polygon(surface, self.CONE_COLOR, [apex, base_l, base_r])
        stripe_y = y + h * 0.55
        pygame.draw.line(
            surface, self.CONE_STRIPE_COLOR,
            (x + w * 0.3, stripe_y), (x + w * 0.7, stripe_y), 3,
        )
        pygame.draw.rect(surface, self.CONE_COLOR, (x, y + h - 4, w, 4))
