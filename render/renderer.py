"""
ecosystem_sim module: render/renderer.py

Pygame rendering of food and organisms (top-down).
"""

from __future__ import annotations
import math
from typing import Sequence

import pygame

from organism.organism import Organism
from render import colors
from world.food import Food


def organism_shade(org: Organism) -> int:
    """Grey level of an organism: 255 when just fed, 0 at the starvation limit."""
    return math.floor(255 * (1 - org.starvation_ratio()))


def make_overlay(screen: pygame.Surface) -> pygame.Surface:
    # per-pixel alpha layer for the translucent field-of-view rings
    return pygame.Surface(screen.get_size(), pygame.SRCALPHA)


def draw_food(screen: pygame.Surface, foods: Sequence[Food]) -> None:
    for f in foods:
        pygame.draw.circle(screen, f.color, (f.x, f.y), f.radius)


def draw_fov(overlay: pygame.Surface, org: Organism, fov_radius: float) -> None:
    ring = (*colors.FOV, int(255 * colors.FOV_ALPHA))
    pygame.draw.circle(overlay, ring, (org.x, org.y), fov_radius, width=1)


def draw_organism(screen: pygame.Surface, org: Organism) -> None:
    v = organism_shade(org)
    pygame.draw.circle(screen, (v, v, v), (org.x, org.y), org.radius)


def draw_organisms(screen: pygame.Surface, organisms: Sequence[Organism], fov_radius: float) -> None:
    # rings go down first so every body sits on top of them
    overlay = make_overlay(screen)
    for org in organisms:
        draw_fov(overlay, org, fov_radius)
    screen.blit(overlay, (0, 0))

    for org in organisms:
        draw_organism(screen, org)


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 26)

    lines = [
        f"Population: {stats.get('population', 0)}  Food: {stats.get('food', 0)}",
        f"Births: {stats.get('births', 0)}  Deaths: {stats.get('deaths', 0)}",
        f"Frame: {stats.get('frame', 0)}",
    ]

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD)
        screen.blit(txt, (12, y))
        y += 22
