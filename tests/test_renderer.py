"""Tests for pygame drawing of food and organisms (no display needed)."""

import pygame

import config
from organism.organism import Organism
from render import colors
from render.renderer import draw_food, draw_organisms, organism_shade
from world.food import Food


def blank(size=(120, 120)):
    surface = pygame.Surface(size)
    surface.fill(colors.BG)
    return surface


# --- Shading ---

def test_shade_fed_is_white():
    org = Organism(x=0.0, y=0.0, max_hunger=500)
    assert organism_shade(org) == 255


def test_shade_darkens_with_hunger():
    org = Organism(x=0.0, y=0.0, max_hunger=500)
    org.hunger = 250
    assert organism_shade(org) == 127


def test_shade_clamps_past_limit():
    org = Organism(x=0.0, y=0.0, max_hunger=500)
    org.hunger = 900
    assert organism_shade(org) == 0


# --- Drawing ---

def test_draw_food_fills_circle():
    screen = blank()
    draw_food(screen, [Food(x=60.0, y=60.0, radius=4.0)])
    assert tuple(screen.get_at((60, 60)))[:3] == colors.FOOD
    assert tuple(screen.get_at((5, 5)))[:3] == colors.BG


def test_draw_organism_body_and_fov_ring():
    screen = blank()
    org = Organism(x=60.0, y=60.0)
    draw_organisms(screen, [org], config.FOV_RADIUS)

    assert tuple(screen.get_at((60, 60)))[:3] == (255, 255, 255)
    # the translucent ring tints the background towards blue
    edge = 60 + int(config.FOV_RADIUS)
    blues = [screen.get_at((x, 60)).b for x in range(edge - 3, edge + 2)]
    assert max(blues) > colors.BG[2]


def test_body_covers_its_own_ring():
    screen = blank()
    org = Organism(x=60.0, y=60.0, radius=5.0)
    # a ring smaller than the body must be hidden underneath it
    draw_organisms(screen, [org], 3.0)

    for x in range(57, 64):
        assert tuple(screen.get_at((x, 60)))[:3] == (255, 255, 255)
