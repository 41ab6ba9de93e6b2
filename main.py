"""
Continuous live simulation: organisms hunt growing food, reproduce, and starve in real time.
"""

from __future__ import annotations
import logging
from typing import Optional

import pygame

import config
from logging_config import setup_logging
from render import colors
from render.renderer import draw_food, draw_hud, draw_organisms
from world.world import World

logger = logging.getLogger(__name__)


def render_frame(screen: pygame.Surface, world: World) -> None:
    screen.fill(colors.BG)
    draw_food(screen, world.food)
    draw_organisms(screen, world.organisms, config.FOV_RADIUS)

    stats = {
        "population": len(world.organisms),
        "food": len(world.food),
        "births": world.births,
        "deaths": world.deaths,
        "frame": world.frame,
    }
    draw_hud(screen, stats)


def run(max_frames: Optional[int] = None) -> World:
    """
    Open the window and run frames until it is closed (or max_frames is reached).
    """
    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("ecosystem_sim")
    clock = pygame.time.Clock()

    world = World.create(config.SCREEN_W, config.SCREEN_H, seed=config.SEED)
    world.populate()
    logger.info(
        "Starting with %d organisms and %d food on a %dx%d world",
        len(world.organisms), len(world.food), world.w, world.h,
    )

    running = True
    try:
        while running:
            clock.tick(config.FPS)

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False

            world.step()
            render_frame(screen, world)
            pygame.display.flip()

            if max_frames is not None and world.frame >= max_frames:
                running = False
    finally:
        pygame.quit()

    logger.info(
        "Stopped at frame %d: population %d, births %d, deaths %d",
        world.frame, len(world.organisms), world.births, world.deaths,
    )
    return world


def main() -> None:
    setup_logging(level=config.LOG_LEVEL)
    run()


if __name__ == "__main__":
    main()
