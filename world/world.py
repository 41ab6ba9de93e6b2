"""
ecosystem_sim module: world/world.py

World state container: bounds, the food list and the organism list.

The World is the only owner of both lists. Each frame runs in two phases:
entities are updated over snapshots and report intents, then the World
applies births and deaths. Eaten food is removed as soon as it is reported
so that no two organisms can eat the same item in one frame.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random
from typing import List

import config
from organism.organism import Organism
from world.food import Food, scatter_food

logger = logging.getLogger(__name__)


@dataclass
class FrameStats:
    births: int = 0
    deaths: int = 0
    food_eaten: int = 0
    food_spawned: int = 0


@dataclass
class World:
    w: int
    h: int
    rng: random.Random = field(default_factory=random.Random)
    food: List[Food] = field(default_factory=list)
    organisms: List[Organism] = field(default_factory=list)

    frame: int = 0
    births: int = 0
    deaths: int = 0

    @staticmethod
    def create(w: int, h: int, seed=None) -> "World":
        if w <= 0 or h <= 0:
            raise ValueError(f"world size must be positive, got {w}x{h}")
        return World(w=w, h=h, rng=random.Random(seed))

    def populate(self, n_organisms: int = config.START_POP, n_food: int = config.START_FOOD) -> None:
        r = config.ORGANISM_RADIUS
        for _ in range(n_organisms):
            self.organisms.append(
                Organism.spawn(
                    self.rng.uniform(r, self.w - r),
                    self.rng.uniform(r, self.h - r),
                    rng=self.rng,
                )
            )
        self.food.extend(scatter_food(self.w, self.h, n_food, self.rng))
        logger.debug("Populated world with %d organisms and %d food", n_organisms, n_food)

    def update_food(self, stats: FrameStats) -> None:
        spawned: List[Food] = []
        for f in list(self.food):
            f.grow()
            child = f.replicate(self.rng)
            if child is not None:
                spawned.append(child)

        # replicas join after the pass so they only start growing next frame
        self.food.extend(spawned)
        stats.food_spawned += len(spawned)
        if spawned:
            logger.debug("Frame %d: %d food replicated", self.frame, len(spawned))

    def update_organisms(self, stats: FrameStats) -> None:
        survivors: List[Organism] = []
        newborn: List[Organism] = []

        for org in list(self.organisms):
            intent = org.update(self.food, self.w, self.h, self.rng)

            if intent.eaten is not None:
                self._remove_food(intent.eaten)
                stats.food_eaten += 1

            newborn.extend(intent.offspring)

            if org.is_starved():
                stats.deaths += 1
            else:
                survivors.append(org)

        # offspring go to the end so they are first updated next frame
        self.organisms = survivors + newborn
        stats.births += len(newborn)

    def _remove_food(self, eaten: Food) -> None:
        # identity match: two items can compare equal field-by-field
        for i, f in enumerate(self.food):
            if f is eaten:
                del self.food[i]
                return

    def step(self) -> FrameStats:
        stats = FrameStats()
        had_organisms = bool(self.organisms)
        # frames count from 1
        self.frame += 1

        self.update_food(stats)
        self.update_organisms(stats)

        self.births += stats.births
        self.deaths += stats.deaths

        if stats.births:
            logger.debug("Frame %d: %d born", self.frame, stats.births)
        if stats.deaths:
            logger.debug("Frame %d: %d starved", self.frame, stats.deaths)
        if had_organisms and not self.organisms:
            logger.info("Population died out at frame %d", self.frame)
        return stats
