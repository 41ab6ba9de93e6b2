"""
ecosystem_sim module: organism/organism.py

Organism: a small circle that hunts food while hungry, flees it while full,
and occasionally buds offspring. Updates never touch shared collections;
they report what happened through an OrganismIntent and the World applies it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import List, Optional, Sequence

import config
from evolution.reproduction import spawn_offspring
from organism.states import HungerState, ReproductionState
from world.food import Food
from world.physics import heading_away, heading_to, move_bounded, nearest_food, overlaps


@dataclass
class OrganismIntent:
    """What a single update wants the World to do."""
    eaten: Optional[Food] = None
    offspring: List["Organism"] = field(default_factory=list)


@dataclass
class Organism:
    x: float
    y: float
    radius: float = config.ORGANISM_RADIUS
    max_hunger: float = config.STARVATION_TIME
    reproduction_cooldown: float = config.REPRODUCTION_COOLDOWN

    dx: float = 0.0
    dy: float = 0.0

    hunger: int = 0  # frames since last meal (doubles as digestion counter while full)
    hunger_state: HungerState = HungerState.HUNGRY
    reproduction_timer: int = 0
    reproduction_state: ReproductionState = ReproductionState.COOLING_DOWN

    reproduction_chance: float = config.REPRODUCTION_CHANCE
    extra_reproduction_chance: float = config.EXTRA_REPRODUCTION_CHANCE

    @staticmethod
    def spawn(x: float, y: float, rng=random, **kwargs) -> "Organism":
        """New organism with a random initial velocity in [-1, 1] per axis."""
        return Organism(x=x, y=y, dx=rng.random() * 2 - 1, dy=rng.random() * 2 - 1, **kwargs)

    @property
    def full(self) -> bool:
        return self.hunger_state == HungerState.FULL

    @property
    def ready(self) -> bool:
        return self.reproduction_state == ReproductionState.READY

    def is_starved(self) -> bool:
        return self.hunger > self.max_hunger

    def starvation_ratio(self) -> float:
        return min(self.hunger / self.max_hunger, 1.0)

    def update(self, foods: Sequence[Food], w: float, h: float, rng=random) -> OrganismIntent:
        intent = OrganismIntent()

        self._steer(foods)
        move_bounded(self, w, h)

        if not self.full:
            for f in foods:
                if overlaps(self.x, self.y, self.radius, f.x, f.y, f.radius):
                    self.hunger = 0
                    self.hunger_state = HungerState.FULL
                    intent.eaten = f
                    break

        self.hunger += 1

        if not self.ready:
            self.reproduction_timer += 1
            if self.reproduction_timer >= self.reproduction_cooldown:
                self.reproduction_state = ReproductionState.READY
                self.reproduction_timer = 0

        if (
            self.hunger < self.max_hunger / 2
            and rng.random() < self.reproduction_chance
            and self.ready
        ):
            intent.offspring.extend(self.reproduce(rng))
            self.reproduction_state = ReproductionState.COOLING_DOWN

        # grown organisms skip the cooldown entirely
        if self.radius > config.MATURITY_RADIUS:
            self.reproduction_state = ReproductionState.READY

        if self.full:
            self.hunger += 1
            if self.hunger >= config.FULLNESS_DURATION:
                self.hunger_state = HungerState.HUNGRY
                self.hunger = 0

        return intent

    def _steer(self, foods: Sequence[Food]) -> None:
        if not self.full:
            target, _ = nearest_food(self.x, self.y, foods, max_dist=config.FOV_RADIUS)
            if target is not None:
                self.dx, self.dy = heading_to(self.x, self.y, target.x, target.y)
        else:
            target, _ = nearest_food(self.x, self.y, foods)
            # nothing left to flee from: keep going straight
            if target is not None:
                self.dx, self.dy = heading_away(self.x, self.y, target.x, target.y)

    def reproduce(self, rng=random) -> List["Organism"]:
        children = spawn_offspring(self, rng)
        self.reproduction_state = ReproductionState.COOLING_DOWN
        return children
