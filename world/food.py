"""
ecosystem_sim module: world/food.py

Food system:
- Each item grows a little every frame
- Past the replication threshold it buds a small copy and halves itself
- Items only disappear when an organism eats them
"""

from __future__ import annotations
from dataclasses import dataclass
import math
import random
from typing import List, Optional, Tuple

import config
from render import colors


@dataclass
class Food:
    x: float
    y: float
    radius: float = config.FOOD_RADIUS
    color: Tuple[int, int, int] = colors.FOOD
    growth_rate: float = config.FOOD_GROWTH_RATE
    replication_threshold: float = config.FOOD_REPLICATION_THRESHOLD

    def grow(self) -> None:
        self.radius += self.growth_rate

    def replicate(self, rng=random) -> Optional["Food"]:
        """
        Bud a new item 2 * radius away in a random direction and halve this one.
        Returns the new item (the caller owns the collection), or None.
        """
        if self.radius < self.replication_threshold:
            return None

        angle = rng.random() * math.pi * 2
        distance = self.radius * 2
        child = Food(
            x=self.x + math.cos(angle) * distance,
            y=self.y + math.sin(angle) * distance,
            radius=config.FOOD_RADIUS,
            color=self.color,
            growth_rate=self.growth_rate,
            replication_threshold=self.replication_threshold,
        )
        self.radius /= 2
        return child


def scatter_food(w: float, h: float, n: int, rng=random) -> List[Food]:
    """
    Uniform scatter of fresh food, fully inside the (w, h) box.
    """
    r = config.FOOD_RADIUS
    return [
        Food(x=rng.uniform(r, w - r), y=rng.uniform(r, h - r), radius=r)
        for _ in range(n)
    ]
