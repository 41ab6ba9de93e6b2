"""
Live reproduction helpers: offspring spawn next to their parent.
"""

from __future__ import annotations
import random
from typing import List, Tuple, TYPE_CHECKING

import config

if TYPE_CHECKING:
    from organism.organism import Organism


def jitter_position(x: float, y: float, jitter: float, rng=random) -> Tuple[float, float]:
    return x + rng.uniform(-jitter, jitter), y + rng.uniform(-jitter, jitter)


def make_child(parent: Organism, x: float, y: float, rng=random) -> Organism:
    # children always start small; only the life-history traits are inherited
    return parent.spawn(
        x,
        y,
        rng=rng,
        radius=config.ORGANISM_RADIUS,
        max_hunger=parent.max_hunger,
        reproduction_cooldown=parent.reproduction_cooldown,
    )


def spawn_offspring(parent: Organism, rng=random) -> List[Organism]:
    """
    One child at a jittered spot near the parent, plus a twin at the same spot
    when the extra-reproduction draw succeeds.
    """
    x, y = jitter_position(parent.x, parent.y, config.CHILD_SPAWN_JITTER, rng)

    children = [make_child(parent, x, y, rng)]
    if rng.random() < parent.extra_reproduction_chance:
        children.append(make_child(parent, x, y, rng))
    return children
