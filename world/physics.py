"""
ecosystem_sim module: world/physics.py

Top-down 2D movement:
- nearest-food search (optionally limited to a sensing radius)
- unit headings towards / away from a point
- bounded movement that reflects velocity at the world edges
"""

from __future__ import annotations
import math
from typing import Optional, Sequence, Tuple

from world.food import Food


def nearest_food(
    x: float,
    y: float,
    foods: Sequence[Food],
    max_dist: float = float("inf"),
) -> Tuple[Optional[Food], float]:
    """
    Returns (food, distance) for the nearest item strictly closer than max_dist,
    or (None, max_dist) if there is none. Ties keep the earliest item.
    """
    best = None
    best_d = max_dist
    for f in foods:
        d = math.hypot(x - f.x, y - f.y)
        if d < best_d:
            best_d = d
            best = f
    return best, best_d


def heading_to(x: float, y: float, tx: float, ty: float) -> Tuple[float, float]:
    angle = math.atan2(ty - y, tx - x)
    return math.cos(angle), math.sin(angle)


def heading_away(x: float, y: float, tx: float, ty: float) -> Tuple[float, float]:
    angle = math.atan2(y - ty, x - tx)
    return math.cos(angle), math.sin(angle)


def move_bounded(org, w: float, h: float) -> None:
    """
    Advance org by its velocity. If its edge leaves the (w, h) box the matching
    velocity component flips and the position is clamped back inside.
    """
    org.x += org.dx
    org.y += org.dy

    r = org.radius
    if org.x + r > w or org.x - r < 0:
        org.dx = -org.dx
        org.x = max(r, min(w - r, org.x))
    if org.y + r > h or org.y - r < 0:
        org.dy = -org.dy
        org.y = max(r, min(h - r, org.y))


def overlaps(ax: float, ay: float, ar: float, bx: float, by: float, br: float) -> bool:
    return math.hypot(ax - bx, ay - by) < ar + br
