"""
ecosystem_sim module: organism/states.py

Per-concern organism state machines.
"""

from __future__ import annotations
from enum import Enum


class HungerState(Enum):
    HUNGRY = 0  # seeks food inside the field of view
    FULL = 1  # flees the nearest food until digestion finishes


class ReproductionState(Enum):
    COOLING_DOWN = 0
    READY = 1
