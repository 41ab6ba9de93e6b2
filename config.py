"""
Simulation tuning knobs.
"""

import logging

# Population controls
START_POP = 20
START_FOOD = 50

# Organism senses + life
FOV_RADIUS = 50.0
STARVATION_TIME = 500  # frames without a meal before death
FULLNESS_DURATION = 300  # hunger counter value at which a full organism gets hungry again
ORGANISM_RADIUS = 5.0
MATURITY_RADIUS = 10.0  # above this an organism is always ready to reproduce

# Reproduction
REPRODUCTION_CHANCE = 0.03
EXTRA_REPRODUCTION_CHANCE = 0.01  # second offspring
REPRODUCTION_COOLDOWN = 600  # frames
CHILD_SPAWN_JITTER = 10.0

# Food field
FOOD_RADIUS = 3.0
FOOD_GROWTH_RATE = 0.01  # radius per frame
FOOD_REPLICATION_THRESHOLD = 10.0

# Runtime pacing
FPS = 60
SEED = None  # set to an int for a reproducible run

# Environment
SCREEN_W, SCREEN_H = 980, 720

LOG_LEVEL = logging.INFO
