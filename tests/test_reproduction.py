"""Tests for offspring spawning."""

import random

import config
from evolution.reproduction import spawn_offspring
from organism.organism import Organism
from organism.states import HungerState, ReproductionState


def make_parent(**kwargs):
    defaults = dict(x=200.0, y=300.0, radius=12.0, max_hunger=700, reproduction_cooldown=50)
    defaults.update(kwargs)
    return Organism(**defaults)


def test_single_child_inherits_life_history():
    parent = make_parent(extra_reproduction_chance=0.0)
    children = spawn_offspring(parent, random.Random(2))

    assert len(children) == 1
    child = children[0]
    assert child.radius == config.ORGANISM_RADIUS
    assert child.max_hunger == 700
    assert child.reproduction_cooldown == 50
    assert abs(child.x - parent.x) <= config.CHILD_SPAWN_JITTER
    assert abs(child.y - parent.y) <= config.CHILD_SPAWN_JITTER


def test_children_start_fresh():
    parent = make_parent(extra_reproduction_chance=0.0)
    parent.hunger = 120
    parent.hunger_state = HungerState.FULL
    child = spawn_offspring(parent, random.Random(4))[0]

    assert child.hunger == 0
    assert child.hunger_state == HungerState.HUNGRY
    assert child.reproduction_state == ReproductionState.COOLING_DOWN
    assert child.reproduction_timer == 0
    assert -1.0 <= child.dx <= 1.0
    assert -1.0 <= child.dy <= 1.0


def test_extra_draw_spawns_twin_at_same_spot():
    parent = make_parent(extra_reproduction_chance=1.0)
    children = spawn_offspring(parent, random.Random(8))

    assert len(children) == 2
    assert (children[0].x, children[0].y) == (children[1].x, children[1].y)
    assert children[0] is not children[1]


def test_reproduce_clears_ready_and_is_idempotent():
    parent = make_parent(reproduction_state=ReproductionState.READY)
    rng = random.Random(11)

    first = parent.reproduce(rng)
    assert parent.reproduction_state == ReproductionState.COOLING_DOWN
    second = parent.reproduce(rng)
    assert parent.reproduction_state == ReproductionState.COOLING_DOWN
    assert 1 <= len(first) <= 2
    assert 1 <= len(second) <= 2


def test_reproduction_helpers_do_not_import_organism_module():
    import evolution.reproduction as reproduction

    assert not hasattr(reproduction, "Organism")
