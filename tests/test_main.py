"""Smoke test for the windowed loop on SDL's dummy video driver."""

import config
import main


def test_run_stops_after_max_frames(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(config, "SEED", 1)

    world = main.run(max_frames=3)

    assert world.frame == 3
    assert world.w == config.SCREEN_W
    assert len(world.food) >= 1
