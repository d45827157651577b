"""Tests for obstacle spawning and gap offset generation."""

import random

from flappy_config import FlappyConfig
from flappy_obstacles import Obstacle, ObstacleGenerator


class ScriptedRandom:
    """Random source returning a fixed sequence from `uniform()`."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def uniform(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


def test_gap_offsets_stay_within_bounds():
    config = FlappyConfig()
    gen = ObstacleGenerator(config, random.Random(1234))
    for _ in range(1000):
        ob = gen.spawn(config.screen_width)
        assert config.min_gap_offset <= ob.gap_top <= config.max_gap_offset


def test_injected_source_is_used_with_gap_bounds():
    config = FlappyConfig()
    rng = ScriptedRandom([120.0, 300.0])
    gen = ObstacleGenerator(config, rng)
    assert gen.spawn(600).gap_top == 120.0
    assert gen.spawn(600).gap_top == 300.0
    assert rng.calls == [(config.min_gap_offset, config.max_gap_offset)] * 2


def test_out_of_range_values_are_clamped():
    config = FlappyConfig()
    gen = ObstacleGenerator(config, ScriptedRandom([-10.0, 10_000.0]))
    assert gen.spawn(600).gap_top == config.min_gap_offset
    assert gen.spawn(600).gap_top == config.max_gap_offset


def test_identifiers_strictly_increase():
    gen = ObstacleGenerator(FlappyConfig(), random.Random(7))
    ids = [gen.spawn(600).identifier for _ in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5


def test_spawned_obstacle_fields():
    gen = ObstacleGenerator(FlappyConfig(), ScriptedRandom([200.0]))
    ob = gen.spawn(600)
    assert ob.x == 600.0
    assert ob.passed is False
    assert ob.right_edge(50) == 650.0


def test_should_spawn_uses_rightmost_obstacle():
    config = FlappyConfig(screen_width=600, spawn_spacing=280)
    gen = ObstacleGenerator(config, random.Random(0))
    assert gen.should_spawn([])
    assert not gen.should_spawn([Obstacle(0, 320.0, 100.0)])
    assert gen.should_spawn([Obstacle(0, 319.0, 100.0)])
    # one obstacle past the threshold is not enough if another is further right
    assert not gen.should_spawn([Obstacle(0, 100.0, 100.0), Obstacle(1, 400.0, 100.0)])
