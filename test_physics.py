"""Tests for the avatar physics integrator and the configuration it reads."""

import pytest

import flappy_physics
from flappy_config import FlappyConfig


def make_config(**overrides):
    params = dict(gravity=1, jump_impulse=-8, terminal_velocity=6)
    params.update(overrides)
    return FlappyConfig(**params)


def test_step_applies_gravity_then_moves():
    config = make_config()
    assert flappy_physics.step(100, 0, config) == (101, 1)
    assert flappy_physics.step(100, -8, config) == (93, -7)


def test_step_clamps_to_terminal_velocity():
    config = make_config()
    assert flappy_physics.step(100, 5, config) == (106, 6)
    assert flappy_physics.step(100, 6, config) == (106, 6)
    # already above terminal (e.g. a config change between sessions) still clamps
    assert flappy_physics.step(100, 20, config) == (106, 6)


def test_jump_resets_velocity_instead_of_adding():
    config = make_config()
    assert flappy_physics.apply_jump(config) == -8


def test_step_is_pure():
    config = make_config()
    first = flappy_physics.step(42.5, 2.5, config)
    second = flappy_physics.step(42.5, 2.5, config)
    assert first == second


def test_default_config_derived_values():
    config = FlappyConfig()
    assert config.ground_line == config.screen_height - config.avatar_size
    assert config.avatar_left == pytest.approx(280)
    assert config.spawn_threshold == config.screen_width - config.spawn_spacing
    assert config.min_gap_offset <= config.max_gap_offset


@pytest.mark.parametrize(
    "overrides",
    [
        dict(screen_height=0),
        dict(avatar_size=-1),
        dict(obstacle_speed=0),
        dict(tick_ms=0),
        dict(collision_inset=-1),
        dict(avatar_size=700),
        dict(terminal_velocity=-1),
        dict(jump_impulse=12, terminal_velocity=10),
        dict(gap_size=550, min_gap_offset=50),
    ],
)
def test_config_rejects_impossible_geometry(overrides):
    with pytest.raises(ValueError):
        FlappyConfig(**overrides)


def test_velocity_never_exceeds_terminal_after_start_or_jump():
    import flappy_session

    config = FlappyConfig(jump_impulse=10, terminal_velocity=10)
    session = flappy_session.Session(config)
    flappy_session.start(session)
    assert session.avatar.velocity <= config.terminal_velocity
    flappy_session.jump(session)
    assert session.avatar.velocity <= config.terminal_velocity


def test_config_is_immutable():
    config = FlappyConfig()
    with pytest.raises(AttributeError):
        config.gravity = 2
