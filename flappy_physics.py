"""Vertical physics for the avatar: gravity, jump impulse, terminal velocity."""


def apply_jump(config):
    """Return the velocity after a jump: an instant reset, not an addition."""
    return config.jump_impulse


def fall_velocity(velocity, config):
    """Accelerate `velocity` by one tick of gravity, clamped to terminal velocity."""
    return min(velocity + config.gravity, config.terminal_velocity)


def step(position, velocity, config):
    """
    Advance the avatar by one tick.

    Args:
        position (float): Current avatar top edge.
        velocity (float): Current vertical velocity (positive is down).
        config (FlappyConfig): Gravity and terminal velocity source.

    Returns:
        tuple: Candidate `(position, velocity)` for the next tick. Nothing
        is stored; the caller decides whether to commit it.
    """
    new_velocity = fall_velocity(velocity, config)
    return position + new_velocity, new_velocity
