"""
Collision tests between the avatar, the obstacles and the screen edges.

The avatar is a square of `avatar_size` whose horizontal span is fixed at
the centre of the screen; only its top edge moves. Two fairness margins
make the hitbox a little more forgiving than the drawn sprite:

- `collision_tolerance` lets the avatar poke that far past the ceiling
  or into a pipe lip vertically.
- `collision_inset` is how much horizontal overlap with a pipe is
  ignored before the pipe counts as touching.

Both absorb the sampling error of a discrete tick: a fast-falling avatar
can visually clip a pipe corner for one frame without having really hit
it. This is intended game feel, not a bug.
"""


def hits_boundary(position, config):
    """Return True if the avatar top at `position` is past the ceiling or ground."""
    return position < -config.collision_tolerance or position >= config.ground_line


def horizontal_overlap(obstacle, config):
    """Width of the overlap between the avatar span and the obstacle span."""
    avatar_left = config.avatar_left
    avatar_right = avatar_left + config.avatar_size
    left = max(avatar_left, obstacle.x)
    right = min(avatar_right, obstacle.x + config.obstacle_width)
    return right - left


def overlaps_horizontally(obstacle, config):
    return horizontal_overlap(obstacle, config) > config.collision_inset


def outside_gap(position, obstacle, config):
    """Return True if any part of the avatar is outside the obstacle's gap."""
    top = position
    bottom = position + config.avatar_size
    tol = config.collision_tolerance
    return (
        top < obstacle.gap_top - tol
        or bottom > obstacle.gap_top + config.gap_size + tol
    )


def hits_obstacle(position, obstacles, config):
    """Return True if the avatar at `position` touches any obstacle."""
    for obstacle in obstacles:
        if overlaps_horizontally(obstacle, config) and outside_gap(
            position, obstacle, config
        ):
            return True
    return False


def collides(position, obstacles, config):
    """Boundary or obstacle collision for a candidate avatar position."""
    return hits_boundary(position, config) or hits_obstacle(position, obstacles, config)
