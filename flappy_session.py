"""
Game state machine for one Flappy play-through.

A `Session` is a plain value owned by whoever drives the game (the
front end, a test, a bot). The transition functions `start`, `jump`,
`tick` and `play_again` take it as their first argument and mutate it;
there is no module-level game state, so any number of sessions can run
side by side.

Each transition ends by publishing an immutable `Frame`. Renderers only
ever read `session.frame`, so they never see a half-updated tick.

States::

    NOT_STARTED --start/jump--> RUNNING --collision--> GAME_OVER
                                   ^                       |
                                   +------play_again-------+

Calling a transition in a state that does not allow it is a no-op.
"""

from dataclasses import dataclass
from typing import Tuple

import flappy_collision
import flappy_physics
from flappy_config import FlappyConfig
from flappy_obstacles import ObstacleGenerator
from game_utils import log

NOT_STARTED = "NOT_STARTED"
RUNNING = "RUNNING"
GAME_OVER = "GAME_OVER"


@dataclass
class Avatar:
    position: float
    velocity: float = 0.0


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_top: float
    gap_size: float
    width: float


@dataclass(frozen=True)
class Frame:
    """Snapshot handed to the renderer after every transition."""

    avatar_top: float
    avatar_size: float
    obstacles: Tuple[ObstacleView, ...]
    score: int
    state: str


class Session:
    """
    Mutable state of one player's game.

    Args:
        config (FlappyConfig): Constants for the whole session; defaults
            to `FlappyConfig()`.
        rng: Random source for gap offsets (see `ObstacleGenerator`).
    """

    def __init__(self, config=None, rng=None):
        self.config = config if config is not None else FlappyConfig()
        self.generator = ObstacleGenerator(self.config, rng)
        self.state = NOT_STARTED
        self.score = 0
        self.obstacles = []
        self.avatar = Avatar(self.config.start_position)
        self.frame = _publish(self)

    @property
    def started(self):
        return self.state != NOT_STARTED

    @property
    def running(self):
        return self.state == RUNNING

    @property
    def over(self):
        return self.state == GAME_OVER


def _publish(session):
    config = session.config
    views = tuple(
        ObstacleView(o.x, o.gap_top, config.gap_size, config.obstacle_width)
        for o in session.obstacles
    )
    frame = Frame(
        avatar_top=session.avatar.position,
        avatar_size=config.avatar_size,
        obstacles=views,
        score=session.score,
        state=session.state,
    )
    session.frame = frame
    return frame


def start(session):
    """
    Begin a fresh run from NOT_STARTED or GAME_OVER.

    The avatar starts at `start_position` already moving up at the jump
    impulse, so the first frames rise instead of dropping straight away.
    One obstacle is placed near the right edge.
    """
    if session.state == RUNNING:
        return session.frame
    config = session.config
    session.score = 0
    session.avatar = Avatar(config.start_position, flappy_physics.apply_jump(config))
    session.obstacles = [session.generator.spawn(config.first_obstacle_x)]
    session.state = RUNNING
    log("START", "pos=%.1f" % session.avatar.position)
    return _publish(session)


def play_again(session):
    """Restart after a game over; ignored in any other state."""
    if session.state != GAME_OVER:
        return session.frame
    return start(session)


def jump(session):
    """Flap: starts the game if needed, otherwise resets velocity to the impulse."""
    if session.state == NOT_STARTED:
        return start(session)
    if session.state == RUNNING:
        session.avatar.velocity = flappy_physics.apply_jump(session.config)
        return _publish(session)
    return session.frame


def tick(session):
    """
    Advance a running session by one simulation step.

    Collision is checked with the candidate avatar position against the
    obstacles as they were at the start of the tick. On a hit the session
    ends with the avatar left at its last safe position and the obstacles
    unscrolled, so the frozen frame shows where the player was, not where
    they crashed.

    Returns:
        Frame: The frame published by this tick (or the current one when
        the session is not running).
    """
    if session.state != RUNNING:
        return session.frame
    config = session.config
    obstacles = list(session.obstacles)

    position, velocity = flappy_physics.step(
        session.avatar.position, session.avatar.velocity, config
    )

    if flappy_collision.collides(position, obstacles, config):
        session.state = GAME_OVER
        log("GAME OVER", "score=%d" % session.score)
        return _publish(session)

    session.avatar = Avatar(position, velocity)

    width = config.obstacle_width
    for obstacle in obstacles:
        obstacle.x -= config.obstacle_speed

    for obstacle in obstacles:
        if not obstacle.passed and obstacle.right_edge(width) < config.avatar_center_x:
            obstacle.passed = True
            session.score += 1

    obstacles = [o for o in obstacles if o.right_edge(width) >= 0]

    if session.generator.should_spawn(obstacles):
        obstacles.append(session.generator.spawn(config.screen_width))

    session.obstacles = obstacles
    return _publish(session)


def frame(session):
    """Return the last published frame."""
    return session.frame
