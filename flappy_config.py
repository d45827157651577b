"""
Configuration constants for the Flappy arcade game.

Defaults live at module level so the front end and tests can refer to
them directly. A session reads them only through an immutable
`FlappyConfig`, built once when the session is created.

Coordinates are screen pixels with the origin in the top-left corner:
a positive velocity moves the avatar down, so the jump impulse is
negative.
"""

from dataclasses import dataclass

# ---------- Screen ----------
SCREEN_WIDTH = 600
SCREEN_HEIGHT = 600

# ---------- Avatar ----------
AVATAR_SIZE = 40
START_POSITION = 250

# ---------- Physics (per tick) ----------
GRAVITY = 0.6
JUMP_IMPULSE = -9.0
TERMINAL_VELOCITY = 10.0

# ---------- Obstacles ----------
GAP_SIZE = 170
OBSTACLE_WIDTH = 50
OBSTACLE_SPEED = 5
SPAWN_SPACING = 280
MIN_GAP_OFFSET = 50
FIRST_OBSTACLE_OFFSET = 100  # first obstacle spawns this far left of the right edge

# ---------- Collision fairness ----------
COLLISION_TOLERANCE = 2
COLLISION_INSET = 4

# ---------- Timing ----------
TICK_MS = 24


@dataclass(frozen=True)
class FlappyConfig:
    """Immutable bundle of every constant a session depends on.

    Any field may be overridden by keyword; the geometry is validated on
    construction so a session never runs with an impossible layout.

    Raises:
        ValueError: If a size is not positive, the gap cannot fit between
            the two `min_gap_offset` margins, the jump impulse exceeds the
            terminal velocity, or a timing value is invalid.
    """

    screen_width: float = SCREEN_WIDTH
    screen_height: float = SCREEN_HEIGHT
    avatar_size: float = AVATAR_SIZE
    start_position: float = START_POSITION
    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    terminal_velocity: float = TERMINAL_VELOCITY
    gap_size: float = GAP_SIZE
    obstacle_width: float = OBSTACLE_WIDTH
    obstacle_speed: float = OBSTACLE_SPEED
    spawn_spacing: float = SPAWN_SPACING
    min_gap_offset: float = MIN_GAP_OFFSET
    first_obstacle_offset: float = FIRST_OBSTACLE_OFFSET
    collision_tolerance: float = COLLISION_TOLERANCE
    collision_inset: float = COLLISION_INSET
    tick_ms: int = TICK_MS

    def __post_init__(self):
        for name in (
            "screen_width",
            "screen_height",
            "avatar_size",
            "gap_size",
            "obstacle_width",
            "obstacle_speed",
            "spawn_spacing",
            "tick_ms",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(
                    "{} must be positive, got {!r}".format(name, getattr(self, name))
                )
        for name in ("min_gap_offset", "collision_tolerance", "collision_inset"):
            if getattr(self, name) < 0:
                raise ValueError(
                    "{} must not be negative, got {!r}".format(name, getattr(self, name))
                )
        if self.avatar_size > self.screen_height:
            raise ValueError(
                "avatar_size ({}) does not fit on a screen {} high".format(
                    self.avatar_size, self.screen_height
                )
            )
        if self.terminal_velocity < 0:
            raise ValueError("terminal_velocity must not be negative")
        if self.jump_impulse > self.terminal_velocity:
            raise ValueError(
                "jump_impulse ({}) exceeds terminal_velocity ({})".format(
                    self.jump_impulse, self.terminal_velocity
                )
            )
        if self.max_gap_offset < self.min_gap_offset:
            raise ValueError(
                "gap_size ({}) leaves no room for min_gap_offset ({}) "
                "on a screen {} high".format(
                    self.gap_size, self.min_gap_offset, self.screen_height
                )
            )

    @property
    def max_gap_offset(self) -> float:
        """Largest gap top that still leaves `min_gap_offset` below the gap."""
        return self.screen_height - self.gap_size - self.min_gap_offset

    @property
    def ground_line(self) -> float:
        """Avatar top position at which it touches the ground."""
        return self.screen_height - self.avatar_size

    @property
    def avatar_left(self) -> float:
        return self.screen_width / 2 - self.avatar_size / 2

    @property
    def avatar_center_x(self) -> float:
        return self.screen_width / 2

    @property
    def first_obstacle_x(self) -> float:
        return self.screen_width - self.first_obstacle_offset

    @property
    def spawn_threshold(self) -> float:
        """A new obstacle spawns once the rightmost one is left of this x."""
        return self.screen_width - self.spawn_spacing
