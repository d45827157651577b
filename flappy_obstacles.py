"""Obstacle records and the generator that spawns them."""

import random
from dataclasses import dataclass

from game_utils import log


@dataclass
class Obstacle:
    """A top/bottom pipe pair with a vertical gap starting at `gap_top`."""

    identifier: int
    x: float
    gap_top: float
    passed: bool = False

    def right_edge(self, width):
        return self.x + width


class ObstacleGenerator:
    """
    Spawn obstacles with unique, increasing identifiers and random gaps.

    The random source is injected so tests can pin the gap sequence; any
    object with a `uniform(a, b)` method works. Identifiers keep counting
    across restarts of the same session so they stay unique for its
    whole lifetime.
    """

    def __init__(self, config, rng=None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self._next_id = 0

    def gap_offset(self):
        """Draw a gap top within `[min_gap_offset, max_gap_offset]`."""
        lo = self.config.min_gap_offset
        hi = self.config.max_gap_offset
        value = self.rng.uniform(lo, hi)
        # random.uniform may round onto either end; clamp for injected sources too
        return min(max(value, lo), hi)

    def spawn(self, x):
        """Create the next obstacle with its left edge at `x`."""
        obstacle = Obstacle(self._next_id, float(x), self.gap_offset())
        self._next_id += 1
        log("SPAWN", obstacle.identifier, "x=%.1f" % obstacle.x, "gap=%.1f" % obstacle.gap_top)
        return obstacle

    def should_spawn(self, obstacles):
        """Return True when the rightmost obstacle has scrolled past the spawn threshold."""
        if not obstacles:
            return True
        rightmost = max(o.x for o in obstacles)
        return rightmost < self.config.spawn_threshold
