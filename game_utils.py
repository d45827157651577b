"""
Shared runtime utilities for the Flappy arcade game.

This module holds the pieces that are independent of the game rules so
the front end, the game loop and the tests can share them.

Components:
- log: Tagged diagnostic output, silent unless VERBOSE is set
- ticks_ms / ticks_diff / sleep_ms: Millisecond timing helpers
- FrameClock: Polled fixed-interval clock for blocking loops
- IntervalTicker: asyncio task that fires a callback at a fixed interval
- Input command names shared by input sources and the game loop
"""

import asyncio
import time

# Diagnostics are off by default; the front end switches them on with
# FLAPPY_DEBUG=1 and tests may flip it directly.
VERBOSE = False

# ---------- Input commands ----------
CMD_JUMP = "JUMP"
CMD_START = "START"
CMD_PLAY_AGAIN = "PLAY_AGAIN"
CMD_QUIT = "QUIT"


def log(tag, *args):
    """
    Print a tagged diagnostic line when VERBOSE is enabled.

    Args:
        tag (str): Short upper-case event name, e.g. "START" or "SPAWN".
        *args: Extra values printed after the tag.
    """
    if VERBOSE:
        print("FLAPPY:", tag, *args)


def ticks_ms():
    """Return a monotonic timestamp in milliseconds."""
    return int(time.monotonic() * 1000)


def ticks_diff(a, b):
    """Return the difference between two tick values (a - b)."""
    return a - b


def sleep_ms(ms):
    """Block for the specified number of milliseconds."""
    time.sleep(ms / 1000)


class FrameClock:
    """
    Fixed-interval clock polled from a blocking loop.

    The clock is inert until `start()`; `due()` then reports True at most
    once per `interval_ms`. `cancel()` stops it so no further tick is
    reported until it is started again.
    """

    def __init__(self, interval_ms, now=ticks_ms):
        self.interval_ms = interval_ms
        self._now = now
        self._last = None

    @property
    def active(self):
        return self._last is not None

    def start(self):
        self._last = self._now()

    def cancel(self):
        self._last = None

    def due(self):
        """Return True if a tick should fire now, and consume it."""
        if self._last is None:
            return False
        now = self._now()
        late = ticks_diff(now, self._last)
        if late < self.interval_ms:
            return False
        if late >= 2 * self.interval_ms:
            # stalled for more than a whole tick: resync instead of bursting
            self._last = now
        else:
            self._last += self.interval_ms
        return True


class IntervalTicker:
    """
    Call `callback` every `interval_ms` from an asyncio task.

    The callback may return False to stop the ticker from the inside,
    e.g. when the session it drives is no longer running. Use it as an
    async context manager so the pending task is cancelled on every exit
    path::

        async with IntervalTicker(24, on_tick):
            ...
    """

    def __init__(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback
        self._task = None

    @property
    def active(self):
        return self._task is not None and not self._task.done()

    def start(self):
        if self.active:
            return
        self._task = asyncio.ensure_future(self._run())

    def cancel(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def check(self):
        """Re-raise the exception that ended the ticker task, if any."""
        task = self._task
        if task is not None and task.done() and not task.cancelled():
            task.result()

    async def _run(self):
        while True:
            await asyncio.sleep(self.interval_ms / 1000)
            if self.callback() is False:
                return

    async def __aenter__(self):
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        task = self._task
        self.cancel()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                pass
        return False
