"""
Game loop that connects a Session to a clock, an input source and a renderer.

The loop owns no game state of its own. Each frame it:

1. Polls the input source for commands (jump, start, play again, quit)
2. Lets the clock fire `tick()` while the session is running
3. Hands the published frame to the renderer

The clock only runs while the session is RUNNING. Leaving that state
(game over) or leaving the loop (quit, exception) cancels it, so no tick
can fire for a session nobody is drawing any more.

Input sources implement `poll(frame)` returning an iterable of command
names from `game_utils`; renderers implement `draw(frame)`.
"""

import asyncio

import flappy_session
from game_utils import (
    CMD_JUMP,
    CMD_PLAY_AGAIN,
    CMD_QUIT,
    CMD_START,
    FrameClock,
    IntervalTicker,
    log,
    sleep_ms,
)


class GameLoop:
    """
    Drive one Session until the player quits.

    Args:
        session (Session): The session to run; replaceable between runs.
        input_source: Object with `poll(frame)`; None means no input.
        renderer: Object with `draw(frame)`; None means headless.
        clock (FrameClock): Tick source for `main_loop`; defaults to one
            firing every `config.tick_ms`.
        frame_ms (int): Delay between input/render passes.
    """

    def __init__(self, session, input_source=None, renderer=None, clock=None, frame_ms=8):
        self.session = session
        self.input_source = input_source
        self.renderer = renderer
        self.clock = clock if clock is not None else FrameClock(session.config.tick_ms)
        self.frame_ms = frame_ms
        self.running = False
        self.frame_count = 0

    def stop(self):
        self.running = False

    def handle_command(self, command):
        """Apply one input command to the session."""
        session = self.session
        if command == CMD_QUIT:
            self.stop()
        elif command == CMD_JUMP:
            flappy_session.jump(session)
        elif command == CMD_START:
            if session.over:
                flappy_session.play_again(session)
            else:
                flappy_session.start(session)
        elif command == CMD_PLAY_AGAIN:
            flappy_session.play_again(session)
        else:
            log("UNKNOWN COMMAND", command)

    def poll_input(self):
        if self.input_source is None:
            return
        for command in self.input_source.poll(self.session.frame):
            self.handle_command(command)
            if not self.running:
                return

    def draw(self):
        if self.renderer is not None:
            self.renderer.draw(self.session.frame)

    def update(self):
        """
        Run one pass of the blocking loop.

        Returns:
            bool: False once the player has quit.
        """
        self.poll_input()
        if not self.running:
            return False

        if self.session.running:
            if not self.clock.active:
                self.clock.start()
            if self.clock.due():
                flappy_session.tick(self.session)
        if not self.session.running and self.clock.active:
            self.clock.cancel()

        self.draw()
        self.frame_count += 1
        return True

    def main_loop(self):
        """Blocking loop for desktop use; returns when the player quits."""
        self.running = True
        self.frame_count = 0
        try:
            while self.update():
                sleep_ms(self.frame_ms)
        finally:
            self.clock.cancel()
            self.running = False

    def _on_tick(self):
        # IntervalTicker callback: returning False stops the ticker task
        if not self.session.running:
            return False
        flappy_session.tick(self.session)
        return self.session.running

    async def main_loop_async(self):
        """
        Cooperative loop for the browser (pygbag).

        Ticks come from an `IntervalTicker` task that exists only while the
        session is running; input and rendering run in this coroutine and
        yield to the event loop between frames.
        """
        self.running = True
        self.frame_count = 0
        ticker = None
        try:
            while self.running:
                self.poll_input()
                if not self.running:
                    break

                if ticker is not None:
                    # a failed tick surfaces here instead of dying with its task
                    ticker.check()

                if self.session.running and (ticker is None or not ticker.active):
                    ticker = IntervalTicker(self.session.config.tick_ms, self._on_tick)
                    ticker.start()
                elif not self.session.running and ticker is not None:
                    ticker.cancel()
                    ticker = None

                self.draw()
                self.frame_count += 1
                await asyncio.sleep(self.frame_ms / 1000)
        finally:
            if ticker is not None:
                ticker.cancel()
            self.running = False
