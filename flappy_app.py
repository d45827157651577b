"""
PyGame front end for the Flappy arcade game.

Wires a `Session` to a pygame window: keyboard/mouse/touch input becomes
game commands, and every published frame is drawn as two pipe rectangles
per obstacle, the avatar box, the score HUD and the start/game-over
overlays. Runs on desktop CPython (blocking `main()`) and in the browser
through pygbag (`async_main()`).

pygame is imported lazily so the simulation and its tests work without it.
"""

import traceback

import env
import game_utils
from flappy_config import FlappyConfig
from flappy_loop import GameLoop
from flappy_session import GAME_OVER, NOT_STARTED, Session
from game_utils import CMD_JUMP, CMD_PLAY_AGAIN, CMD_QUIT, CMD_START, log

# ---------- Colors ----------
SKY = (112, 197, 206)
PIPE = (83, 160, 40)
PIPE_EDGE = (40, 90, 20)
AVATAR = (250, 210, 40)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (220, 40, 40)
SHADE = (0, 0, 0, 140)

CAPTION = "Flappy Arcade"


def _load_pygame():
    try:
        import pygame  # type: ignore
    except Exception as e:
        raise RuntimeError("PyGame not installed. Install with: pip install pygame") from e
    return pygame


def play_again_button(config):
    """Return the (x, y, w, h) rect of the PLAY AGAIN button on the game-over screen."""
    w = 200
    h = 50
    x = (config.screen_width - w) / 2
    y = config.screen_height / 2 + 20
    return (x, y, w, h)


def _inside(rect, pos):
    x, y, w, h = rect
    return x <= pos[0] < x + w and y <= pos[1] < y + h


class _PyGameDisplay:
    def __init__(self, w, h):
        """
        Initialize the PyGame-backed window wrapper.

        Args:
            w (int): Window width in pixels.
            h (int): Window height in pixels.
        """
        self.w = int(w)
        self.h = int(h)
        self._pg = None
        self._screen = None
        self._fonts = {}
        self._inited = False

    @property
    def pygame(self):
        return self._pg

    def start(self):
        """
        Initialize PyGame and open the window.

        Idempotent: does nothing if the display is already running.

        Raises:
            RuntimeError: If pygame cannot be imported.
        """
        if self._inited:
            return
        pygame = _load_pygame()
        self._pg = pygame
        pygame.init()
        # The browser build cannot open audio before a user gesture and the
        # game has no sound anyway.
        if env.is_browser and hasattr(pygame, "mixer"):
            pygame.mixer.quit()
        pygame.display.set_caption(CAPTION)
        self._screen = pygame.display.set_mode((self.w, self.h))
        self._inited = True
        log("DISPLAY", env.get_platform_name(), "%dx%d" % (self.w, self.h))
        self.clear()
        self.show()

    def font(self, size):
        f = self._fonts.get(size)
        if f is None:
            f = self._pg.font.Font(None, size)
            self._fonts[size] = f
        return f

    def clear(self, color=SKY):
        if self._screen is not None:
            self._screen.fill(color)

    def fill_rect(self, x, y, w, h, color):
        """Fill a rectangle; the size is clamped to zero so empty pipes draw nothing."""
        if self._screen is None or w <= 0 or h <= 0:
            return
        self._pg.draw.rect(self._screen, color, self._pg.Rect(int(x), int(y), int(w), int(h)))

    def shade(self, color=SHADE):
        if self._screen is None:
            return
        overlay = self._pg.Surface((self.w, self.h), self._pg.SRCALPHA)
        overlay.fill(color)
        self._screen.blit(overlay, (0, 0))

    def draw_text(self, x, y, text, color, size=36, center=False):
        if self._screen is None:
            return
        surface = self.font(size).render(text, True, color)
        if center:
            x = x - surface.get_width() / 2
        self._screen.blit(surface, (int(x), int(y)))

    def show(self):
        if self._screen is not None:
            self._pg.display.flip()

    def quit(self):
        if self._inited:
            self._pg.quit()
            self._inited = False
            self._screen = None
            self._fonts = {}


class PointerKeyboardInput:
    """
    Translate pygame events into game commands.

    Space / Up / left click / touch  -> JUMP (also starts a new game)
    Enter                            -> START (play again after game over)
    Click on the PLAY AGAIN button   -> PLAY_AGAIN
    Escape / window close            -> QUIT
    """

    def __init__(self, display, config):
        self.display = display
        self.config = config

    def _pointer(self, frame, pos):
        if frame.state == GAME_OVER:
            if _inside(play_again_button(self.config), pos):
                return CMD_PLAY_AGAIN
            return None
        return CMD_JUMP

    def poll(self, frame):
        pygame = self.display.pygame
        if pygame is None:
            return []
        commands = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                commands.append(CMD_QUIT)
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_SPACE, pygame.K_UP):
                    commands.append(CMD_JUMP)
                elif event.key == pygame.K_RETURN:
                    commands.append(CMD_START)
                elif event.key == pygame.K_ESCAPE:
                    commands.append(CMD_QUIT)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                command = self._pointer(frame, event.pos)
                if command:
                    commands.append(command)
            elif event.type == getattr(pygame, "FINGERDOWN", None):
                # touch coordinates are normalized to 0..1
                pos = (event.x * self.config.screen_width, event.y * self.config.screen_height)
                command = self._pointer(frame, pos)
                if command:
                    commands.append(command)
        return commands


class FrameRenderer:
    """Draw published frames onto a `_PyGameDisplay`."""

    def __init__(self, display, config):
        self.display = display
        self.config = config

    def draw_obstacle(self, ob):
        d = self.display
        h = self.config.screen_height
        bottom_top = ob.gap_top + ob.gap_size
        d.fill_rect(ob.x, 0, ob.width, ob.gap_top, PIPE)
        d.fill_rect(ob.x, bottom_top, ob.width, h - bottom_top, PIPE)
        # lips
        d.fill_rect(ob.x, ob.gap_top - 6, ob.width, 6, PIPE_EDGE)
        d.fill_rect(ob.x, bottom_top, ob.width, 6, PIPE_EDGE)

    def draw_avatar(self, frame):
        left = self.config.avatar_left
        self.display.fill_rect(left, frame.avatar_top, frame.avatar_size, frame.avatar_size, AVATAR)

    def draw_overlay(self, frame):
        d = self.display
        cx = self.config.screen_width / 2
        cy = self.config.screen_height / 2
        if frame.state == NOT_STARTED:
            d.draw_text(cx, cy - 80, "FLAPPY", WHITE, size=72, center=True)
            d.draw_text(cx, cy + 60, "SPACE / CLICK TO START", WHITE, size=32, center=True)
        elif frame.state == GAME_OVER:
            d.shade()
            d.draw_text(cx, cy - 90, "GAME OVER", RED, size=72, center=True)
            d.draw_text(cx, cy - 30, "SCORE " + str(frame.score), WHITE, size=40, center=True)
            x, y, w, h = play_again_button(self.config)
            d.fill_rect(x, y, w, h, WHITE)
            d.draw_text(cx, y + 14, "PLAY AGAIN", BLACK, size=32, center=True)

    def draw(self, frame):
        d = self.display
        d.clear()
        for ob in frame.obstacles:
            self.draw_obstacle(ob)
        self.draw_avatar(frame)
        if frame.state != NOT_STARTED:
            d.draw_text(12, 10, str(frame.score), WHITE, size=48)
        self.draw_overlay(frame)
        d.show()


def create_session(config=None, rng=None):
    """Create a fresh NOT_STARTED session with the default (or given) config."""
    return Session(config if config is not None else FlappyConfig(), rng)


def build_loop(display, config):
    """Assemble a GameLoop wired to the pygame display, input and renderer."""
    return GameLoop(
        create_session(config),
        PointerKeyboardInput(display, config),
        FrameRenderer(display, config),
    )


# ---------- Main ----------
def main():
    """
    Desktop entry point.

    Opens the window and runs the blocking game loop until the player
    quits. An unexpected error in a frame is printed and the game returns
    to the start screen with a fresh session.
    """
    env.require_desktop()
    game_utils.VERBOSE = env.debug_enabled
    config = FlappyConfig()
    display = _PyGameDisplay(config.screen_width, config.screen_height)
    display.start()
    loop = build_loop(display, config)
    try:
        while True:
            try:
                loop.main_loop()
                return
            except Exception as e:
                print("Error:", e)
                traceback.print_exc()
                loop.session = create_session(config)
    finally:
        display.quit()


async def async_main():
    """Async entrypoint for pygbag/web: open the canvas and run the cooperative loop."""
    game_utils.VERBOSE = env.debug_enabled
    config = FlappyConfig()
    display = _PyGameDisplay(config.screen_width, config.screen_height)
    display.start()
    loop = build_loop(display, config)
    try:
        while True:
            try:
                await loop.main_loop_async()
                return
            except Exception as e:
                print("Error during game loop:", e)
                traceback.print_exc()
                loop.session = create_session(config)
    finally:
        display.quit()
