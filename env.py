"""Platform detection and environment utilities for the Flappy arcade game.

This module provides a centralized location for runtime platform detection,
isolating browser-specific (pygbag/WASM) concerns from the desktop runtime.

Platform Support
----------------
The game runs in three distinct environments:

1. **Browser (Pygbag/Emscripten/WASM)**:
   - Web deployment via WebAssembly
   - Detected via ``sys.platform == "emscripten"``
   - Requires async/await for cooperative multitasking
   - Uses PyGame compiled to WASM

2. **Desktop (CPython + PyGame)**:
   - Development and play environment with a real window
   - Detected when not in the browser and a video driver is available

3. **Headless (CPython, no display)**:
   - CI runs, bots and tests
   - Detected via ``SDL_VIDEODRIVER=dummy``
   - The simulation runs normally; nothing is shown on screen

Module Variables
----------------
is_browser : bool
    True when running in browser via pygbag (Emscripten/WASM).
is_headless : bool
    True when SDL has been told to use its dummy video driver.
is_desktop : bool
    True when running on desktop CPython with a real display.
debug_enabled : bool
    True when ``FLAPPY_DEBUG`` is set to a non-empty value other than "0".

Example Usage
-------------
Basic platform routing::

    import asyncio
    from env import is_browser

    if is_browser:
        asyncio.run(async_main())
    else:
        main()

Notes
-----
- Platform detection occurs at module import time
- Detection results are cached in module-level variables
- Use ``require_*`` functions for strict platform enforcement
"""

import os
import sys

# ============================================================================
# Platform Detection
# ============================================================================

# Pygbag patches sys.platform to "emscripten"; this is the detection method
# recommended by the pygbag documentation.
is_browser = sys.platform == "emscripten"

is_headless = not is_browser and os.environ.get("SDL_VIDEODRIVER", "") == "dummy"

is_desktop = not is_browser and not is_headless

debug_enabled = os.environ.get("FLAPPY_DEBUG", "") not in ("", "0")


def get_platform_name():
    """Return a human-readable platform name.

    Returns
    -------
    str
        One of the following platform identifiers:
        - "browser" : Running in browser via pygbag/WASM
        - "headless" : Running on CPython with the SDL dummy video driver
        - "desktop" : Running on desktop CPython with PyGame

    Examples
    --------
    >>> from env import get_platform_name
    >>> get_platform_name()
    'desktop'
    """
    if is_browser:
        return "browser"
    elif is_headless:
        return "headless"
    else:
        return "desktop"


def require_browser():
    """Raise an error if not running in browser environment.

    Raises
    ------
    RuntimeError
        If not running in pygbag browser environment (sys.platform != "emscripten").
        Error message includes the detected platform name for debugging.

    See Also
    --------
    require_desktop : Enforce a non-browser environment
    """
    if not is_browser:
        raise RuntimeError(
            "This code requires browser environment (pygbag/Emscripten). "
            f"Current platform: {get_platform_name()}"
        )


def require_desktop():
    """Raise an error if running in the browser.

    Desktop-only paths (blocking loops, ``time.sleep``) would freeze the
    browser tab, so they call this guard first. Headless CPython counts as
    desktop here since it can block freely.

    Raises
    ------
    RuntimeError
        If running in the pygbag browser environment.
    """
    if is_browser:
        raise RuntimeError(
            "This code requires desktop CPython environment. "
            f"Current platform: {get_platform_name()}"
        )
