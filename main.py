"""
Entry point for the Flappy arcade game.

Routes to the blocking desktop loop or, under pygbag in the browser, to
the async loop that yields to the browser event loop between frames.
pygbag looks for this file and runs it as the web app.
"""

import asyncio

import env
import flappy_app


def main():
    """Run the game on desktop CPython."""
    flappy_app.main()


async def async_main():
    """Run the game in the browser (pygbag)."""
    await flappy_app.async_main()


if __name__ == "__main__":
    if env.is_browser:
        asyncio.run(async_main())
    else:
        main()
