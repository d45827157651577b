#!/usr/bin/env python3
"""
Platform compatibility test suite for the Flappy arcade game.

Checks that the application keeps working on both target runtimes:
1. Desktop (CPython + PyGame, or headless with SDL_VIDEODRIVER=dummy)
2. Browser (Pygbag/Emscripten + WASM)

Runs under pytest, or directly as a script for a quick summary.
"""

import inspect
import sys
import time


def banner(title):
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def test_imports():
    """All modules import without pygame being initialized."""
    banner("TEST 1: Module Imports")

    import env
    import flappy_app
    import flappy_collision
    import flappy_config
    import flappy_loop
    import flappy_obstacles
    import flappy_physics
    import flappy_session
    import game_utils
    import main

    for mod in (
        main,
        flappy_app,
        env,
        game_utils,
        flappy_config,
        flappy_loop,
        flappy_obstacles,
        flappy_physics,
        flappy_collision,
        flappy_session,
    ):
        print(f"✓ {mod.__name__} imports successfully")


def test_platform_detection():
    banner("TEST 2: Platform Detection")

    import env

    print(f"\nCurrent platform: {sys.platform}")
    print(f"  env.is_browser: {env.is_browser}")
    print(f"  env.is_headless: {env.is_headless}")
    print(f"  env.is_desktop: {env.is_desktop}")

    assert env.is_browser == (sys.platform == "emscripten")
    assert [env.is_browser, env.is_headless, env.is_desktop].count(True) == 1
    assert env.get_platform_name() in ("browser", "headless", "desktop")


def test_platform_guards():
    banner("TEST 3: Platform Guards")

    import env

    if env.is_browser:
        env.require_browser()
        try:
            env.require_desktop()
        except RuntimeError as e:
            print(f"✓ require_desktop raised: {e}")
        else:
            raise AssertionError("require_desktop should raise in the browser")
    else:
        env.require_desktop()
        try:
            env.require_browser()
        except RuntimeError as e:
            print(f"✓ require_browser raised: {e}")
            assert env.get_platform_name() in str(e)
        else:
            raise AssertionError("require_browser should raise outside the browser")


def test_async_functions():
    banner("TEST 4: Async Function Definitions")

    import flappy_app
    import flappy_loop
    import main

    assert not inspect.iscoroutinefunction(main.main)
    assert inspect.iscoroutinefunction(main.async_main)
    assert not inspect.iscoroutinefunction(flappy_app.main)
    assert inspect.iscoroutinefunction(flappy_app.async_main)
    assert not inspect.iscoroutinefunction(flappy_loop.GameLoop.main_loop)
    assert inspect.iscoroutinefunction(flappy_loop.GameLoop.main_loop_async)
    print("✓ sync/async entry points are correctly defined")


def test_sleep_function():
    banner("TEST 5: Sleep Function")

    import game_utils

    start = time.time()
    game_utils.sleep_ms(10)
    elapsed = (time.time() - start) * 1000
    print(f"  sleep_ms(10) took {elapsed:.1f}ms")
    assert elapsed >= 8

    params = list(inspect.signature(game_utils.sleep_ms).parameters.keys())
    assert params == ["ms"]


def test_display_abstraction():
    banner("TEST 6: Display Abstraction")

    import flappy_app

    display = flappy_app._PyGameDisplay(600, 600)
    for method in ("start", "clear", "fill_rect", "draw_text", "show", "quit"):
        assert hasattr(display, method), f"display.{method} missing"
        print(f"✓ display.{method} exists")

    # drawing before start() is a silent no-op
    display.fill_rect(0, 0, 10, 10, flappy_app.PIPE)
    display.draw_text(0, 0, "X", flappy_app.WHITE)
    display.show()
    display.quit()


def test_game_constants():
    banner("TEST 7: Game Constants")

    import flappy_config

    constants = {
        "SCREEN_WIDTH": 600,
        "SCREEN_HEIGHT": 600,
        "AVATAR_SIZE": 40,
        "TICK_MS": 24,
    }
    for const, expected in constants.items():
        value = getattr(flappy_config, const)
        print(f"✓ {const} = {value}")
        assert value == expected

    config = flappy_config.FlappyConfig()
    assert config.ground_line == 560
    assert config.avatar_center_x == 300


def run_all_tests():
    """Run all compatibility tests and print a summary."""
    banner("FLAPPY ARCADE - PLATFORM COMPATIBILITY TEST SUITE")

    tests = [
        ("Module Imports", test_imports),
        ("Platform Detection", test_platform_detection),
        ("Platform Guards", test_platform_guards),
        ("Async Functions", test_async_functions),
        ("Sleep Function", test_sleep_function),
        ("Display Abstraction", test_display_abstraction),
        ("Game Constants", test_game_constants),
    ]

    results = []
    for name, test_func in tests:
        try:
            test_func()
            results.append((name, True))
        except Exception as e:
            print(f"\n✗ Test '{name}' raised exception: {e}")
            import traceback

            traceback.print_exc()
            results.append((name, False))

    banner("TEST SUMMARY")
    passed = sum(1 for _, result in results if result)
    total = len(results)
    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        print(f"  {status:8} {name}")
    print(f"\nResult: {passed}/{total} tests passed")
    return 0 if passed == total else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
