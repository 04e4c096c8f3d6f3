"""Runs an engine in the terminal.

Output goes through curses; held keys are tracked with a pynput listener, so
the terminal window must have focus for input to be received.
"""

import curses
import logging
import os
import signal
from collections import defaultdict
from platform import uname
from time import monotonic

from pynput import keyboard
from pynput.keyboard import Key, KeyCode

from .engine import Engine
from .integrator import InputKey
from .surface import TerminalSurface

__all__ = ["KEY_BINDINGS", "QUIT_KEY", "held_inputs", "run"]

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[Key | KeyCode, InputKey] = {
    Key.up: InputKey.FORWARD,
    KeyCode(char="w"): InputKey.FORWARD,
    Key.down: InputKey.BACKWARD,
    KeyCode(char="s"): InputKey.BACKWARD,
    Key.left: InputKey.ROTATE_LEFT,
    KeyCode(char="a"): InputKey.ROTATE_LEFT,
    Key.right: InputKey.ROTATE_RIGHT,
    KeyCode(char="d"): InputKey.ROTATE_RIGHT,
}
QUIT_KEY: Key = Key.esc

_IS_WINDOWS: bool = uname().system == "Windows"


def held_inputs(pressed_keys: dict) -> frozenset[InputKey]:
    """Snapshot of the movement inputs whose keys are held."""
    return frozenset(
        action for key, action in KEY_BINDINGS.items() if pressed_keys.get(key, False)
    )


def run(engine: Engine) -> None:
    """Run `engine` until `esc` is pressed."""
    curses.wrapper(_run, engine)


def _run(screen, engine: Engine) -> None:
    curses.curs_set(0)
    curses.init_pair(1, curses.COLOR_GREEN, curses.COLOR_BLACK)
    screen.attron(curses.color_pair(1))
    screen.nodelay(True)

    surface = TerminalSurface(engine.settings.screen_width, engine.settings.screen_height)
    resized: bool = True

    pressed_keys = defaultdict(bool)

    def on_press(key):
        pressed_keys[key] = True

    def on_release(key):
        pressed_keys[key] = False

    def set_resized(*args):
        nonlocal resized
        resized = True

    listener = keyboard.Listener(on_press=on_press, on_release=on_release)
    listener.start()
    if not _IS_WINDOWS:
        signal.signal(signal.SIGWINCH, set_resized)

    logger.info("Frame loop started.")
    try:
        last_time = monotonic()
        while not pressed_keys[QUIT_KEY]:
            current_time = monotonic()
            dt = current_time - last_time
            last_time = current_time
            if resized or _IS_WINDOWS and screen.getch() == curses.KEY_RESIZE:
                if _IS_WINDOWS:
                    height, width = screen.getmaxyx()
                else:
                    width, height = os.get_terminal_size()
                    curses.resizeterm(height, width)
                # Writing the bottom right cell raises in curses.
                surface.resize(width - 1, height)
                logger.debug("Terminal resized to %dx%d.", width, height)
                resized = False

            surface.paint(engine.on_tick(dt, held_inputs(pressed_keys)))
            for row_num, row in enumerate(surface.lines()):
                screen.addstr(row_num, 0, row)
            screen.refresh()
    finally:
        listener.stop()
        if not _IS_WINDOWS:
            signal.signal(signal.SIGWINCH, signal.SIG_DFL)

        curses.flushinp()
        curses.endwin()
        logger.info("Frame loop stopped.")
