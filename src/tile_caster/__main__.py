"""Run the caster in the terminal.

Controls
--------
- `wasd` or arrow-keys to move and turn
- `esc` to exit

Logs are written to `tile_caster.log` in the working directory.
"""

from . import terminal
from .engine import Engine
from .logging_config import setup_logging


def main() -> None:
    setup_logging(log_file="tile_caster.log", console=False)
    terminal.run(Engine())


if __name__ == "__main__":
    main()
