from __future__ import annotations

import sys
from pathlib import Path


def _ensure_repo_root_on_path() -> None:
    """Ensure the repository root (parent of this package) is on ``sys.path``.

    If this module is executed as a script (``python simple_math_game/__main__.py``),
    the package may not be discoverable by Python. This helper inserts the
    parent directory of the package into ``sys.path`` so that imports resolve
    correctly.
    """
    pkg_dir = Path(__file__).resolve().parent
    repo_root_str = str(pkg_dir.parent)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


if __package__ in (None, ""):
    _ensure_repo_root_on_path()

from simple_math_game.config import ConfigError, GameConfig  # noqa: E402
from simple_math_game.game import build_game  # noqa: E402
from simple_math_game.logging_config import configure_logging  # noqa: E402


def main() -> int:
    """Entry point for playing the game from the command line."""
    try:
        config = GameConfig.from_env()
    except ConfigError as exc:
        print(f"simple-math-game: {exc}", file=sys.stderr)
        return 2

    log = configure_logging(config.log_level)
    log.debug("starting with seed=%s", config.seed)
    game = build_game(config)
    try:
        return game.run()
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
