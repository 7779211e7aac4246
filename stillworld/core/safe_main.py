# stillworld/core/safe_main.py
"""
Safe entrypoint runner:
  - Parses the command line.
  - Configures env for Linux/headless and initializes logging.
  - Catches exceptions and writes a crash log.
  - Runs the Game.
"""
from __future__ import annotations

import argparse
import logging
import time
import traceback
from pathlib import Path
from typing import Optional, Sequence

import stillworld.utils.settings as settings
from stillworld.utils.logging_setup import configure_logging
from stillworld.utils.pygame_bootstrap import configure_environment

EXIT_OK = 0
EXIT_CRASH = 1

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stillworld",
        description="Calm camera world: drift through three mood zones.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=(
            "Keys:\n"
            "  WASD / Arrows  move      SHIFT  slow walk\n"
            "  M  reduced motion   H  high contrast   R  reset   ESC  quit\n"
        ),
    )
    parser.add_argument("--headless", action="store_true",
                        help="Use SDL_VIDEODRIVER=dummy (no window).")
    parser.add_argument("--frames", type=int, default=0,
                        help="Stop after N frames (default: 0 = run until closed).")
    parser.add_argument("--seed", type=int, default=settings.WORLD_SEED,
                        help=f"Decor/noise seed (default: {settings.WORLD_SEED}).")
    parser.add_argument("--reduced-motion", action="store_true",
                        help="Start with reduced motion on.")
    parser.add_argument("--high-contrast", action="store_true",
                        help="Start with high contrast on.")
    parser.add_argument("--log-level", default="INFO",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    parser.add_argument("--log-file", action="store_true",
                        help="Also write logs/stillworld-<timestamp>.log.")
    return parser


def write_crash_report(log_dir: str = "logs") -> Path:
    crash_dir = Path(log_dir)
    crash_dir.mkdir(parents=True, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    path = crash_dir / f"crash_{stamp}.txt"
    path.write_text("Unexpected crash.\n\n" + traceback.format_exc(), encoding="utf-8")
    return path


def run_game(args: argparse.Namespace) -> int:
    # Env must be set before pygame opens a display
    configure_environment(True if args.headless else None)

    from stillworld.core.game import Game
    from stillworld.core.state import Options

    options = Options(reduced_motion=args.reduced_motion, high_contrast=args.high_contrast)
    try:
        game = Game(options, seed=args.seed, headless=args.headless or None)
        return int(game.run(max_frames=max(0, args.frames)) or EXIT_OK)
    except SystemExit as e:
        return int(e.code or 0)
    except Exception as e:
        logger.exception("Unhandled exception in game loop: %s", e)
        path = write_crash_report()
        logger.error("Crash report written to %s", path)
        import pygame
        pygame.quit()
        return EXIT_CRASH


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(getattr(logging, args.log_level), log_to_file=args.log_file)
    logger.debug("Arguments: %s", vars(args))
    return run_game(args)


if __name__ == "__main__":
    raise SystemExit(main())
