import argparse
import os
import sys
from typing import List, Optional

from loguru import logger

from roshambo.config import GameConfig, load_config
from roshambo.game import GameSession

USAGE = """Valid inputs are:
help - lists valid inputs.
random [<number>] - plays a game with random player choices with <number> hands (default {default}).
ordered [<number>] - plays a game with ordered player choices with <number> hands (default {default}).
player - plays a game with player input for hand choice. Runs until exit. No input will also run this version."""

INVALID = 'Invalid input. Use input argument "help" for list of valid inputs.'


def configure_logging(level: str):
    level = os.environ.get("ROSHAMBO_LOG_LEVEL", level).upper()
    logger.remove()
    logger.add(sys.stderr, level=level)


def round_count(text: str) -> int:
    try:
        count = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"round count must be a whole number, got {text!r}") from None
    if count < 0:
        raise argparse.ArgumentTypeError(f"round count cannot be negative, got {count}")
    return count


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="roshambo",
        description="Play rock-paper-scissors against an opponent that learns your habits.",
    )
    p.add_argument("mode", nargs="?", default="player", help="player, random, ordered or help (default: player)")
    p.add_argument("rounds", type=round_count, nargs="?", default=None,
                   help="rounds to play in random/ordered mode (default from config.yaml)")
    return p.parse_args(argv)


def run(args: argparse.Namespace, cfg: GameConfig) -> int:
    mode = args.mode.lower()
    session = GameSession(cfg)

    if mode == "player":
        session.player_game()
    elif mode in ("random", "ordered"):
        count = cfg.default_rounds if args.rounds is None else args.rounds
        logger.info(f"Starting {mode} game with {count} rounds")
        if mode == "random":
            session.random_game(count)
        else:
            session.ordered_game(count)
    elif mode == "help":
        print(USAGE.format(default=cfg.default_rounds))
    else:
        print(INVALID)
        return 2
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_config()
    configure_logging(cfg.log_level)
    logger.debug(f"Hands: {', '.join(cfg.hands)}")
    return run(args, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
