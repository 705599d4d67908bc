import argparse
import logging
import sys
from typing import List, Optional

from videopoker.errors import InvalidInput
from videopoker.game import RoundState
from videopoker.models import GameConfig

from .play import play_round


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play one round of Jacks or Better")
    parser.add_argument("--credits", type=float, default=200)
    parser.add_argument("--stake", default="5", help="Credits wagered per round (clamped to 1-5)")
    parser.add_argument("--seed", type=int, default=None, help="Seed the shuffle for a reproducible deal")
    parser.add_argument(
        "--discard-empty",
        action="store_true",
        help="Replace the whole hand when no cards are held (default keeps the hand)",
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    state = RoundState(GameConfig(), seed=args.seed)
    try:
        state.add_credits(args.credits)
        state.set_stake(args.stake)
    except InvalidInput as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not state.can_afford():
        print(f"Error: credit {state.credit} does not cover stake {state.stake}", file=sys.stderr)
        return 1

    try:
        play_round(state, discard_empty=args.discard_empty)
    except (KeyboardInterrupt, EOFError):
        print("\nRound abandoned")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
