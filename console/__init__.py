"""Console front end: plays a round against the videopoker engine."""

from .play import parse_holds, play_round

__all__ = ["parse_holds", "play_round"]
