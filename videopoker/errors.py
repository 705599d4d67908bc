from __future__ import annotations


class VideoPokerError(Exception):
    """Base class for errors raised by the round engine."""


class InvalidInput(VideoPokerError, ValueError):
    """A caller-supplied amount was not a finite number."""


class DeckExhausted(VideoPokerError, RuntimeError):
    """The draw cursor ran past the end of the deck."""


class UnknownRank(VideoPokerError, KeyError):
    """A rank reached the payout table that the table does not price."""

    def __str__(self) -> str:
        # KeyError repr-quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""
