from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .errors import UnknownRank
from .models import HandRank

# Full-pay 9/6 Jacks or Better, per credit staked.
PAYTABLE: Mapping[HandRank, int] = MappingProxyType(
    {
        HandRank.ROYAL_FLUSH: 250,
        HandRank.STRAIGHT_FLUSH: 50,
        HandRank.FOUR_OF_A_KIND: 25,
        HandRank.FULL_HOUSE: 9,
        HandRank.FLUSH: 6,
        HandRank.STRAIGHT: 4,
        HandRank.THREE_OF_A_KIND: 3,
        HandRank.TWO_PAIRS: 2,
        HandRank.JACKS_OR_BETTER: 1,
        HandRank.NO_WIN: 0,
    }
)

# ONE_PAIR and HIGH_CARD never leave the evaluator unadjusted.
UNPRICED_RANKS = frozenset({HandRank.ONE_PAIR, HandRank.HIGH_CARD})

assert set(PAYTABLE) | UNPRICED_RANKS == set(HandRank)


def multiplier_for(rank: HandRank, paytable: Mapping[HandRank, int] = PAYTABLE) -> int:
    try:
        return paytable[rank]
    except KeyError:
        raise UnknownRank(f"No payout defined for rank {getattr(rank, 'value', rank)}") from None


def payout_for(rank: HandRank, stake: int, paytable: Mapping[HandRank, int] = PAYTABLE) -> int:
    return multiplier_for(rank, paytable) * stake
