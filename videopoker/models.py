from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class HandRank(str, Enum):
    ROYAL_FLUSH = "ROYAL_FLUSH"
    STRAIGHT_FLUSH = "STRAIGHT_FLUSH"
    FOUR_OF_A_KIND = "FOUR_OF_A_KIND"
    FULL_HOUSE = "FULL_HOUSE"
    FLUSH = "FLUSH"
    STRAIGHT = "STRAIGHT"
    THREE_OF_A_KIND = "THREE_OF_A_KIND"
    TWO_PAIRS = "TWO_PAIRS"
    ONE_PAIR = "ONE_PAIR"
    HIGH_CARD = "HIGH_CARD"
    # Produced only by the Jacks-or-Better adjustment.
    JACKS_OR_BETTER = "JACKS_OR_BETTER"
    NO_WIN = "NO_WIN"


@dataclass(frozen=True)
class RankOutcome:
    rank: HandRank
    score: int


@dataclass
class GameConfig:
    min_stake: int = 1
    max_stake: int = 5
    # None selects the standard 9/6 table from videopoker.paytable.
    paytable: Optional[Mapping[HandRank, int]] = None

    def __post_init__(self) -> None:
        if self.min_stake < 1:
            raise ValueError(f"Invalid min_stake: {self.min_stake}")
        if self.min_stake > self.max_stake:
            raise ValueError(f"min_stake {self.min_stake} exceeds max_stake {self.max_stake}")
