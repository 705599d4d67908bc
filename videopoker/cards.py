from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

RANKS = "AKQJT98765432"
SUITS = "SHDC"

# Placeholder shown in every hand position before the first deal.
HOUSE_CARD = "__"

_RNG = random.Random()


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    def __str__(self) -> str:
        return self.label


def build_deck() -> List[Card]:
    """Return the 52 cards in base order: ranks A..2, each in suits S, H, D, C."""
    return [Card(rank, suit) for rank in RANKS for suit in SUITS]


def shuffle(deck: List[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Fisher-Yates shuffle in place. Returns the same list for chaining."""
    rng = rng or _RNG
    for i in range(len(deck) - 1, 0, -1):
        j = rng.randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]
    return deck


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    return Card(label[0], label[1])


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
