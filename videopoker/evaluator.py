from __future__ import annotations

import itertools
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .cards import Card, parse_label
from .models import HandRank, RankOutcome

RANK_ORDER = "23456789TJQKA"
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANK_ORDER, start=2)}

# Scores run from 1 (royal flush) to 7462 (7-5-4-3-2 offsuit). Anything above
# the cutoff is one pair or high card.
ONE_PAIR_CUTOFF = 3325
QUALIFYING_RANKS = frozenset("AKQJ")

_CATEGORY_RANK = {
    8: HandRank.STRAIGHT_FLUSH,
    7: HandRank.FOUR_OF_A_KIND,
    6: HandRank.FULL_HOUSE,
    5: HandRank.FLUSH,
    4: HandRank.STRAIGHT,
    3: HandRank.THREE_OF_A_KIND,
    2: HandRank.TWO_PAIRS,
    1: HandRank.ONE_PAIR,
    0: HandRank.HIGH_CARD,
}

HandKey = Tuple[int, Tuple[int, ...]]
CardLike = Union[Card, str]


def _build_score_table() -> Dict[HandKey, int]:
    """Enumerate the 7462 distinct five-card hands from strongest to weakest."""
    values = sorted(RANK_VALUE.values(), reverse=True)
    straights = [(high,) for high in range(14, 4, -1)]
    straight_sets = {frozenset(range(high - 4, high + 1)) for high in range(6, 15)}
    straight_sets.add(frozenset((14, 5, 4, 3, 2)))

    def others(*used: int) -> List[int]:
        return [value for value in values if value not in used]

    unpaired = [combo for combo in itertools.combinations(values, 5) if frozenset(combo) not in straight_sets]

    classes: List[HandKey] = []
    classes += [(8, high) for high in straights]
    classes += [(7, (quad, kicker)) for quad in values for kicker in others(quad)]
    classes += [(6, (trips, pair)) for trips in values for pair in others(trips)]
    classes += [(5, combo) for combo in unpaired]
    classes += [(4, high) for high in straights]
    classes += [
        (3, (trips,) + kickers) for trips in values for kickers in itertools.combinations(others(trips), 2)
    ]
    classes += [
        (2, (high, low, kicker))
        for high, low in itertools.combinations(values, 2)
        for kicker in others(high, low)
    ]
    classes += [
        (1, (pair,) + kickers) for pair in values for kickers in itertools.combinations(others(pair), 3)
    ]
    classes += [(0, combo) for combo in unpaired]
    return {key: score for score, key in enumerate(classes, start=1)}


_SCORES = _build_score_table()


def score_hand(hand: Sequence[CardLike]) -> RankOutcome:
    """Generic poker rank and score of exactly five cards. Lower score is stronger."""
    cards = _as_cards(hand)
    if len(cards) != 5:
        raise ValueError(f"Hand must contain 5 cards, got {len(cards)}")
    if len(set(cards)) != 5:
        raise ValueError("Hand contains duplicate cards")
    key = _evaluate_five(cards)
    score = _SCORES[key]
    if score == 1:
        return RankOutcome(HandRank.ROYAL_FLUSH, score)
    return RankOutcome(_CATEGORY_RANK[key[0]], score)


def evaluate_hand(hand: Sequence[CardLike]) -> RankOutcome:
    """Score a hand and apply the Jacks-or-Better qualification.

    One pair only pays when the pair is jacks, queens, kings or aces; every
    other hand scoring below two pairs becomes ``NO_WIN`` with score 0.
    """
    cards = _as_cards(hand)
    outcome = score_hand(cards)
    if outcome.score <= ONE_PAIR_CUTOFF:
        return outcome

    faces = [card.rank for card in cards if card.rank in QUALIFYING_RANKS]
    if len(set(faces)) == len(faces):
        return RankOutcome(HandRank.NO_WIN, 0)
    if outcome.rank == HandRank.ONE_PAIR:
        return RankOutcome(HandRank.JACKS_OR_BETTER, outcome.score)
    return outcome


def _as_cards(hand: Sequence[CardLike]) -> List[Card]:
    return [card if isinstance(card, Card) else parse_label(card) for card in hand]


def _evaluate_five(cards: Sequence[Card]) -> HandKey:
    ranks = tuple(sorted((RANK_VALUE[card.rank] for card in cards), reverse=True))
    suits = [card.suit for card in cards]

    is_flush = len(set(suits)) == 1
    straight_high = _straight_high(cards)

    counts: Dict[str, int] = {}
    for card in cards:
        counts.setdefault(card.rank, 0)
        counts[card.rank] += 1

    ordered_counts = sorted(counts.items(), key=lambda x: (x[1], RANK_VALUE[x[0]]), reverse=True)
    count_values = sorted(counts.values(), reverse=True)
    grouped = tuple(RANK_VALUE[r] for r, _ in ordered_counts)

    if straight_high and is_flush:
        return (8, (straight_high,))
    if count_values[0] == 4:
        return (7, grouped)
    if count_values[0] == 3 and count_values[1] == 2:
        return (6, grouped)
    if is_flush:
        return (5, ranks)
    if straight_high:
        return (4, (straight_high,))
    if count_values[0] == 3:
        return (3, grouped)
    if count_values[0] == 2 and count_values[1] == 2:
        return (2, grouped)
    if count_values[0] == 2:
        return (1, grouped)
    return (0, ranks)


def _straight_high(cards: Sequence[Card]) -> Optional[int]:
    ranks = {RANK_VALUE[card.rank] for card in cards}
    if len(ranks) != 5:
        return None
    if ranks == {14, 5, 4, 3, 2}:  # Ace low
        return 5
    if max(ranks) - min(ranks) == 4:
        return max(ranks)
    return None
