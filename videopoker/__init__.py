"""Jacks or Better video poker rules: deck, round state, hand ranking and payouts."""

from .cards import Card, HOUSE_CARD, RANKS, SUITS, build_deck, parse_cards, shuffle
from .errors import DeckExhausted, InvalidInput, UnknownRank, VideoPokerError
from .evaluator import evaluate_hand, score_hand
from .game import RoundState
from .models import GameConfig, HandRank, RankOutcome
from .paytable import PAYTABLE, multiplier_for, payout_for

__all__ = [
    "Card",
    "HOUSE_CARD",
    "RANKS",
    "SUITS",
    "build_deck",
    "parse_cards",
    "shuffle",
    "DeckExhausted",
    "InvalidInput",
    "UnknownRank",
    "VideoPokerError",
    "evaluate_hand",
    "score_hand",
    "RoundState",
    "GameConfig",
    "HandRank",
    "RankOutcome",
    "PAYTABLE",
    "multiplier_for",
    "payout_for",
]
