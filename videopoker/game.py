from __future__ import annotations

import logging
import math
import numbers
import random
from decimal import Decimal
from typing import Iterable, List, Optional, Union

from .cards import HOUSE_CARD, Card, build_deck, cards_to_labels, shuffle
from .errors import DeckExhausted, InvalidInput
from .evaluator import evaluate_hand
from .models import GameConfig, RankOutcome
from .paytable import PAYTABLE, payout_for

LOGGER = logging.getLogger("videopoker")

HAND_SIZE = 5

# RoundState keeps one player's credit, deck and hand in memory. Prompting and
# printing belong to the caller; only the rules and credit accounting live here.


def _to_number(value: object, what: str) -> Union[int, float]:
    if isinstance(value, bool):
        raise InvalidInput(f"Invalid {what}: {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not isinstance(value, (str, numbers.Real, Decimal)):
        raise InvalidInput(f"Invalid {what}: {value!r}")
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except ValueError:
        raise InvalidInput(f"Invalid {what}: {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInput(f"Invalid {what}: {value!r}")
    return number


class RoundState:
    """Jacks or Better round for a single player.

    Order of play::

        state = RoundState()
        state.add_credits(200)
        state.set_stake(5)
        state.take()
        state.deal()
        state.draw(held_cards)
        state.pay()
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
        self.config = config or GameConfig()
        self.paytable = self.config.paytable if self.config.paytable is not None else PAYTABLE
        self.rng = random.Random(seed)
        self.credit = 0
        self.stake = self.config.min_stake
        self.hand: List[str] = [HOUSE_CARD] * HAND_SIZE
        self.deck: List[Card] = build_deck()
        self.draw_cursor = 0

    @property
    def hand_size(self) -> int:
        return HAND_SIZE

    # Credit/stake ----------------------------------------------------

    def add_credits(self, amount: object) -> None:
        self.credit += math.floor(_to_number(amount, "credit amount"))

    def set_stake(self, amount: object) -> int:
        stake = int(_to_number(amount, "stake"))
        self.stake = min(max(stake, self.config.min_stake), self.config.max_stake)
        return self.stake

    def can_afford(self) -> bool:
        return self.credit >= self.stake

    def take(self) -> None:
        # Overdraft is the caller's policy; see can_afford().
        self.credit -= self.stake
        LOGGER.debug("Took stake %d, credit now %d", self.stake, self.credit)

    def pay(self) -> int:
        outcome = self.evaluate()
        amount = payout_for(outcome.rank, self.stake, self.paytable)
        self.credit += amount
        if amount:
            LOGGER.info("Paid %d for %s, credit now %d", amount, outcome.rank.value, self.credit)
        return amount

    # Cards -----------------------------------------------------------

    def deal(self) -> List[str]:
        shuffle(self.deck, self.rng)
        self.hand = cards_to_labels(self.deck[: self.hand_size])
        self.draw_cursor = self.hand_size
        LOGGER.debug("Dealt %s", " ".join(self.hand))
        return list(self.hand)

    def draw(self, held_cards: Iterable[Union[Card, str]], discard_all: bool = False) -> List[str]:
        """Replace every card not held with the next cards from the deck.

        An empty hold list leaves the hand alone unless ``discard_all`` is set,
        in which case all five cards are replaced.
        """
        held = {card.label if isinstance(card, Card) else card for card in held_cards}
        if not held and not discard_all:
            return list(self.hand)

        replacements = sum(1 for card in self.hand if card not in held)
        if self.draw_cursor + replacements > len(self.deck):
            raise DeckExhausted(
                f"No cards left to draw: need {replacements}, {len(self.deck) - self.draw_cursor} remain"
            )

        hand = []
        for card in self.hand:
            if card in held:
                hand.append(card)
            else:
                hand.append(self.deck[self.draw_cursor].label)
                self.draw_cursor += 1
        self.hand = hand
        LOGGER.debug("Drew to %s (cursor %d)", " ".join(self.hand), self.draw_cursor)
        return list(self.hand)

    def evaluate(self) -> RankOutcome:
        return evaluate_hand(self.hand)
