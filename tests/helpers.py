from __future__ import annotations

from typing import Optional, Sequence

from videopoker.cards import build_deck, parse_cards
from videopoker.game import RoundState
from videopoker.models import GameConfig


def create_round(
    *,
    credits: int = 200,
    stake: int = 5,
    seed: Optional[int] = 42,
    config: Optional[GameConfig] = None,
) -> RoundState:
    """Instantiate a funded round with the stake already set."""
    state = RoundState(config, seed=seed)
    state.add_credits(credits)
    state.set_stake(stake)
    return state


def rig_hand(state: RoundState, labels: Sequence[str], upcoming: Sequence[str] = ()) -> None:
    """Put a known hand in play, followed by ``upcoming`` as the next draws."""
    front = parse_cards(list(labels) + list(upcoming))
    rest = [card for card in build_deck() if card not in front]
    state.deck = front + rest
    state.hand = list(labels)
    state.draw_cursor = len(labels)
