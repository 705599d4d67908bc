from __future__ import annotations

import re
from typing import Callable, List, Optional, Sequence

from videopoker.game import RoundState

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_holds(answer: str, hand: Sequence[str]) -> List[str]:
    """Turn "1 3", "AS,KH" or a mix of both into the labels to hold."""
    held: List[str] = []
    for token in re.split(r"[\s,]+", answer.strip()):
        if not token:
            continue
        if token.isdigit():
            idx = int(token) - 1
            if 0 <= idx < len(hand):
                held.append(hand[idx])
            continue
        held.append(token.upper())
    return held


def play_round(
    state: RoundState,
    prompt: Optional[InputFn] = None,
    emit: Optional[OutputFn] = None,
    discard_empty: bool = False,
) -> int:
    """Play one round on an already funded state. Returns the amount won."""
    prompt = prompt or input
    emit = emit or print

    emit(f"Credit: {state.credit}")
    state.take()
    emit(f"Credit: {state.credit}")

    hand = state.deal()
    emit(f"Hand: {'  '.join(f'{idx}:{card}' for idx, card in enumerate(hand, start=1))}")
    emit(f"Rank: {state.evaluate().rank.value}")

    answer = prompt("Hold (positions or cards, blank for none): ")
    held = parse_holds(answer, hand)
    state.draw(held, discard_all=discard_empty and not held)

    emit(f"Final hand: {', '.join(state.hand)} {state.evaluate().rank.value}")
    won = state.pay()
    emit(f"Credit: {state.credit}")
    return won
