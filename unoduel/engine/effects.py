"""Consequences of a played card: forced draws, skips and declared colors."""

from dataclasses import dataclass
from typing import List, Optional

from unoduel.engine.card import DRAW2, DRAW4, REVERSE, SKIP, Card, Color, Side
from unoduel.engine.errors import CardNotHeld, MissingColorChoice
from unoduel.engine.game_state import EMPTY_HAND, MatchState

FORCED_DRAWS = {DRAW2: 2, DRAW4: 4}
# With two seats a Reverse is just a Skip.
KEEPS_TURN = (SKIP, REVERSE, DRAW2, DRAW4)


@dataclass
class PlayOutcome:
    """What a single play did to the match."""

    card: Card
    next_turn: Side
    extra_turn: bool
    forced_draw: List[Card]
    declared_color: Optional[Color] = None
    winner: Optional[Side] = None


def apply_play(
    state: MatchState,
    side: Side,
    card: Card,
    chosen_color: Optional[Color] = None,
) -> PlayOutcome:
    """Move card from side's hand to the discard pile and resolve its effect.

    Legality against the current color and value is the caller's job.
    """
    if card.is_wild and (chosen_color is None or chosen_color == Color.WILD):
        raise MissingColorChoice(card)
    hand = state.hands[side]
    if card not in hand:
        raise CardNotHeld(card)

    hand.remove(card)
    state.supply.discard_top(card)
    state.current_color = chosen_color if card.is_wild else card.color
    state.current_value = card.value

    victim = side.other
    state.pending_draw += FORCED_DRAWS.get(card.value, 0)
    forced: List[Card] = []
    if state.pending_draw:
        forced = state.supply.draw(state.pending_draw, state.hands[victim])
        state.pending_draw = 0

    extra_turn = card.value in KEEPS_TURN
    if not hand:
        state.winner = side
        state.end_reason = EMPTY_HAND
    else:
        state.turn = side if extra_turn else victim

    return PlayOutcome(
        card=card,
        next_turn=state.turn,
        extra_turn=extra_turn and state.winner is None,
        forced_draw=forced,
        declared_color=chosen_color if card.is_wild else None,
        winner=state.winner,
    )
