"""Heuristic policy for the automated side."""

import random
from collections import Counter
from typing import List

from unoduel.engine.card import COLOR_PRECEDENCE, DISRUPTIVE_VALUES, Card, Color, Side
from unoduel.engine.game_state import MatchState
from unoduel.engine.rules import Action, DrawCard, PlayCard, playable_cards


def choose_color(hand: List[Card]) -> Color:
    """Most frequent real color in hand, ties broken by COLOR_PRECEDENCE."""
    counts = Counter(c.color for c in hand if not c.is_wild)
    return max(COLOR_PRECEDENCE, key=lambda color: (counts[color], -COLOR_PRECEDENCE.index(color)))


def choose_action(state: MatchState, advantage: bool, rng: random.Random) -> Action:
    """Pick the automated side's next action.

    Without advantage the first playable disruptive card (Draw2, Draw4, Skip,
    Reverse) in hand order wins, then the first playable card. With advantage
    the choice is uniform over every playable card.
    """
    hand = state.hands[Side.OPPONENT]
    playable = playable_cards(hand, state.current_color, state.current_value)
    if not playable:
        return DrawCard()

    if advantage:
        card = rng.choice(playable)
    else:
        disruptive = [c for c in playable if c.value in DISRUPTIVE_VALUES]
        card = (disruptive or playable)[0]

    if not card.is_wild:
        return PlayCard(card=card)
    rest = list(hand)
    rest.remove(card)
    return PlayCard(card=card, chosen_color=choose_color(rest))
