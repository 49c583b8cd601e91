"""UNO rules: card legality and the actions a side can take."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Union

from unoduel.engine.card import COLOR_PRECEDENCE, Card, Color, Side

if TYPE_CHECKING:
    from unoduel.engine.game_state import MatchState


@dataclass
class PlayCard:
    """Action: play a card. For wilds, chosen_color is required."""

    card: Card
    chosen_color: Optional[Color] = None


@dataclass
class DrawCard:
    """Action: draw a card and pass the turn."""

    pass


Action = Union[PlayCard, DrawCard]


def is_playable(card: Card, current_color: Color, current_value: str) -> bool:
    """Check if a card can be played on the current color and value.

    Wild and Draw4 are always playable; there is no "no matching color in
    hand" restriction on Draw4.
    """
    if card.is_wild:
        return True
    return card.color == current_color or card.value == current_value


def playable_cards(hand: List[Card], current_color: Color, current_value: str) -> List[Card]:
    return [c for c in hand if is_playable(c, current_color, current_value)]


def get_legal_actions(state: "MatchState", side: Side) -> List[Action]:
    """Return all legal actions for side; empty when it is not side's turn."""
    if state.winner is not None or state.turn != side:
        return []

    actions: List[Action] = []
    for card in playable_cards(state.hands[side], state.current_color, state.current_value):
        if card.is_wild:
            for color in COLOR_PRECEDENCE:
                actions.append(PlayCard(card=card, chosen_color=color))
        else:
            actions.append(PlayCard(card=card))

    # Drawing is always allowed
    actions.append(DrawCard())
    return actions
