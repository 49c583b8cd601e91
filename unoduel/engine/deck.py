"""Deck creation and the draw/discard card supply."""

import random
from typing import List, Optional

from unoduel.engine.card import (
    COLOR_PRECEDENCE,
    DRAW2,
    DRAW4,
    NUMBER_VALUES,
    REVERSE,
    SKIP,
    WILD,
    Card,
    Color,
)

COLORED_VALUES = NUMBER_VALUES + (SKIP, REVERSE, DRAW2)

FULL_DECK_SIZE = 108


def create_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Create a shuffled 108-card UNO deck.

    - 4 colors x (one 0, two each of 1-9, Skip, Reverse, Draw2): 100 cards
    - 4 Wild, 4 Draw4: 8 cards
    """
    cards: List[Card] = []

    for color in COLOR_PRECEDENCE:
        cards.append(Card(color=color, value="0"))
        for value in COLORED_VALUES[1:]:
            cards.append(Card(color=color, value=value))
            cards.append(Card(color=color, value=value))

    for _ in range(4):
        cards.append(Card(color=Color.WILD, value=WILD))
        cards.append(Card(color=Color.WILD, value=DRAW4))

    (rng or random.Random()).shuffle(cards)
    return cards


class CardSupply:
    """Draw pile plus discard pile for one match.

    The draw pile is popped from the end; the last discard is the top card.
    """

    def __init__(
        self,
        draw_pile: List[Card],
        discard_pile: Optional[List[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.draw_pile = draw_pile
        self.discard_pile = discard_pile if discard_pile is not None else []
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self.draw_pile) + len(self.discard_pile)

    @property
    def top(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def discard_top(self, card: Card) -> None:
        self.discard_pile.append(card)

    def reshuffle(self) -> None:
        """Shuffle every discard except the top card back into the draw pile."""
        if len(self.discard_pile) <= 1:
            return
        top = self.discard_pile[-1]
        recycled = self.discard_pile[:-1]
        self._rng.shuffle(recycled)
        self.draw_pile = recycled + self.draw_pile
        self.discard_pile = [top]

    def draw(self, n: int, hand: List[Card]) -> List[Card]:
        """Move up to n cards into hand and return them.

        Returns fewer than n cards only when both piles are exhausted.
        """
        drawn: List[Card] = []
        for _ in range(n):
            if not self.draw_pile:
                self.reshuffle()
            if not self.draw_pile:
                break
            card = self.draw_pile.pop()
            hand.append(card)
            drawn.append(card)
        return drawn
