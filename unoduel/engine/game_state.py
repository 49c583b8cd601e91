"""Match state for a two-seat UNO game."""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from unoduel.engine.card import WILD_VALUES, Card, Color, Side
from unoduel.engine.deck import CardSupply, create_deck

HAND_SIZE = 7

# Ends of a match, kept on the state for settlement reports.
EMPTY_HAND = "empty_hand"
FORFEIT = "forfeit"
IDLE = "idle"
INTERNAL_ERROR = "internal_error"


@dataclass
class MatchState:
    """Mutable state of one match. Only engine.machine mutates it."""

    supply: CardSupply
    hands: Dict[Side, List[Card]]
    current_color: Color
    current_value: str
    turn: Side = Side.PLAYER
    winner: Optional[Side] = None
    pending_draw: int = 0  # forced draws not yet dealt
    wager: int = 0
    advantage: bool = False
    rng: random.Random = field(default_factory=random.Random)
    history: List[str] = field(default_factory=list)
    end_reason: Optional[str] = None
    settled: bool = False

    @property
    def is_finished(self) -> bool:
        return self.winner is not None

    @property
    def draw_pile(self) -> List[Card]:
        return self.supply.draw_pile

    @property
    def discard_pile(self) -> List[Card]:
        return self.supply.discard_pile

    def top_discard(self) -> Optional[Card]:
        return self.supply.top

    def hand(self, side: Side) -> List[Card]:
        return self.hands[side]

    def card_count(self) -> int:
        """Cards across both piles and both hands."""
        return len(self.supply) + sum(len(h) for h in self.hands.values())


def new_match(
    wager: int = 0,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    advantage: bool = False,
) -> MatchState:
    """Shuffle a full deck, deal 7 cards each and flip a non-wild starter."""
    if rng is None:
        rng = random.Random(seed)
    deck = create_deck(rng)
    hands: Dict[Side, List[Card]] = {Side.PLAYER: [], Side.OPPONENT: []}
    for _ in range(HAND_SIZE):
        for side in (Side.PLAYER, Side.OPPONENT):
            hands[side].append(deck.pop())

    starter = deck.pop()
    while starter.value in WILD_VALUES:
        deck.append(starter)
        rng.shuffle(deck)
        starter = deck.pop()

    return MatchState(
        supply=CardSupply(deck, [starter], rng=rng),
        hands=hands,
        current_color=starter.color,
        current_value=starter.value,
        wager=wager,
        advantage=advantage,
        rng=rng,
    )


@dataclass
class MatchView:
    """What the human side may see of a match.

    Contains the player's own hand and only the size of the opponent's.
    """

    top_discard: Optional[Card]
    current_color: Color
    current_value: str
    my_hand: List[Card]
    opponent_hand_size: int
    turn: Side
    winner: Optional[Side]
    wager: int
    history: List[str]  # Recent match events

    @classmethod
    def from_state(cls, state: MatchState) -> "MatchView":
        return cls(
            top_discard=state.top_discard(),
            current_color=state.current_color,
            current_value=state.current_value,
            my_hand=list(state.hands[Side.PLAYER]),
            opponent_hand_size=len(state.hands[Side.OPPONENT]),
            turn=state.turn,
            winner=state.winner,
            wager=state.wager,
            history=list(state.history[-10:]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top_discard": str(self.top_discard) if self.top_discard else None,
            "current_color": self.current_color.value,
            "current_value": self.current_value,
            "my_hand": [str(c) for c in self.my_hand],
            "opponent_hand_size": self.opponent_hand_size,
            "turn": self.turn.value,
            "winner": self.winner.value if self.winner else None,
            "wager": self.wager,
            "history": list(self.history),
        }
