"""Game engine for two-seat UNO."""

from unoduel.engine.card import COLOR_PRECEDENCE, Card, Color, Side
from unoduel.engine.deck import FULL_DECK_SIZE, CardSupply, create_deck
from unoduel.engine.effects import PlayOutcome, apply_play
from unoduel.engine.errors import (
    CardNotHeld,
    GameError,
    IllegalPlay,
    MatchAlreadyEnded,
    MissingColorChoice,
    NoActiveMatch,
    NotYourTurn,
    OpponentChainError,
)
from unoduel.engine.game_state import MatchState, MatchView, new_match
from unoduel.engine.machine import TurnReport, draw, forfeit, play
from unoduel.engine.rules import (
    Action,
    PlayCard,
    DrawCard,
    get_legal_actions,
    is_playable,
    playable_cards,
)

__all__ = [
    "COLOR_PRECEDENCE",
    "Card",
    "Color",
    "Side",
    "FULL_DECK_SIZE",
    "CardSupply",
    "create_deck",
    "PlayOutcome",
    "apply_play",
    "GameError",
    "CardNotHeld",
    "IllegalPlay",
    "MatchAlreadyEnded",
    "MissingColorChoice",
    "NoActiveMatch",
    "NotYourTurn",
    "OpponentChainError",
    "MatchState",
    "MatchView",
    "new_match",
    "TurnReport",
    "play",
    "draw",
    "forfeit",
    "Action",
    "PlayCard",
    "DrawCard",
    "get_legal_actions",
    "is_playable",
    "playable_cards",
]
