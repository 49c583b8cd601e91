"""The only mutating operations on a match: play, draw and forfeit.

After a human action hands the turn to the automated side, its turns are
driven inline until control comes back or the match ends.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from unoduel.engine.card import Card, Color, Side
from unoduel.engine.deck import FULL_DECK_SIZE
from unoduel.engine.effects import PlayOutcome, apply_play
from unoduel.engine.errors import (
    CardNotHeld,
    IllegalPlay,
    MatchAlreadyEnded,
    MissingColorChoice,
    NotYourTurn,
    OpponentChainError,
)
from unoduel.engine.game_state import FORFEIT, MatchState
from unoduel.engine.rules import DrawCard, is_playable

logger = logging.getLogger(__name__)

# Every step that keeps the turn spends a card from the automated hand, so no
# legal chain can be longer than the deck.
MAX_OPPONENT_STEPS = FULL_DECK_SIZE

_NAMES = {Side.PLAYER: "You", Side.OPPONENT: "Bot"}
_WINS = {Side.PLAYER: "You win!", Side.OPPONENT: "Bot wins!"}


@dataclass
class TurnReport:
    """Events produced by one external command, in order."""

    events: List[str] = field(default_factory=list)
    outcomes: List[PlayOutcome] = field(default_factory=list)
    winner: Optional[Side] = None


def _log(state: MatchState, report: TurnReport, text: str) -> None:
    state.history.append(text)
    report.events.append(text)


def _check_turn(state: MatchState, side: Side) -> None:
    if state.winner is not None:
        raise MatchAlreadyEnded()
    if state.turn != side:
        raise NotYourTurn()


def _describe_play(side: Side, outcome: PlayOutcome) -> str:
    name = _NAMES[side]
    victim = _NAMES[side.other]
    text = f"{name} played {outcome.card}"
    if outcome.declared_color is not None:
        text += f" (chose {outcome.declared_color.value})"
    text += "."
    if outcome.forced_draw:
        verb = "draw" if side.other == Side.PLAYER else "draws"
        text += f" {victim} {verb} {len(outcome.forced_draw)} cards."
    elif outcome.extra_turn:
        text += f" {victim}'s turn is skipped." if side == Side.PLAYER else " Your turn is skipped."
    if outcome.extra_turn:
        text += f" {name} {'play' if side == Side.PLAYER else 'plays'} again."
    return text


def _play(state: MatchState, side: Side, card: Card, chosen_color: Optional[Color], report: TurnReport) -> None:
    _check_turn(state, side)
    if card not in state.hands[side]:
        raise CardNotHeld(card)
    if not is_playable(card, state.current_color, state.current_value):
        raise IllegalPlay(card, state.current_color, state.current_value)
    if card.is_wild and (chosen_color is None or chosen_color == Color.WILD):
        raise MissingColorChoice(card)

    outcome = apply_play(state, side, card, chosen_color)
    report.outcomes.append(outcome)
    _log(state, report, _describe_play(side, outcome))
    if outcome.winner is not None:
        _log(state, report, _WINS[side])


def _draw(state: MatchState, side: Side, report: TurnReport) -> None:
    _check_turn(state, side)
    drawn = state.supply.draw(1, state.hands[side])
    if side == Side.PLAYER:
        _log(state, report, f"You drew {drawn[0]}." if drawn else "The deck is empty.")
    else:
        _log(state, report, "Bot drew a card." if drawn else "Bot could not draw.")
    state.turn = side.other


def run_opponent(state: MatchState, report: TurnReport) -> None:
    """Play the automated side until the turn comes back or the match ends."""
    from unoduel.agents.opponent import choose_action

    for _ in range(MAX_OPPONENT_STEPS):
        if state.winner is not None or state.turn != Side.OPPONENT:
            return
        action = choose_action(state, state.advantage, state.rng)
        if isinstance(action, DrawCard):
            _draw(state, Side.OPPONENT, report)
        else:
            _play(state, Side.OPPONENT, action.card, action.chosen_color, report)
    if state.winner is None and state.turn == Side.OPPONENT:
        logger.error("Opponent kept the turn for %d steps", MAX_OPPONENT_STEPS)
        raise OpponentChainError(f"Opponent chain exceeded {MAX_OPPONENT_STEPS} steps")


def _finish(state: MatchState, report: TurnReport) -> TurnReport:
    if state.winner is None and state.turn == Side.OPPONENT:
        run_opponent(state, report)
    report.winner = state.winner
    return report


def play(
    state: MatchState,
    side: Side,
    card: Card,
    chosen_color: Optional[Color] = None,
) -> TurnReport:
    """Play card from side's hand. chosen_color is required for Wild and Draw4.

    Raises a GameError without touching the state if the play is rejected.
    """
    report = TurnReport()
    _play(state, side, card, chosen_color, report)
    return _finish(state, report)


def draw(state: MatchState, side: Side) -> TurnReport:
    """Draw one card for side and pass the turn."""
    report = TurnReport()
    _draw(state, side, report)
    return _finish(state, report)


def forfeit(state: MatchState, side: Side, reason: str = FORFEIT) -> TurnReport:
    """End the match in favour of the other side, whoever's turn it is."""
    if state.winner is not None:
        raise MatchAlreadyEnded()
    report = TurnReport()
    state.winner = side.other
    state.end_reason = reason
    _log(state, report, f"{_NAMES[side]} ended the match. {_WINS[side.other]}")
    report.winner = state.winner
    return report
