import random

import pytest

from unoduel.engine import Card, CardSupply, Color, MatchState, Side


def build_state(player, opponent, top, draw_pile=None, discard=None, turn=Side.PLAYER, color=None, wager=0, seed=0):
    """A match with hand-picked cards. discard lists the cards under top."""
    rng = random.Random(seed)
    return MatchState(
        supply=CardSupply(list(draw_pile or []), list(discard or []) + [top], rng=rng),
        hands={Side.PLAYER: list(player), Side.OPPONENT: list(opponent)},
        current_color=color or top.color,
        current_value=top.value,
        turn=turn,
        wager=wager,
        rng=rng,
    )


@pytest.fixture
def make_state():
    return build_state


@pytest.fixture
def card():
    """card("Red 7"), card("Wild"), card("Draw4")."""

    def _card(text: str) -> Card:
        parts = text.split()
        if len(parts) == 1:
            return Card(Color.WILD, parts[0])
        return Card(Color(parts[0]), parts[1])

    return _card
