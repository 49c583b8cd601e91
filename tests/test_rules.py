"""Unit tests for card legality and legal actions."""

import pytest

from unoduel.engine import (
    Card,
    Color,
    DrawCard,
    PlayCard,
    Side,
    get_legal_actions,
    is_playable,
)


@pytest.mark.parametrize("value", ["Wild", "Draw4"])
@pytest.mark.parametrize("color", [Color.RED, Color.YELLOW, Color.GREEN, Color.BLUE])
def test_wild_family_always_playable(value, color) -> None:
    assert is_playable(Card(Color.WILD, value), color, "5")


def test_color_match() -> None:
    assert is_playable(Card(Color.RED, "9"), Color.RED, "3")
    assert is_playable(Card(Color.RED, "3"), Color.RED, "9")


def test_value_match() -> None:
    assert is_playable(Card(Color.BLUE, "3"), Color.RED, "3")
    assert is_playable(Card(Color.BLUE, "Skip"), Color.GREEN, "Skip")


def test_no_match() -> None:
    assert not is_playable(Card(Color.BLUE, "9"), Color.RED, "3")
    assert not is_playable(Card(Color.GREEN, "Draw2"), Color.YELLOW, "Skip")


def test_declared_color_is_matched_after_wild() -> None:
    # After a Wild declared Green, green cards match and the value "Wild" matches nothing colored
    assert is_playable(Card(Color.GREEN, "4"), Color.GREEN, "Wild")
    assert not is_playable(Card(Color.RED, "4"), Color.GREEN, "Wild")


def test_invalid_cards_rejected() -> None:
    with pytest.raises(ValueError):
        Card(Color.RED, "Wild")
    with pytest.raises(ValueError):
        Card(Color.WILD, "7")
    with pytest.raises(ValueError):
        Card(Color.RED, "11")


def test_legal_actions(make_state, card) -> None:
    state = make_state(
        player=[card("Red 5"), card("Blue 9"), card("Wild")],
        opponent=[card("Green 1")],
        top=card("Red 3"),
    )
    actions = get_legal_actions(state, Side.PLAYER)
    plays = [a for a in actions if isinstance(a, PlayCard)]
    assert PlayCard(card("Red 5")) in plays
    assert all(a.card != card("Blue 9") for a in plays)
    wild_colors = {a.chosen_color for a in plays if a.card.is_wild}
    assert wild_colors == {Color.RED, Color.YELLOW, Color.GREEN, Color.BLUE}
    assert isinstance(actions[-1], DrawCard)


def test_no_legal_actions_out_of_turn(make_state, card) -> None:
    state = make_state(player=[card("Red 5")], opponent=[card("Red 1")], top=card("Red 3"))
    assert get_legal_actions(state, Side.OPPONENT) == []
