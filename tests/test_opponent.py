"""Unit tests for the bot's card choice."""

import random

from unoduel.agents import choose_action, choose_color
from unoduel.engine import Color, DrawCard, PlayCard


def test_draws_without_playable_card(make_state, card) -> None:
    state = make_state(player=[card("Red 1")], opponent=[card("Blue 2"), card("Green 4")], top=card("Red 3"))
    assert isinstance(choose_action(state, False, random.Random(0)), DrawCard)


def test_prefers_disruptive_cards(make_state, card) -> None:
    state = make_state(
        player=[card("Red 1")],
        opponent=[card("Red 5"), card("Blue 3"), card("Red Draw2")],
        top=card("Red 3"),
    )
    assert choose_action(state, False, random.Random(0)) == PlayCard(card("Red Draw2"))


def test_first_playable_without_disruptive(make_state, card) -> None:
    state = make_state(
        player=[card("Red 1")],
        opponent=[card("Green 5"), card("Blue 3"), card("Red 9")],
        top=card("Red 3"),
    )
    assert choose_action(state, False, random.Random(0)) == PlayCard(card("Blue 3"))


def test_advantage_samples_every_playable_card(make_state, card) -> None:
    state = make_state(
        player=[card("Red 1")],
        opponent=[card("Red 5"), card("Red Skip"), card("Red 9"), card("Green 2")],
        top=card("Red 3"),
    )
    rng = random.Random(4)
    chosen = {choose_action(state, True, rng).card for _ in range(200)}
    assert chosen == {card("Red 5"), card("Red Skip"), card("Red 9")}


def test_wild_declares_most_common_color(make_state, card) -> None:
    state = make_state(
        player=[card("Red 1")],
        opponent=[card("Blue 1"), card("Wild"), card("Blue 2"), card("Green 3")],
        top=card("Yellow 7"),
    )
    assert choose_action(state, False, random.Random(0)) == PlayCard(card("Wild"), Color.BLUE)


def test_color_ties_follow_precedence(card) -> None:
    assert choose_color([card("Green 1"), card("Yellow 2")]) == Color.YELLOW
    assert choose_color([card("Blue 1"), card("Red 2")]) == Color.RED
    assert choose_color([card("Draw4")]) == Color.RED
    assert choose_color([]) == Color.RED
