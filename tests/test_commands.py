"""Unit tests for the text command parser."""

import pytest

from unoduel.engine import Card, Color
from unoduel.engine.errors import UnknownCommand
from unoduel.orchestration.commands import (
    DrawCommand,
    ForfeitCommand,
    HelpCommand,
    PlayCommand,
    parse_command,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("!uno play red 7", PlayCommand(Card(Color.RED, "7"))),
        ("play 7 RED", PlayCommand(Card(Color.RED, "7"))),
        ("play Blue Skip", PlayCommand(Card(Color.BLUE, "Skip"))),
        ("play red draw2", PlayCommand(Card(Color.RED, "Draw2"))),
        ("play green draw 2", PlayCommand(Card(Color.GREEN, "Draw2"))),
        ("play wild blue", PlayCommand(Card(Color.WILD, "Wild"), Color.BLUE)),
        ("!UNO play draw 4 green", PlayCommand(Card(Color.WILD, "Draw4"), Color.GREEN)),
        ("play +4", PlayCommand(Card(Color.WILD, "Draw4"))),
        ("play wild", PlayCommand(Card(Color.WILD, "Wild"))),
    ],
)
def test_parse_play(text, expected) -> None:
    assert parse_command(text) == expected


def test_parse_card_rendering_round_trip() -> None:
    card = Card(Color.YELLOW, "Reverse")
    assert parse_command(f"play {str(card).lower()}") == PlayCommand(card)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("draw", DrawCommand()),
        ("!uno draw", DrawCommand()),
        ("endgame", ForfeitCommand()),
        ("forfeit", ForfeitCommand()),
        ("help", HelpCommand()),
    ],
)
def test_parse_other_commands(text, expected) -> None:
    assert parse_command(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "!uno", "dance", "play", "play purple 7", "play red", "play red blue 7", "draw 3"],
)
def test_unknown_commands(text) -> None:
    with pytest.raises(UnknownCommand):
        parse_command(text)
