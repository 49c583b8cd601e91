"""Text commands: '!uno play red 7', 'play wild blue', 'draw', 'endgame', 'help'."""

from dataclasses import dataclass
from typing import Optional, Union

from unoduel.engine import Card, Color
from unoduel.engine.card import CARD_VALUES, COLOR_PRECEDENCE, DRAW2, DRAW4, WILD_VALUES
from unoduel.engine.errors import UnknownCommand

PREFIX = "!uno"

HELP_TEXT = (
    "`!uno play <card>` - play a card (e.g. `play red 7`)\n"
    "`!uno play wild <color>` - play a wild and choose a color\n"
    "`!uno play draw4 <color>` - play a Draw4 and choose a color\n"
    "`!uno draw` - draw 1 card\n"
    "`!uno endgame` - forfeit"
)

_COLORS = {c.value.lower(): c for c in COLOR_PRECEDENCE}
_VALUES = {v.lower(): v for v in CARD_VALUES}
_VALUES.update({
    "+2": DRAW2,
    "drawtwo": DRAW2,
    "+4": DRAW4,
    "drawfour": DRAW4,
    "wild+4": DRAW4,
    "wilddraw4": DRAW4,
})


@dataclass
class PlayCommand:
    card: Card
    chosen_color: Optional[Color] = None


@dataclass
class DrawCommand:
    pass


@dataclass
class ForfeitCommand:
    pass


@dataclass
class HelpCommand:
    pass


Command = Union[PlayCommand, DrawCommand, ForfeitCommand, HelpCommand]


def parse_card(descriptor: str) -> PlayCommand:
    """Turn 'red 7', '7 red', 'wild blue' or 'draw 4 green' into a play.

    Wild and Draw4 are recognized by value alone; a color next to them is the
    declared color.
    """
    words = descriptor.lower().split()
    colors = [_COLORS[w] for w in words if w in _COLORS]
    value = _VALUES.get("".join(w for w in words if w not in _COLORS))
    if value is None or len(colors) > 1:
        raise UnknownCommand(descriptor)

    chosen = colors[0] if colors else None
    if value in WILD_VALUES:
        return PlayCommand(card=Card(Color.WILD, value), chosen_color=chosen)
    if chosen is None:
        raise UnknownCommand(descriptor)
    return PlayCommand(card=Card(chosen, value))


def parse_command(text: str) -> Command:
    words = text.strip().split()
    if words and words[0].lower() == PREFIX:
        words = words[1:]
    if not words:
        raise UnknownCommand(text)

    verb, args = words[0].lower(), words[1:]
    if verb == "play" and args:
        return parse_card(" ".join(args))
    if verb == "draw" and not args:
        return DrawCommand()
    if verb in ("endgame", "forfeit", "quit") and not args:
        return ForfeitCommand()
    if verb == "help":
        return HelpCommand()
    raise UnknownCommand(text)
