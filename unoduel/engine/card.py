"""Card, Color and Side types for UNO."""

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """Card colors. WILD marks cards whose color is declared when played."""

    RED = "Red"
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"
    WILD = "Wild"


# Tie-break order when a declared color has to be picked.
COLOR_PRECEDENCE = (Color.RED, Color.YELLOW, Color.GREEN, Color.BLUE)

NUMBER_VALUES = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
SKIP = "Skip"
REVERSE = "Reverse"
DRAW2 = "Draw2"
DRAW4 = "Draw4"
WILD = "Wild"

CARD_VALUES = NUMBER_VALUES + (SKIP, REVERSE, DRAW2, DRAW4, WILD)
WILD_VALUES = (WILD, DRAW4)
DISRUPTIVE_VALUES = (DRAW2, DRAW4, SKIP, REVERSE)


class Side(str, Enum):
    """The two seats of a match."""

    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Side":
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


@dataclass(frozen=True)
class Card:
    """An UNO card.

    Colored cards carry one of the four real colors. Wild and Draw4 always
    carry Color.WILD; their effective color is declared by whoever plays them.
    """

    color: Color
    value: str

    def __post_init__(self) -> None:
        if self.value not in CARD_VALUES:
            raise ValueError(f"Invalid card value: {self.value}")
        if self.value in WILD_VALUES and self.color != Color.WILD:
            raise ValueError(f"{self.value} cards must have color Wild")
        if self.value not in WILD_VALUES and self.color == Color.WILD:
            raise ValueError(f"{self.value} cards need a real color")

    @property
    def is_wild(self) -> bool:
        return self.color == Color.WILD

    def __str__(self) -> str:
        if self.is_wild:
            return self.value
        return f"{self.color.value} {self.value}"
