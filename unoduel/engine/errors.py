"""Errors raised by the engine and the match service.

Every GameError is a rejected command: the match is left as it was and the
message is shown to the player as is.
"""


class GameError(Exception):
    """A recoverable, user-facing rejection."""


class CardNotHeld(GameError):
    def __init__(self, card) -> None:
        super().__init__(f"You don't have {card}.")
        self.card = card


class IllegalPlay(GameError):
    def __init__(self, card, current_color, current_value) -> None:
        super().__init__(
            f"You cannot play {card} on {current_color.value} {current_value}."
        )
        self.card = card


class MissingColorChoice(GameError):
    def __init__(self, card) -> None:
        super().__init__(f"You must choose a color for {card}.")
        self.card = card


class NotYourTurn(GameError):
    def __init__(self) -> None:
        super().__init__("It's not your turn.")


class MatchAlreadyEnded(GameError):
    def __init__(self) -> None:
        super().__init__("This match has already ended.")


class NoActiveMatch(GameError):
    def __init__(self, player_id: str) -> None:
        super().__init__("You don't have a match in progress.")
        self.player_id = player_id


class InvalidWager(GameError):
    def __init__(self, amount) -> None:
        super().__init__(f"Please enter a valid bet amount (got {amount}).")
        self.amount = amount


class InsufficientFunds(GameError):
    def __init__(self, balance: int, amount: int) -> None:
        super().__init__(
            f"You don't have enough money for that bet (balance ${balance}, bet ${amount})."
        )
        self.balance = balance
        self.amount = amount


class UnknownCommand(GameError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Unknown command: {text!r}. Try 'help'.")
        self.text = text


class OpponentChainError(RuntimeError):
    """The automated side kept the turn for more steps than any legal chain allows.

    Not a GameError: the rule table is inconsistent and the match cannot continue.
    """
