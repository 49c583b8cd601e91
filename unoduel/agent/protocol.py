"""Collaborator protocols - what the match service needs from the outside."""

from __future__ import annotations

from typing import Protocol

from unoduel.engine import Action, MatchView


class PresentationSink(Protocol):
    """Shows match state and transient messages to a player."""

    def publish(self, player_id: str, view: MatchView) -> None:
        """Show the latest snapshot of the player's match.

        Args:
            player_id: Identity of the human side.
            view: Snapshot with only the player's own hand visible.
        """
        ...

    def notify(self, player_id: str, text: str) -> None:
        """Show a transient message (bot moves, errors, settlement)."""
        ...


class WagerLedger(Protocol):
    """Stores the wagerable balance of each player."""

    def balance(self, player_id: str) -> int:
        ...

    def debit(self, player_id: str, amount: int) -> None:
        """Take amount from the balance. Raises InsufficientFunds."""
        ...

    def credit(self, player_id: str, amount: int) -> None:
        ...


class AgentProtocol(Protocol):
    """Stand-in for the human side in automated matches."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(self, view: MatchView, legal_actions: list[Action]) -> Action | None:
        """Choose an action given the player's view and legal actions.

        Args:
            view: Snapshot with only the player's hand and public info.
            legal_actions: List of valid actions to choose from.

        Returns:
            One of the legal actions, or None to draw.
        """
        ...
