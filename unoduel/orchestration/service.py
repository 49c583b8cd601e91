"""Match service: starts matches, routes commands and settles wagers."""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from unoduel.agent.protocol import PresentationSink, WagerLedger
from unoduel.config import Settings
from unoduel.engine import (
    Card,
    Color,
    GameError,
    MatchState,
    MatchView,
    OpponentChainError,
    Side,
    TurnReport,
    new_match,
)
from unoduel.engine import machine
from unoduel.engine.errors import InvalidWager
from unoduel.engine.game_state import IDLE, INTERNAL_ERROR
from unoduel.orchestration.commands import (
    HELP_TEXT,
    DrawCommand,
    ForfeitCommand,
    HelpCommand,
    PlayCommand,
    parse_command,
)
from unoduel.orchestration.registry import MatchRegistry

logger = logging.getLogger(__name__)


class MatchService:
    """Owns the registry of live matches and talks to the ledger and the sink.

    Every operation on a player's match runs under that player's registry lock.
    """

    def __init__(
        self,
        ledger: WagerLedger,
        sink: PresentationSink,
        registry: Optional[MatchRegistry] = None,
        settings: Optional[Settings] = None,
        seed: Optional[int] = None,
    ):
        self._ledger = ledger
        self._sink = sink
        self._registry = registry if registry is not None else MatchRegistry()
        self._settings = settings or Settings()
        self._rng = random.Random(seed)

    @property
    def registry(self) -> MatchRegistry:
        return self._registry

    def start_match(
        self,
        player_id: str,
        wager: int,
        advantage: bool = False,
        seed: Optional[int] = None,
    ) -> MatchState:
        """Debit the wager and deal a new match, ending any match already running."""
        if isinstance(wager, bool) or not isinstance(wager, int) or wager <= 0:
            raise InvalidWager(wager)
        with self._registry.lock(player_id):
            self._ledger.debit(player_id, wager)
            if seed is None:
                seed = self._rng.getrandbits(32)
            state = new_match(wager, seed=seed, advantage=advantage)
            evicted = self._registry.create(player_id, state)
            if evicted is not None and not evicted.settled:
                if evicted.winner is None:
                    machine.forfeit(evicted, Side.PLAYER)
                self._settle(player_id, evicted)
            logger.info("Started match for %s (wager %d, seed %d)", player_id, wager, seed)
        self._publish(player_id, state)
        return state

    def view(self, player_id: str) -> MatchView:
        with self._registry.lock(player_id):
            return MatchView.from_state(self._registry.get(player_id))

    def play(self, player_id: str, card: Card, chosen_color: Optional[Color] = None) -> Optional[TurnReport]:
        return self._run(player_id, lambda s: machine.play(s, Side.PLAYER, card, chosen_color))

    def draw(self, player_id: str) -> Optional[TurnReport]:
        return self._run(player_id, lambda s: machine.draw(s, Side.PLAYER))

    def forfeit(self, player_id: str) -> Optional[TurnReport]:
        return self._run(player_id, lambda s: machine.forfeit(s, Side.PLAYER))

    def handle(self, player_id: str, text: str) -> Optional[TurnReport]:
        """Parse a text command and apply it. Rejections go to the sink, not the caller."""
        try:
            command = parse_command(text)
        except GameError as e:
            self._notify(player_id, str(e))
            return None

        if isinstance(command, HelpCommand):
            self._notify(player_id, HELP_TEXT)
            return None
        if isinstance(command, PlayCommand):
            return self.play(player_id, command.card, command.chosen_color)
        if isinstance(command, DrawCommand):
            return self.draw(player_id)
        if isinstance(command, ForfeitCommand):
            return self.forfeit(player_id)
        raise TypeError(f"Unhandled command: {command!r}")

    def reap_idle(self) -> list[str]:
        """Forfeit every match idle for longer than the configured timeout."""
        reaped = []
        for player_id in self._registry.idle(self._settings.idle_timeout):
            with self._registry.lock(player_id):
                if not self._registry.is_idle(player_id, self._settings.idle_timeout):
                    continue
                state = self._registry.get(player_id)
                if state.winner is None:
                    report = machine.forfeit(state, Side.PLAYER, reason=IDLE)
                else:
                    report = TurnReport(winner=state.winner)
                logger.info("Reaped idle match for %s", player_id)
                self._after(player_id, state, report)
            reaped.append(player_id)
        return reaped

    def _run(self, player_id: str, op: Callable[[MatchState], TurnReport]) -> Optional[TurnReport]:
        with self._registry.lock(player_id):
            try:
                state = self._registry.get(player_id)
                self._registry.touch(player_id)
                report = op(state)
            except GameError as e:
                self._notify(player_id, str(e))
                return None
            except OpponentChainError:
                logger.exception("Aborting match for %s", player_id)
                report = TurnReport(events=["Internal error: the match was ended in your favour."])
                if state.winner is None:
                    state.winner = Side.PLAYER
                state.end_reason = INTERNAL_ERROR
                report.winner = state.winner
            self._after(player_id, state, report)
            return report

    def _after(self, player_id: str, state: MatchState, report: TurnReport) -> None:
        for event in report.events:
            self._notify(player_id, event)
        self._publish(player_id, state)
        if state.winner is not None:
            self._settle(player_id, state)
            self._registry.remove(player_id)

    def _settle(self, player_id: str, state: MatchState) -> None:
        if state.settled:
            return
        state.settled = True
        if state.winner == Side.PLAYER:
            prize = state.wager * 2
            self._ledger.credit(player_id, prize)
            self._notify(player_id, f"You won ${prize}!")
        elif state.end_reason == IDLE:
            self._notify(player_id, f"UNO ended. You lost ${state.wager}.")
        else:
            self._notify(player_id, f"Bot won - you lost ${state.wager}.")
        logger.info(
            "Settled match for %s: winner=%s reason=%s wager=%d",
            player_id, state.winner.value, state.end_reason, state.wager,
        )

    def _publish(self, player_id: str, state: MatchState) -> None:
        try:
            self._sink.publish(player_id, MatchView.from_state(state))
        except Exception:
            logger.exception("Presentation sink failed to publish for %s", player_id)

    def _notify(self, player_id: str, text: str) -> None:
        try:
            self._sink.notify(player_id, text)
        except Exception:
            logger.exception("Presentation sink failed to notify %s", player_id)
