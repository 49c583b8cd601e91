"""Single automated match runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unoduel.engine import (
    MatchView,
    Side,
    draw,
    get_legal_actions,
    new_match,
    play,
)
from unoduel.engine.rules import DrawCard

if TYPE_CHECKING:
    from unoduel.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed match."""

    winner: Optional[Side]
    num_turns: int
    end_reason: Optional[str]


class GameRunner:
    """Runs one match with an agent in the human seat against the opponent policy."""

    def __init__(
        self,
        agent: "AgentProtocol",
        seed: Optional[int] = None,
        advantage: bool = False,
        max_turns: int = 1000,
    ):
        self._agent = agent
        self._seed = seed
        self._advantage = advantage
        self._max_turns = max_turns

    def run(self) -> GameResult:
        """Run the match and return the result."""
        state = new_match(seed=self._seed, advantage=self._advantage)
        num_turns = 0

        while state.winner is None and num_turns < self._max_turns:
            legal = get_legal_actions(state, Side.PLAYER)
            if not legal:
                break

            action = self._agent.get_action(MatchView.from_state(state), legal)
            if action is None or isinstance(action, DrawCard):
                draw(state, Side.PLAYER)
            else:
                play(state, Side.PLAYER, action.card, action.chosen_color)
            num_turns += 1

        if state.winner is None:
            logger.warning("Match (seed %s) hit %d turns without a winner", self._seed, num_turns)
        return GameResult(
            winner=state.winner,
            num_turns=num_turns,
            end_reason=state.end_reason,
        )
