"""Random agent - plays a random legal card, draws only when it must."""

import random
from typing import Optional

from unoduel.engine import Action, MatchView
from unoduel.engine.rules import PlayCard


class RandomAgent:
    """Plays for the human side in simulations."""

    def __init__(self, name: str = "random", seed: Optional[int] = None):
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def get_action(self, view: MatchView, legal_actions: list[Action]) -> Optional[Action]:
        if not legal_actions:
            return None
        plays = [a for a in legal_actions if isinstance(a, PlayCard)]
        if plays:
            return self._rng.choice(plays)
        return legal_actions[-1]
