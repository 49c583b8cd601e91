"""Simulation - run many automated matches and aggregate results."""

import random
from collections import defaultdict

from unoduel.agent.protocol import AgentProtocol
from unoduel.orchestration.game_runner import GameRunner


def run_simulation(
    agent: AgentProtocol,
    num_games: int = 100,
    seed: int | None = None,
    advantage: bool = False,
) -> dict[str, int]:
    """Play num_games matches of agent against the opponent policy.

    Returns:
        Dict mapping "player", "opponent" and "unfinished" to match counts.
    """
    results: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for _ in range(num_games):
        runner = GameRunner(agent, seed=rng.randint(0, 2**31 - 1), advantage=advantage)
        result = runner.run()
        results[result.winner.value if result.winner else "unfinished"] += 1

    return dict(results)
