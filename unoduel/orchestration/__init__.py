"""Match orchestration."""

from unoduel.orchestration.game_runner import GameResult, GameRunner
from unoduel.orchestration.ledger import InMemoryLedger
from unoduel.orchestration.registry import MatchRegistry
from unoduel.orchestration.service import MatchService
from unoduel.orchestration.tournament import run_simulation

__all__ = [
    "GameResult",
    "GameRunner",
    "InMemoryLedger",
    "MatchRegistry",
    "MatchService",
    "run_simulation",
]
