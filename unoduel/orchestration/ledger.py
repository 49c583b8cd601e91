"""In-memory wager ledger."""

import logging
import threading
from typing import Dict

from unoduel.engine.errors import InsufficientFunds

logger = logging.getLogger(__name__)


class InMemoryLedger:
    """Balances that live as long as the process. New players start with starting_balance."""

    def __init__(self, starting_balance: int = 1000):
        self._starting_balance = starting_balance
        self._balances: Dict[str, int] = {}
        self._lock = threading.Lock()

    def balance(self, player_id: str) -> int:
        with self._lock:
            return self._balances.get(player_id, self._starting_balance)

    def debit(self, player_id: str, amount: int) -> None:
        with self._lock:
            current = self._balances.get(player_id, self._starting_balance)
            if current < amount:
                raise InsufficientFunds(current, amount)
            self._balances[player_id] = current - amount
        logger.debug("Debited %s by %d", player_id, amount)

    def credit(self, player_id: str, amount: int) -> None:
        with self._lock:
            current = self._balances.get(player_id, self._starting_balance)
            self._balances[player_id] = current + amount
        logger.debug("Credited %s with %d", player_id, amount)
