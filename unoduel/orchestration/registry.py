"""In-flight matches keyed by player identity."""

import logging
import threading
import time
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional

from unoduel.engine import MatchState, NoActiveMatch

logger = logging.getLogger(__name__)


class MatchRegistry:
    """At most one live match per player.

    Callers hold lock(player_id) around any read-modify-write of a match; the
    map itself is guarded by an internal lock.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._matches: Dict[str, MatchState] = {}
        self._last_active: Dict[str, float] = {}
        self._locks: Dict[str, threading.RLock] = {}
        self._lock_users: Dict[str, int] = {}
        self._guard = threading.Lock()
        self._clock = clock

    def __len__(self) -> int:
        with self._guard:
            return len(self._matches)

    def __bool__(self) -> bool:
        return True

    def __contains__(self, player_id: str) -> bool:
        with self._guard:
            return player_id in self._matches

    @contextmanager
    def lock(self, player_id: str) -> Iterator[None]:
        """Serialize every operation on one player's match.

        The per-player lock is dropped once nobody holds or waits for it and
        the player has no match.
        """
        with self._guard:
            key_lock = self._locks.setdefault(player_id, threading.RLock())
            self._lock_users[player_id] = self._lock_users.get(player_id, 0) + 1
        try:
            with key_lock:
                yield
        finally:
            with self._guard:
                self._lock_users[player_id] -= 1
                if not self._lock_users[player_id] and player_id not in self._matches:
                    del self._lock_users[player_id]
                    del self._locks[player_id]

    def create(self, player_id: str, state: MatchState) -> Optional[MatchState]:
        """Store a new match, returning the one it evicted, if any."""
        with self._guard:
            evicted = self._matches.get(player_id)
            self._matches[player_id] = state
            self._last_active[player_id] = self._clock()
        if evicted is not None:
            logger.info("Evicted existing match for %s", player_id)
        return evicted

    def get(self, player_id: str) -> MatchState:
        with self._guard:
            state = self._matches.get(player_id)
        if state is None:
            raise NoActiveMatch(player_id)
        return state

    def remove(self, player_id: str) -> Optional[MatchState]:
        with self._guard:
            self._last_active.pop(player_id, None)
            return self._matches.pop(player_id, None)

    def touch(self, player_id: str) -> None:
        with self._guard:
            if player_id in self._matches:
                self._last_active[player_id] = self._clock()

    def is_idle(self, player_id: str, timeout: float) -> bool:
        now = self._clock()
        with self._guard:
            last = self._last_active.get(player_id)
        return last is not None and now - last >= timeout

    def idle(self, timeout: float) -> List[str]:
        """Players whose match has seen no activity for timeout seconds."""
        now = self._clock()
        with self._guard:
            return [pid for pid, t in self._last_active.items() if now - t >= timeout]
