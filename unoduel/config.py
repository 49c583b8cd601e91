"""Settings read from the environment (and a .env file, loaded by the CLI)."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    starting_balance: int = 1000
    idle_timeout: float = 600.0  # seconds before an idle match is forfeited
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            starting_balance=int(os.environ.get("UNODUEL_STARTING_BALANCE", cls.starting_balance)),
            idle_timeout=float(os.environ.get("UNODUEL_IDLE_TIMEOUT", cls.idle_timeout)),
            log_level=os.environ.get("UNODUEL_LOG_LEVEL", cls.log_level).upper(),
        )
