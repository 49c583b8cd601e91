"""Built-in agents."""

from unoduel.agents.opponent import choose_action, choose_color
from unoduel.agents.random_agent import RandomAgent

__all__ = ["choose_action", "choose_color", "RandomAgent"]
