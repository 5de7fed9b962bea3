"""Route blueprints for the webapp."""

from . import game, leaderboard

__all__ = ["game", "leaderboard"]
