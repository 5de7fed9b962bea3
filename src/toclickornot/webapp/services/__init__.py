"""Services for the webapp."""

from .game_service import GameService, get_game_service

__all__ = ["GameService", "get_game_service"]
