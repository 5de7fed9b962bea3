"""Game engine module for To Click Or Not.

This module contains the core game logic including:
- catalog: Situation pools and the random effect generator
- endings: Death, victory and rush conditions and their messages
- round_engine: Per-click state machine
- game_session: Per-player coordinator

Usage:
    from toclickornot.engine import GameSession

    session = GameSession()
    session.start()
    outcome = session.register_click(now_ms=0)
"""

from toclickornot.engine.catalog import (
    CORE_SITUATIONS,
    ROUND_EVENTS,
    SITUATION_TEMPLATES,
    RandomSource,
    SituationCatalog,
    generate_random_effect,
    get_random_situation,
)
from toclickornot.engine.endings import (
    DEATH_REASONS,
    RUSH_MESSAGE,
    VICTORY_MESSAGES,
    check_game_over,
    get_victory_message,
    rounds_survived,
)
from toclickornot.engine.game_session import GameSession
from toclickornot.engine.round_engine import RoundEngine

__all__ = [
    # Engine classes
    "GameSession",
    "RoundEngine",
    "SituationCatalog",
    "RandomSource",
    # Catalog functions and pools
    "generate_random_effect",
    "get_random_situation",
    "CORE_SITUATIONS",
    "SITUATION_TEMPLATES",
    "ROUND_EVENTS",
    # Endings
    "check_game_over",
    "get_victory_message",
    "rounds_survived",
    "DEATH_REASONS",
    "VICTORY_MESSAGES",
    "RUSH_MESSAGE",
]
