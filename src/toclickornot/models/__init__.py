"""To Click Or Not game models.

This module exports the core data structures for the game.
"""

from .session import (
    ClickOutcome,
    GameRules,
    GameSessionState,
    LifecycleState,
    OutcomeKind,
)
from .situation import Situation, SituationTemplate
from .stats import Effect, StatVector, apply_delta, clamp

__all__ = [
    # Enums
    "LifecycleState",
    "OutcomeKind",
    # Stat Models
    "Effect",
    "StatVector",
    # Situation Models
    "Situation",
    "SituationTemplate",
    # Session Models
    "GameRules",
    "GameSessionState",
    "ClickOutcome",
    # Stat Functions
    "apply_delta",
    "clamp",
]
