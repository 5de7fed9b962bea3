"""Session state models for To Click Or Not.

GameSessionState is the per-player mutable root. It is a pydantic model so
the session store can persist it as a plain dict and rebuild it without
losing validation. ClickOutcome is the result value of a single click.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from toclickornot.models.situation import Situation
from toclickornot.models.stats import StatVector
from toclickornot.parameters import CLICKS_PER_ROUND, MAX_ROUNDS, RUSH_THRESHOLD_MS


class LifecycleState(str, Enum):
    """Top-level status of a session."""

    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"
    VICTORY = "VICTORY"
    RUSHED = "RUSHED"

    @property
    def is_terminal(self) -> bool:
        return self is not LifecycleState.PLAYING


class OutcomeKind(str, Enum):
    """What a single click did."""

    ROUND_IN_PROGRESS = "round_in_progress"
    ROUND_COMPLETE = "round_complete"
    GAME_OVER = "game_over"
    VICTORY = "victory"
    RUSHED = "rushed"
    INVALID_OPERATION = "invalid_operation"


class GameRules(BaseModel):
    """Rule constants for one deployment.

    Defaults come from toclickornot.parameters.
    """

    max_rounds: int = Field(default=MAX_ROUNDS, ge=1)
    clicks_per_round: int = Field(default=CLICKS_PER_ROUND, ge=1)
    rush_threshold_ms: int = Field(default=RUSH_THRESHOLD_MS, ge=0)


class GameSessionState(BaseModel):
    """Complete state of one player's run.

    Attributes:
        stats: Current stat vector
        round: Current round, 1-based; only exceeds max_rounds on victory
        clicks_this_round: Clicks counted in the current round
        lifecycle_state: PLAYING or one of the terminal states
        last_click_ms: Timestamp of the last counted click, if any
        current_situation: Situation drawn by the last click (or the opener)
        round_event: Round event drawn by the last click if it completed a round
        ending_message: Death reason, victory message or rush message
        score_submitted: Whether this run has been sent to the leaderboard
    """

    stats: StatVector = Field(default_factory=StatVector)
    round: int = Field(default=1, ge=1)
    clicks_this_round: int = Field(default=0, ge=0)
    lifecycle_state: LifecycleState = LifecycleState.PLAYING
    last_click_ms: Optional[int] = None
    current_situation: Optional[Situation] = None
    round_event: Optional[Situation] = None
    ending_message: Optional[str] = None
    score_submitted: bool = False

    @property
    def is_playing(self) -> bool:
        return self.lifecycle_state is LifecycleState.PLAYING

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSessionState:
        return cls.model_validate(data)


@dataclass
class ClickOutcome:
    """Result of registering one click.

    Attributes:
        kind: What the click did
        lifecycle_state: Session state after the click
        round: Round number after the click
        clicks: Clicks counted in the current round after the click
        clicks_needed: Clicks that make up a round
        stats: Stats after the click
        situation: Situation drawn by this click (None if nothing was drawn)
        round_event: Round event applied when this click completed a round
        message: Death reason, victory message or rush message
        error: Why the click was rejected (INVALID_OPERATION only)
    """

    kind: OutcomeKind
    lifecycle_state: LifecycleState
    round: int
    clicks: int
    clicks_needed: int
    stats: StatVector
    situation: Optional[Situation] = None
    round_event: Optional[Situation] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.lifecycle_state.is_terminal

    @property
    def round_complete(self) -> bool:
        """True when this click finished a round (including the winning one)."""
        return self.kind in (OutcomeKind.ROUND_COMPLETE, OutcomeKind.VICTORY) or (
            self.round_event is not None
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "game_state": self.lifecycle_state.value,
            "round": self.round,
            "clicks": self.clicks,
            "clicks_needed": self.clicks_needed,
            "round_complete": self.round_complete,
            "stats": self.stats.to_dict(),
            "situation": self.situation.to_dict() if self.situation else None,
            "round_event": self.round_event.to_dict() if self.round_event else None,
            "message": self.message,
            "error": self.error,
        }
