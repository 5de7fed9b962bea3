"""Round engine for To Click Or Not.

Registers one click against a session state. Click sequence:
1. REJECT - Terminal sessions refuse clicks (INVALID_OPERATION)
2. RUSH CHECK - Too soon after the previous click ends the run (RUSHED)
3. COUNT - Record the timestamp and count the click
4. SITUATION - Draw a situation and apply its effect
5. CHECK DEATH - Any stat at zero ends the run, even mid-round
6. ROUND END - On the last click of a round: advance the round, declare
   victory past the final round, otherwise apply a round event and check
   death again
"""

from __future__ import annotations

import logging
from typing import Optional

from toclickornot.engine.catalog import SituationCatalog
from toclickornot.engine.endings import RUSH_MESSAGE, check_game_over, get_victory_message
from toclickornot.models.session import (
    ClickOutcome,
    GameRules,
    GameSessionState,
    LifecycleState,
    OutcomeKind,
)
from toclickornot.models.situation import Situation

logger = logging.getLogger(__name__)


class RoundEngine:
    """Advances a session by one click at a time.

    The engine holds no per-session data; every call reads and writes the
    GameSessionState it is given.

    Attributes:
        rules: Round count, clicks per round and rush threshold
        catalog: Source of situations and round events
    """

    def __init__(
        self,
        catalog: Optional[SituationCatalog] = None,
        rules: Optional[GameRules] = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else SituationCatalog()
        self.rules = rules if rules is not None else GameRules()

    def _outcome(
        self,
        state: GameSessionState,
        kind: OutcomeKind,
        situation: Optional[Situation] = None,
        round_event: Optional[Situation] = None,
        error: Optional[str] = None,
    ) -> ClickOutcome:
        return ClickOutcome(
            kind=kind,
            lifecycle_state=state.lifecycle_state,
            round=state.round,
            clicks=state.clicks_this_round,
            clicks_needed=self.rules.clicks_per_round,
            stats=state.stats,
            situation=situation,
            round_event=round_event,
            message=state.ending_message,
            error=error,
        )

    def is_rush(self, state: GameSessionState, now_ms: int) -> bool:
        """True if now_ms is closer to the previous click than allowed."""
        if state.last_click_ms is None:
            return False
        return now_ms - state.last_click_ms < self.rules.rush_threshold_ms

    def _apply(self, state: GameSessionState, situation: Situation) -> Optional[str]:
        """Apply a situation's effect and return a death reason if it killed."""
        state.stats = state.stats.apply(situation.effects)
        reason = check_game_over(state.stats)
        if reason is not None:
            state.lifecycle_state = LifecycleState.GAME_OVER
            state.ending_message = reason
            logger.info(f"Game over in round {state.round}: {reason}")
        return reason

    def register_click(self, state: GameSessionState, now_ms: int) -> ClickOutcome:
        """Register one click at time now_ms (milliseconds).

        Args:
            state: Session state, mutated in place
            now_ms: Click timestamp in milliseconds

        Returns:
            ClickOutcome describing what the click did
        """
        if not state.is_playing:
            return self._outcome(
                state,
                OutcomeKind.INVALID_OPERATION,
                error=f"Game is not active ({state.lifecycle_state.value}); restart first",
            )

        if self.is_rush(state, now_ms):
            state.lifecycle_state = LifecycleState.RUSHED
            state.ending_message = RUSH_MESSAGE
            logger.info(
                f"Rush detected in round {state.round}: "
                f"{now_ms - state.last_click_ms}ms < {self.rules.rush_threshold_ms}ms"
            )
            return self._outcome(state, OutcomeKind.RUSHED)

        state.last_click_ms = now_ms
        state.clicks_this_round += 1
        # Only the click that completes a round carries a round event
        state.round_event = None

        situation = self.catalog.draw_situation()
        state.current_situation = situation
        logger.debug(
            f"Round {state.round} click {state.clicks_this_round}: "
            f"{situation.message} {situation.effects}"
        )

        if self._apply(state, situation) is not None:
            return self._outcome(state, OutcomeKind.GAME_OVER, situation=situation)

        if state.clicks_this_round < self.rules.clicks_per_round:
            return self._outcome(state, OutcomeKind.ROUND_IN_PROGRESS, situation=situation)

        state.clicks_this_round = 0
        state.round += 1

        if state.round > self.rules.max_rounds:
            state.lifecycle_state = LifecycleState.VICTORY
            state.ending_message = get_victory_message(self.catalog.rng)
            logger.info(f"Victory after {self.rules.max_rounds} rounds")
            return self._outcome(state, OutcomeKind.VICTORY, situation=situation)

        round_event = self.catalog.draw_round_event()
        state.round_event = round_event
        if self._apply(state, round_event) is not None:
            return self._outcome(
                state, OutcomeKind.GAME_OVER, situation=situation, round_event=round_event
            )

        return self._outcome(
            state, OutcomeKind.ROUND_COMPLETE, situation=situation, round_event=round_event
        )
