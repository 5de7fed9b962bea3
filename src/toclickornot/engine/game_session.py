"""Game session coordinator.

GameSession is the unit a caller holds per player. It owns one
GameSessionState and delegates clicks to a RoundEngine.

Usage:
    from toclickornot.engine import GameSession

    session = GameSession()
    session.start()
    outcome = session.register_click(now_ms=1_000)
    if outcome.is_terminal:
        print(outcome.message)
        session.restart()
"""

from __future__ import annotations

import logging
import random
from typing import Any, Optional

from toclickornot.engine.catalog import RandomSource, SituationCatalog
from toclickornot.engine.endings import rounds_survived
from toclickornot.engine.round_engine import RoundEngine
from toclickornot.models.session import ClickOutcome, GameRules, GameSessionState

logger = logging.getLogger(__name__)


class GameSession:
    """One player's run.

    Not safe for concurrent use: callers must serialize register_click and
    restart calls on the same session.

    Attributes:
        state: Current session state
        engine: Round engine used for clicks
    """

    def __init__(
        self,
        state: Optional[GameSessionState] = None,
        rules: Optional[GameRules] = None,
        catalog: Optional[SituationCatalog] = None,
        rng: Optional[RandomSource] = None,
        random_seed: Optional[int] = None,
    ) -> None:
        """Create a session.

        Args:
            state: Existing state to resume, or None for a fresh run
            rules: Rule overrides (default: toclickornot.parameters)
            catalog: Situation catalog (default: built-in pools)
            rng: Random source for the default catalog
            random_seed: Seed for the default random source (for reproducibility)
        """
        if catalog is None:
            if rng is None:
                rng = random.Random(random_seed)
            catalog = SituationCatalog(rng=rng)
        self.engine = RoundEngine(catalog=catalog, rules=rules)
        self.state = state if state is not None else GameSessionState()

    @property
    def rules(self) -> GameRules:
        return self.engine.rules

    @property
    def rounds_survived(self) -> int:
        return rounds_survived(self.state, self.rules.max_rounds)

    def start(self) -> dict[str, Any]:
        """Begin the run, drawing the opening situation if there is none yet.

        Calling start() on a run already in progress changes nothing.
        """
        if self.state.is_playing and self.state.current_situation is None:
            self.state.current_situation = self.engine.catalog.draw_situation()
        return self.snapshot()

    def register_click(self, now_ms: int) -> ClickOutcome:
        """Register a click at now_ms (milliseconds)."""
        return self.engine.register_click(self.state, now_ms)

    def restart(self) -> dict[str, Any]:
        """Replace the run with a fresh one and draw its opening situation."""
        previous = self.state.lifecycle_state
        self.state = GameSessionState()
        logger.info(f"Session restarted (was {previous.value})")
        return self.start()

    def snapshot(self) -> dict[str, Any]:
        """Caller-facing view of the session."""
        state = self.state
        return {
            "game_state": state.lifecycle_state.value,
            "round": state.round,
            "max_rounds": self.rules.max_rounds,
            "clicks": state.clicks_this_round,
            "clicks_needed": self.rules.clicks_per_round,
            "stats": state.stats.to_dict(),
            "situation": state.current_situation.to_dict() if state.current_situation else None,
            "message": state.ending_message,
        }

    def to_dict(self) -> dict[str, Any]:
        return self.state.to_dict()

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> GameSession:
        """Rebuild a session from a stored state dict."""
        return cls(state=GameSessionState.from_dict(data), **kwargs)
