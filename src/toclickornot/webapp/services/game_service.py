"""Game service - sessions held server-side, one per (post, player).

Every operation runs load -> mutate -> save under the session key's lock,
so two requests for the same player never interleave. Requests for
different players only share the repository.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from flask import current_app

from toclickornot.engine.catalog import RandomSource, SituationCatalog
from toclickornot.engine.game_session import GameSession
from toclickornot.models.session import ClickOutcome, GameRules
from toclickornot.models.stats import StatVector
from toclickornot.storage import KeyedLocks, SessionKey, SessionRepository

logger = logging.getLogger(__name__)


def wall_clock_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ScoreSubmission:
    """What a finished run contributes to the leaderboard.

    accepted is False when the run is still in progress or its score has
    already been submitted; the other fields are then informational only.
    rank is the leaderboard position the record callback reported.
    """

    accepted: bool
    rounds_survived: int
    stats: StatVector
    ending_state: str
    reason: Optional[str] = None
    rank: Optional[int] = None


class GameService:
    """Server-side session coordinator.

    Attributes:
        repository: Session store
        rules: Rules applied to every session
    """

    def __init__(
        self,
        repository: SessionRepository,
        rules: Optional[GameRules] = None,
        rng: Optional[RandomSource] = None,
        catalog: Optional[SituationCatalog] = None,
        clock: Callable[[], int] = wall_clock_ms,
        locks: Optional[KeyedLocks] = None,
    ) -> None:
        self.repository = repository
        self.rules = rules if rules is not None else GameRules()
        if catalog is None:
            catalog = SituationCatalog(rng=rng if rng is not None else random.Random())
        self.catalog = catalog
        self.clock = clock
        self.locks = locks if locks is not None else KeyedLocks()

    def _load(self, key: SessionKey) -> Optional[GameSession]:
        data = self.repository.load_session(str(key))
        if data is None:
            return None
        return GameSession.from_dict(data, rules=self.rules, catalog=self.catalog)

    def _new(self) -> GameSession:
        return GameSession(rules=self.rules, catalog=self.catalog)

    def _save(self, key: SessionKey, session: GameSession) -> None:
        self.repository.save_session(str(key), session.to_dict())

    def _view(self, key: SessionKey, session: GameSession) -> dict[str, Any]:
        return {"post_id": key.post_id, "username": key.username, **session.snapshot()}

    def init(self, key: SessionKey) -> dict[str, Any]:
        """Fetch the player's session, creating it on first visit."""
        with self.locks.hold(str(key)):
            session = self._load(key)
            if session is None:
                session = self._new()
                logger.info(f"New session {key}")
            session.start()
            self._save(key, session)
            return self._view(key, session)

    def click(self, key: SessionKey, now_ms: Optional[int] = None) -> ClickOutcome:
        """Register one click for the player.

        Args:
            key: Session key
            now_ms: Click time in milliseconds (default: the service clock)

        Returns:
            ClickOutcome; INVALID_OPERATION if the run is over
        """
        with self.locks.hold(str(key)):
            if now_ms is None:
                now_ms = self.clock()
            session = self._load(key)
            if session is None:
                session = self._new()
                session.start()
            outcome = session.register_click(now_ms)
            self._save(key, session)
            return outcome

    def restart(self, key: SessionKey) -> dict[str, Any]:
        """Replace the player's run with a fresh one."""
        with self.locks.hold(str(key)):
            session = self._load(key) or self._new()
            session.restart()
            self._save(key, session)
            return self._view(key, session)

    def submit_score(
        self,
        key: SessionKey,
        record: Optional[Callable[[ScoreSubmission], int]] = None,
    ) -> ScoreSubmission:
        """Record the player's finished run and mark it as submitted.

        Only a finished run can be submitted, and only once. The run is
        marked submitted only after record returns, so a failed leaderboard
        write leaves it open for a retry.

        Args:
            key: Session key
            record: Writes the submission to the leaderboard and returns its
                rank; exceptions propagate with the run left unsubmitted

        Returns:
            ScoreSubmission; accepted is False with a reason if refused
        """
        with self.locks.hold(str(key)):
            session = self._load(key)
            if session is None:
                return ScoreSubmission(False, 0, StatVector(), "NONE", "No session to submit")
            state = session.state
            submission = ScoreSubmission(
                accepted=False,
                rounds_survived=session.rounds_survived,
                stats=state.stats,
                ending_state=state.lifecycle_state.value,
            )
            if state.is_playing:
                return replace(submission, reason="Game is still in progress")
            if state.score_submitted:
                return replace(submission, reason="Score already submitted")
            submission = replace(submission, accepted=True)
            if record is not None:
                submission = replace(submission, rank=record(submission))
            state.score_submitted = True
            self._save(key, session)
            logger.info(f"Score submitted for {key}: {submission.rounds_survived} rounds")
            return submission


def get_game_service() -> GameService:
    """Get the game service bound to the current Flask app."""
    return current_app.extensions["game_service"]
