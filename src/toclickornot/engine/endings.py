"""Game ending conditions and their narration.

Ending Types:
- DEATH: A stat reached zero (GAME_OVER)
- VICTORY: The player survived every round
- RUSHED: The player clicked faster than the rush threshold

Death conditions are checked in a fixed order so that simultaneous
depletion always reports the same cause:
1. Health
2. Sanity
3. Hope
4. Financial
"""

from __future__ import annotations

import random
from typing import Optional

from toclickornot.models.session import GameSessionState, LifecycleState
from toclickornot.models.stats import StatVector
from toclickornot.parameters import MAX_ROUNDS, STAT_MIN, STAT_NAMES

DEATH_REASONS: dict[str, str] = {
    "health": "Your body gave out. SYSTEM FAILURE.",
    "sanity": "Reality became too much. MIND OVERFLOW.",
    "hope": "The void consumed you. HOPE.EXE NOT FOUND.",
    "financial": "Bankruptcy complete. WALLET CORRUPTED.",
}

VICTORY_MESSAGES: tuple[str, ...] = (
    "Against all odds, you survived. But at what cost?",
    "You made it. The simulation is complete... for now.",
    "SURVIVAL VERIFIED. You are a statistical anomaly.",
    "10 rounds survived. Your resilience is... noted.",
    "You navigated the chaos. The simulation acknowledges your persistence.",
    "LIFE.EXE completed without fatal errors. Impressive.",
)

RUSH_MESSAGE = "You rushed through life too fast. Slow down next time."


def check_game_over(stats: StatVector) -> Optional[str]:
    """Return the death reason for the first depleted stat, or None.

    Args:
        stats: Stats to check

    Returns:
        Death reason string, or None if every stat is above zero
    """
    for name in STAT_NAMES:
        if getattr(stats, name) <= STAT_MIN:
            return DEATH_REASONS[name]
    return None


def get_victory_message(rng: Optional[random.Random] = None) -> str:
    """Pick one of the congratulatory messages uniformly."""
    return (rng or random).choice(VICTORY_MESSAGES)


def rounds_survived(state: GameSessionState, max_rounds: int = MAX_ROUNDS) -> int:
    """Score for the leaderboard.

    A winning run scores max_rounds; anything else scores the rounds
    completed before the run ended.
    """
    if state.lifecycle_state is LifecycleState.VICTORY:
        return max_rounds
    return max(0, state.round - 1)
