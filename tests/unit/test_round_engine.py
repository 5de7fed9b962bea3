"""Tests for RoundEngine.register_click.

Tests cover:
- Click counting and round advancement
- Rush detection at the threshold boundary
- Death mid-round and from a round event
- Victory after the final round
- Terminal sessions refusing clicks
"""

import pytest

from toclickornot.engine.endings import DEATH_REASONS, RUSH_MESSAGE, VICTORY_MESSAGES
from toclickornot.engine.round_engine import RoundEngine
from toclickornot.models.session import (
    GameRules,
    GameSessionState,
    LifecycleState,
    OutcomeKind,
)
from toclickornot.models.stats import StatVector


def click_n(engine, state, n, start_ms=1_000, gap_ms=1_000):
    """Click n times with a fixed gap and return the outcomes."""
    return [engine.register_click(state, start_ms + i * gap_ms) for i in range(n)]


class TestClickCounting:
    """Tests for counting clicks within and across rounds."""

    def test_first_click_is_never_a_rush(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        outcome = engine.register_click(sample_session_state, 0)
        assert outcome.kind == OutcomeKind.ROUND_IN_PROGRESS
        assert outcome.clicks == 1
        assert sample_session_state.last_click_ms == 0

    def test_click_draws_a_situation(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        outcome = engine.register_click(sample_session_state, 1_000)
        assert outcome.situation.message == "Same old day."
        assert sample_session_state.current_situation == outcome.situation

    def test_five_clicks_complete_a_round(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        outcomes = click_n(engine, sample_session_state, 5)

        assert [o.kind for o in outcomes[:4]] == [OutcomeKind.ROUND_IN_PROGRESS] * 4
        assert [o.clicks for o in outcomes[:4]] == [1, 2, 3, 4]
        last = outcomes[-1]
        assert last.kind == OutcomeKind.ROUND_COMPLETE
        assert last.round_complete
        assert last.round == 2
        assert last.clicks == 0
        assert last.round_event.message == "Another round."
        assert sample_session_state.round == 2
        assert sample_session_state.clicks_this_round == 0
        assert sample_session_state.lifecycle_state == LifecycleState.PLAYING

    def test_round_event_cleared_by_next_click(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        click_n(engine, sample_session_state, 5)
        assert sample_session_state.round_event is not None

        outcome = engine.register_click(sample_session_state, 100_000)

        assert outcome.round_event is None
        assert sample_session_state.round_event is None
        assert sample_session_state.to_dict()["round_event"] is None

    def test_effects_accumulate(self, make_catalog, sample_session_state):
        engine = RoundEngine(
            catalog=make_catalog(effects={"hope": 3}, round_event_effects={"financial": -4})
        )
        click_n(engine, sample_session_state, 5)
        assert sample_session_state.stats.hope == 65
        assert sample_session_state.stats.financial == 46
        assert sample_session_state.stats.health == 50

    def test_custom_rules(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(
            catalog=neutral_catalog,
            rules=GameRules(max_rounds=2, clicks_per_round=2, rush_threshold_ms=10),
        )
        outcomes = click_n(engine, sample_session_state, 4, gap_ms=10)
        assert [o.kind for o in outcomes] == [
            OutcomeKind.ROUND_IN_PROGRESS,
            OutcomeKind.ROUND_COMPLETE,
            OutcomeKind.ROUND_IN_PROGRESS,
            OutcomeKind.VICTORY,
        ]


class TestRushDetection:
    """Tests for the minimum gap between clicks."""

    def test_gap_below_threshold_rushes(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        engine.register_click(sample_session_state, 1_000)
        before = sample_session_state.stats

        outcome = engine.register_click(sample_session_state, 1_399)

        assert outcome.kind == OutcomeKind.RUSHED
        assert outcome.is_terminal
        assert outcome.message == RUSH_MESSAGE
        assert outcome.situation is None
        assert sample_session_state.lifecycle_state == LifecycleState.RUSHED
        assert sample_session_state.stats == before
        assert sample_session_state.clicks_this_round == 1
        assert sample_session_state.last_click_ms == 1_000

    def test_gap_at_threshold_is_allowed(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        engine.register_click(sample_session_state, 1_000)
        outcome = engine.register_click(sample_session_state, 1_400)
        assert outcome.kind == OutcomeKind.ROUND_IN_PROGRESS
        assert outcome.clicks == 2

    def test_rush_check_uses_last_counted_click(self, neutral_catalog):
        engine = RoundEngine(catalog=neutral_catalog)
        state = GameSessionState(last_click_ms=5_000)
        assert engine.is_rush(state, 5_399)
        assert not engine.is_rush(state, 5_400)

    def test_rushed_session_refuses_clicks(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        engine.register_click(sample_session_state, 1_000)
        engine.register_click(sample_session_state, 1_001)

        outcome = engine.register_click(sample_session_state, 10_000)
        assert outcome.kind == OutcomeKind.INVALID_OPERATION
        assert "RUSHED" in outcome.error


class TestDeath:
    """Tests for game over."""

    def test_health_drains_to_zero_on_fourth_click(self, make_catalog, sample_session_state):
        engine = RoundEngine(catalog=make_catalog(effects={"health": -15}))
        outcomes = click_n(engine, sample_session_state, 4)

        assert [o.stats.health for o in outcomes] == [35, 20, 5, 0]
        assert outcomes[-1].kind == OutcomeKind.GAME_OVER
        assert outcomes[-1].message == DEATH_REASONS["health"]
        assert sample_session_state.lifecycle_state == LifecycleState.GAME_OVER
        assert sample_session_state.round == 1

    def test_click_after_death_is_rejected_without_changes(
        self, make_catalog, sample_session_state
    ):
        engine = RoundEngine(catalog=make_catalog(effects={"health": -15}))
        click_n(engine, sample_session_state, 4)
        snapshot = sample_session_state.model_copy(deep=True)

        outcome = engine.register_click(sample_session_state, 100_000)

        assert outcome.kind == OutcomeKind.INVALID_OPERATION
        assert outcome.error
        assert sample_session_state == snapshot

    def test_death_from_round_event(self, make_catalog, sample_session_state):
        engine = RoundEngine(catalog=make_catalog(round_event_effects={"sanity": -60}))
        outcomes = click_n(engine, sample_session_state, 5)

        last = outcomes[-1]
        assert last.kind == OutcomeKind.GAME_OVER
        assert last.round_event is not None
        assert last.round_complete
        assert last.message == DEATH_REASONS["sanity"]
        assert last.round == 2

    def test_priority_when_two_stats_die_together(self, make_catalog):
        engine = RoundEngine(catalog=make_catalog(effects={"hope": -10, "financial": -10}))
        state = GameSessionState(stats=StatVector(hope=5, financial=5))
        outcome = engine.register_click(state, 0)
        assert outcome.message == DEATH_REASONS["hope"]


class TestVictory:
    """Tests for surviving the final round."""

    def test_fifty_clicks_win(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        outcomes = click_n(engine, sample_session_state, 50)

        victories = [o for o in outcomes if o.kind == OutcomeKind.VICTORY]
        assert len(victories) == 1
        assert outcomes[-1] is victories[0]
        assert victories[0].message in VICTORY_MESSAGES
        assert victories[0].round_event is None
        assert victories[0].round_complete
        assert sample_session_state.lifecycle_state == LifecycleState.VICTORY

        completes = [o for o in outcomes if o.kind == OutcomeKind.ROUND_COMPLETE]
        assert len(completes) == 9

    def test_click_after_victory_is_rejected(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        click_n(engine, sample_session_state, 50)
        snapshot = sample_session_state.model_copy(deep=True)

        outcome = engine.register_click(sample_session_state, 1_000_000)

        assert outcome.kind == OutcomeKind.INVALID_OPERATION
        assert sample_session_state == snapshot

    @pytest.mark.parametrize("clicks", [1, 7, 23, 49])
    def test_round_never_exceeds_max_while_playing(
        self, neutral_catalog, sample_session_state, clicks
    ):
        engine = RoundEngine(catalog=neutral_catalog)
        click_n(engine, sample_session_state, clicks)
        assert sample_session_state.is_playing
        assert 1 <= sample_session_state.round <= 10
        assert 0 <= sample_session_state.clicks_this_round < 5


class TestClickOutcomeDict:
    """Tests for ClickOutcome.to_dict."""

    def test_keys(self, neutral_catalog, sample_session_state):
        engine = RoundEngine(catalog=neutral_catalog)
        data = engine.register_click(sample_session_state, 0).to_dict()
        assert data["kind"] == "round_in_progress"
        assert data["game_state"] == "PLAYING"
        assert data["round"] == 1
        assert data["clicks"] == 1
        assert data["clicks_needed"] == 5
        assert data["round_complete"] is False
        assert data["stats"] == {"health": 50, "sanity": 50, "hope": 50, "financial": 50}
        assert data["situation"] == {"message": "Same old day.", "effects": {}}
        assert data["round_event"] is None
        assert data["error"] is None
