"""Tests for GameSession: start, restart, snapshots and persistence."""

from toclickornot.engine import GameSession
from toclickornot.models.session import GameRules, GameSessionState, LifecycleState, OutcomeKind


class TestStart:
    """Tests for starting a run."""

    def test_fresh_defaults(self):
        session = GameSession(random_seed=1)
        view = session.start()
        assert view["game_state"] == "PLAYING"
        assert view["round"] == 1
        assert view["max_rounds"] == 10
        assert view["clicks"] == 0
        assert view["clicks_needed"] == 5
        assert view["stats"] == {"health": 50, "sanity": 50, "hope": 50, "financial": 50}
        assert view["situation"]["message"]
        assert view["message"] is None

    def test_start_does_not_apply_the_opener(self):
        session = GameSession(random_seed=1)
        session.start()
        assert session.state.stats.to_dict() == {
            "health": 50, "sanity": 50, "hope": 50, "financial": 50,
        }

    def test_start_is_idempotent(self):
        session = GameSession(random_seed=1)
        first = session.start()
        second = session.start()
        assert first == second

    def test_same_seed_same_game(self):
        a = GameSession(random_seed=99)
        b = GameSession(random_seed=99)
        a.start()
        b.start()
        for i in range(12):
            assert a.register_click(i * 1_000).to_dict() == b.register_click(i * 1_000).to_dict()


class TestRestart:
    """Tests for restarting a run."""

    def test_restart_after_game_over(self, make_catalog):
        session = GameSession(catalog=make_catalog(effects={"health": -25}))
        session.start()
        session.register_click(0)
        outcome = session.register_click(1_000)
        assert outcome.kind == OutcomeKind.GAME_OVER

        view = session.restart()

        assert view["game_state"] == "PLAYING"
        assert view["round"] == 1
        assert view["stats"]["health"] == 50
        assert view["message"] is None
        assert session.state.last_click_ms is None

    def test_restart_mid_game(self, neutral_catalog):
        session = GameSession(catalog=neutral_catalog)
        session.start()
        for i in range(7):
            session.register_click(i * 1_000)
        assert session.state.round == 2

        session.restart()
        assert session.state.round == 1
        assert session.state.clicks_this_round == 0

    def test_first_click_after_restart_is_not_a_rush(self, neutral_catalog):
        session = GameSession(catalog=neutral_catalog)
        session.start()
        session.register_click(1_000)
        session.register_click(1_001)
        assert session.state.lifecycle_state == LifecycleState.RUSHED

        session.restart()
        outcome = session.register_click(1_002)
        assert outcome.kind == OutcomeKind.ROUND_IN_PROGRESS


class TestRoundsSurvived:
    """Tests for the session's score."""

    def test_victory(self, neutral_catalog):
        session = GameSession(
            catalog=neutral_catalog,
            rules=GameRules(max_rounds=2, clicks_per_round=1),
        )
        session.start()
        session.register_click(0)
        session.register_click(1_000)
        assert session.state.lifecycle_state == LifecycleState.VICTORY
        assert session.rounds_survived == 2


class TestPersistence:
    """Tests for to_dict/from_dict."""

    def test_round_trip_mid_game(self, neutral_catalog):
        session = GameSession(catalog=neutral_catalog)
        session.start()
        for i in range(3):
            session.register_click(i * 1_000)

        restored = GameSession.from_dict(session.to_dict(), catalog=neutral_catalog)

        assert restored.state == session.state
        assert restored.snapshot() == session.snapshot()

    def test_restored_session_keeps_rush_window(self, neutral_catalog):
        session = GameSession(catalog=neutral_catalog)
        session.start()
        session.register_click(5_000)

        restored = GameSession.from_dict(session.to_dict(), catalog=neutral_catalog)
        outcome = restored.register_click(5_100)
        assert outcome.kind == OutcomeKind.RUSHED

    def test_state_dict_is_json_friendly(self):
        data = GameSessionState().to_dict()
        assert data["lifecycle_state"] == "PLAYING"
        assert data["stats"]["hope"] == 50
        assert data["score_submitted"] is False
