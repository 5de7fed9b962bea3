"""Leaderboard models."""

from datetime import datetime
from typing import Any

from ..extensions import db


class ScoreRecord(db.Model):
    """One submitted score with the stats the run ended on."""

    __tablename__ = "scores"

    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.String(64), nullable=False, index=True)
    username = db.Column(db.String(64), nullable=False)
    rounds_survived = db.Column(db.Integer, nullable=False)

    # Final stats
    health = db.Column(db.Integer, nullable=False)
    sanity = db.Column(db.Integer, nullable=False)
    hope = db.Column(db.Integer, nullable=False)
    financial = db.Column(db.Integer, nullable=False)

    ending_state = db.Column(db.String(16), nullable=False)  # VICTORY, GAME_OVER, RUSHED

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "rounds_survived": self.rounds_survived,
            "stats": {
                "health": self.health,
                "sanity": self.sanity,
                "hope": self.hope,
                "financial": self.financial,
            },
            "ending_state": self.ending_state,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<ScoreRecord {self.username} {self.rounds_survived}>"


class PostStats(db.Model):
    """Per-post counters."""

    __tablename__ = "post_stats"

    post_id = db.Column(db.String(64), primary_key=True)
    total_plays = db.Column(db.Integer, default=0, nullable=False)
