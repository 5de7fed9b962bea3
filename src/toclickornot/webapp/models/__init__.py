"""SQLAlchemy models for the webapp."""

from .score import PostStats, ScoreRecord

__all__ = ["ScoreRecord", "PostStats"]
