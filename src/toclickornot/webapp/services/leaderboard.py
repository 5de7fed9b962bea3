"""Leaderboard service.

Ranking: rounds survived descending, then created_at ascending (earlier
submission wins ties).
"""

from typing import Any, Optional

from sqlalchemy import and_, func, or_

from toclickornot.models.stats import StatVector
from toclickornot.parameters import LEADERBOARD_SIZE

from ..extensions import db
from ..models.score import PostStats, ScoreRecord


def record_score(
    post_id: str,
    username: str,
    rounds_survived: int,
    stats: StatVector,
    ending_state: str,
) -> int:
    """Store a finished run and return its rank on the post's leaderboard.

    Args:
        post_id: Post identifier
        username: Player name
        rounds_survived: Score supplied by the game session
        stats: Stats the run ended on
        ending_state: Terminal lifecycle state name

    Returns:
        1-based rank of the new entry
    """
    record = ScoreRecord(
        post_id=post_id,
        username=username,
        rounds_survived=rounds_survived,
        health=stats.health,
        sanity=stats.sanity,
        hope=stats.hope,
        financial=stats.financial,
        ending_state=ending_state,
    )
    db.session.add(record)
    db.session.commit()

    ahead = (
        db.session.query(func.count(ScoreRecord.id))
        .filter(
            ScoreRecord.post_id == post_id,
            or_(
                ScoreRecord.rounds_survived > rounds_survived,
                and_(
                    ScoreRecord.rounds_survived == rounds_survived,
                    ScoreRecord.id < record.id,
                ),
            ),
        )
        .scalar()
    )
    return ahead + 1


def get_leaderboard(post_id: str, limit: int = LEADERBOARD_SIZE) -> list[dict[str, Any]]:
    """Get ranked leaderboard for a post.

    Args:
        post_id: Post identifier
        limit: Maximum number of entries to return

    Returns:
        List of {rank, username, rounds_survived, stats, ending_state, created_at}
    """
    results = (
        ScoreRecord.query.filter_by(post_id=post_id)
        .order_by(
            ScoreRecord.rounds_survived.desc(),
            ScoreRecord.created_at.asc(),
            ScoreRecord.id.asc(),
        )
        .limit(limit)
        .all()
    )
    return [{"rank": rank, **row.to_dict()} for rank, row in enumerate(results, start=1)]


def get_high_score(post_id: str) -> int:
    """Best rounds survived on a post, 0 if nobody has submitted."""
    best: Optional[int] = (
        db.session.query(func.max(ScoreRecord.rounds_survived))
        .filter(ScoreRecord.post_id == post_id)
        .scalar()
    )
    return best or 0


def increment_total_plays(post_id: str) -> int:
    """Count one more play on a post and return the new total."""
    stats = db.session.get(PostStats, post_id)
    if stats is None:
        stats = PostStats(post_id=post_id, total_plays=0)
        db.session.add(stats)
    stats.total_plays += 1
    db.session.commit()
    return stats.total_plays


def get_total_plays(post_id: str) -> int:
    """Plays counted on a post, 0 if none."""
    stats = db.session.get(PostStats, post_id)
    return stats.total_plays if stats is not None else 0
