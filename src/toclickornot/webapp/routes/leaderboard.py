"""Leaderboard routes."""

from flask import Blueprint, jsonify, request

from toclickornot.parameters import LEADERBOARD_SIZE

from ..services.game_service import get_game_service
from ..services.leaderboard import get_leaderboard, record_score
from .game import MissingPostId, session_key_from_request

bp = Blueprint("leaderboard", __name__, url_prefix="/api")


@bp.route("/submit-score", methods=["POST"])
def submit_score():
    """Record the player's finished run on the post's leaderboard."""
    key = session_key_from_request()

    def record(submission):
        return record_score(
            post_id=key.post_id,
            username=key.username,
            rounds_survived=submission.rounds_survived,
            stats=submission.stats,
            ending_state=submission.ending_state,
        )

    submission = get_game_service().submit_score(key, record=record)

    if not submission.accepted:
        return jsonify({
            "type": "submit",
            "success": False,
            "status": "error",
            "message": submission.reason,
        }), 409

    return jsonify({
        "type": "submit",
        "success": True,
        "rank": submission.rank,
        "rounds_survived": submission.rounds_survived,
    })


@bp.route("/leaderboard")
def view():
    """Top scores for a post."""
    post_id = request.args.get("post_id")
    if not post_id:
        raise MissingPostId()
    limit = request.args.get("limit", LEADERBOARD_SIZE, type=int)
    return jsonify({
        "type": "leaderboard",
        "post_id": post_id,
        "entries": get_leaderboard(post_id, limit=max(1, min(limit, 100))),
    })
