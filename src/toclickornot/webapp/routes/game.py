"""Game routes - init, click and restart.

All routes speak JSON. The post ID and player name come from the JSON body
or the query string; identity is resolved upstream and trusted here.
"""

from flask import Blueprint, jsonify, request

from toclickornot.models.session import OutcomeKind
from toclickornot.storage import SessionKey

from ..services.game_service import get_game_service
from ..services.leaderboard import get_high_score, get_total_plays, increment_total_plays

bp = Blueprint("game", __name__, url_prefix="/api")


class MissingPostId(Exception):
    """Request did not name a post."""


def session_key_from_request() -> SessionKey:
    """Build the session key from the request body or query string."""
    body = request.get_json(silent=True) or {}
    post_id = body.get("post_id") or request.args.get("post_id")
    if not post_id:
        raise MissingPostId()
    username = body.get("username") or request.args.get("username") or "anonymous"
    return SessionKey(post_id=str(post_id), username=str(username))


def missing_post_id(_error):
    return jsonify({"status": "error", "message": "post_id is required"}), 400


@bp.route("/init", methods=["GET", "POST"])
def init():
    """Fetch or create the player's session."""
    key = session_key_from_request()
    payload = get_game_service().init(key)
    payload.update(
        type="init",
        high_score=get_high_score(key.post_id),
        total_plays=get_total_plays(key.post_id),
    )
    return jsonify(payload)


@bp.route("/click", methods=["POST"])
def click():
    """Register one click."""
    key = session_key_from_request()
    outcome = get_game_service().click(key)

    if outcome.kind is OutcomeKind.INVALID_OPERATION:
        return jsonify({**outcome.to_dict(), "status": "error", "message": outcome.error}), 409

    return jsonify({"type": "click", "post_id": key.post_id, **outcome.to_dict()})


@bp.route("/restart", methods=["POST"])
def restart():
    """Start a fresh run for the player."""
    key = session_key_from_request()
    payload = get_game_service().restart(key)
    total_plays = increment_total_plays(key.post_id)
    payload.update(type="restart", total_plays=total_plays)
    return jsonify(payload)
