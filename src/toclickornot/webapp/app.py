"""Flask application factory."""

import logging
import random

from flask import Flask, jsonify

from toclickornot.models.session import GameRules
from toclickornot.storage import StorageUnavailable, get_session_repository, parse_storage_backend

from .config import Config
from .extensions import db
from .services.game_service import GameService

logger = logging.getLogger(__name__)


def create_game_service(app: Flask) -> GameService:
    """Build the game service from app config."""
    rules = GameRules(
        max_rounds=app.config["MAX_ROUNDS"],
        clicks_per_round=app.config["CLICKS_PER_ROUND"],
        rush_threshold_ms=app.config["RUSH_THRESHOLD_MS"],
    )
    backend = parse_storage_backend(app.config["SESSION_STORAGE"])
    logger.info(
        f"Sessions stored in {backend.value} backend; "
        f"{rules.max_rounds} rounds x {rules.clicks_per_round} clicks, "
        f"rush threshold {rules.rush_threshold_ms}ms"
    )
    return GameService(
        repository=get_session_repository(backend),
        rules=rules,
        rng=random.Random(app.config.get("RANDOM_SEED")),
    )


def create_app(config_class=Config):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Ensure instance folder exists
    config_class.INSTANCE_PATH.mkdir(parents=True, exist_ok=True)

    # Initialize extensions
    db.init_app(app)
    app.extensions["game_service"] = create_game_service(app)

    # Register blueprints
    from .routes import game, leaderboard

    app.register_blueprint(game.bp)
    app.register_blueprint(leaderboard.bp)

    app.register_error_handler(game.MissingPostId, game.missing_post_id)

    @app.errorhandler(StorageUnavailable)
    def storage_unavailable(error):
        logger.warning(f"Session storage unavailable: {error}")
        return jsonify({"status": "error", "message": "Session storage unavailable"}), 503

    # Create database tables
    with app.app_context():
        from .models import PostStats, ScoreRecord  # noqa: F401

        db.create_all()

    return app


def main():
    """Entry point for `toclickornot-web` command."""
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(debug=True, host="0.0.0.0", port=5000)


if __name__ == "__main__":
    main()
