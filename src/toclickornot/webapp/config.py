"""Flask configuration."""

import os
from pathlib import Path

from toclickornot.parameters import CLICKS_PER_ROUND, MAX_ROUNDS, RUSH_THRESHOLD_MS


class Config:
    """Base configuration."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-key-change-in-prod")

    # Database - instance folder is at project root
    PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
    INSTANCE_PATH = PROJECT_ROOT / "instance"
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", f"sqlite:///{INSTANCE_PATH}/toclickornot.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Sessions: 'memory', 'file' or 'sqlite' (see toclickornot.storage)
    SESSION_STORAGE = os.environ.get("TOCLICKORNOT_STORAGE_BACKEND", "memory")

    # Game rules
    MAX_ROUNDS = int(os.environ.get("TOCLICKORNOT_MAX_ROUNDS", MAX_ROUNDS))
    CLICKS_PER_ROUND = int(os.environ.get("TOCLICKORNOT_CLICKS_PER_ROUND", CLICKS_PER_ROUND))
    RUSH_THRESHOLD_MS = int(os.environ.get("TOCLICKORNOT_RUSH_THRESHOLD_MS", RUSH_THRESHOLD_MS))

    # Optional seed for reproducible situation draws
    RANDOM_SEED = None


class TestConfig(Config):
    """Testing configuration."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SESSION_STORAGE = "memory"
    MAX_ROUNDS = MAX_ROUNDS
    CLICKS_PER_ROUND = CLICKS_PER_ROUND
    RUSH_THRESHOLD_MS = RUSH_THRESHOLD_MS
    RANDOM_SEED = 1234
