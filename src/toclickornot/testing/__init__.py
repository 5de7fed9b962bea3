"""Simulation utilities for balance testing.

Usage:
    from toclickornot.testing import run_batch

    results = run_batch(1000, seed=42)
    print(results.victory_rate)
"""

from .batch_runner import (
    CLICKERS,
    BatchResults,
    GameResult,
    impatient_clicker,
    run_batch,
    run_game,
    steady_clicker,
)

__all__ = [
    "BatchResults",
    "GameResult",
    "CLICKERS",
    "run_batch",
    "run_game",
    "steady_clicker",
    "impatient_clicker",
]
