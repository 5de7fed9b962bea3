"""Stat vector model for To Click Or Not.

The four stats (health, sanity, hope, financial) are integers held in the
closed range [STAT_MIN, STAT_MAX]. Values are clamped on construction, so a
StatVector can never hold an out-of-range value.
"""

from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from toclickornot.parameters import STAT_INITIAL, STAT_MAX, STAT_MIN, STAT_NAMES

Effect = dict[str, int]
"""Signed per-stat deltas. Stats missing from the mapping are unchanged."""


def clamp(value: int, min_val: int = STAT_MIN, max_val: int = STAT_MAX) -> int:
    """Clamp a value to the specified range."""
    return max(min_val, min(max_val, value))


class StatVector(BaseModel):
    """The player's condition.

    Attributes:
        health: Physical condition (0-100, starts at 50)
        sanity: Mental condition (0-100, starts at 50)
        hope: Will to keep going (0-100, starts at 50)
        financial: Money in the bank (0-100, starts at 50)
    """

    model_config = ConfigDict(frozen=True)

    health: int = Field(default=STAT_INITIAL, ge=STAT_MIN, le=STAT_MAX)
    sanity: int = Field(default=STAT_INITIAL, ge=STAT_MIN, le=STAT_MAX)
    hope: int = Field(default=STAT_INITIAL, ge=STAT_MIN, le=STAT_MAX)
    financial: int = Field(default=STAT_INITIAL, ge=STAT_MIN, le=STAT_MAX)

    @field_validator("health", "sanity", "hope", "financial", mode="before")
    @classmethod
    def clamp_to_range(cls, v: int) -> int:
        """Clamp numeric fields to valid range [0, 100]."""
        return clamp(int(v))

    def apply(self, effect: Mapping[str, int]) -> StatVector:
        """Return a new vector with the effect added and clamped."""
        return apply_delta(self, effect)

    def depleted(self) -> list[str]:
        """Names of stats at or below the minimum, in priority order."""
        return [name for name in STAT_NAMES if getattr(self, name) <= STAT_MIN]

    def to_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in STAT_NAMES}


def apply_delta(stats: StatVector, effect: Mapping[str, int]) -> StatVector:
    """Add each delta in effect to stats and clamp the result.

    Deltas are independent additions, so order does not matter. Missing
    stats contribute zero.

    Args:
        stats: Current stat vector
        effect: Mapping of stat name to signed delta

    Returns:
        New StatVector with every field in [STAT_MIN, STAT_MAX]
    """
    return StatVector(
        **{name: clamp(getattr(stats, name) + effect.get(name, 0)) for name in STAT_NAMES}
    )
