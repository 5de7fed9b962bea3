"""Situation models.

A Situation is what the player sees after a click: a message plus the
effect it had on their stats. A SituationTemplate is a catalog entry that
becomes a Situation when drawn; templates without a fixed effect get one
generated at draw time.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from toclickornot.models.stats import Effect
from toclickornot.parameters import STAT_NAMES


def _validate_effect(effect: Optional[dict[str, int]]) -> Optional[dict[str, int]]:
    if effect is None:
        return None
    unknown = sorted(set(effect) - set(STAT_NAMES))
    if unknown:
        raise ValueError(f"Unknown stat names in effect: {unknown}")
    return {name: int(delta) for name, delta in effect.items()}


class Situation(BaseModel):
    """A drawn event and the stat changes it caused.

    Attributes:
        message: Text shown to the player
        effects: Signed deltas per stat (subset of the four stats)
    """

    model_config = ConfigDict(frozen=True)

    message: str
    effects: Effect = Field(default_factory=dict)

    @field_validator("effects", mode="before")
    @classmethod
    def check_stat_names(cls, v: dict[str, int]) -> dict[str, int]:
        return _validate_effect(v) or {}

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "effects": dict(self.effects)}


class SituationTemplate(BaseModel):
    """Catalog entry.

    Attributes:
        message: Text shown to the player
        effects: Fixed effect, or None to generate one on every draw
    """

    model_config = ConfigDict(frozen=True)

    message: str
    effects: Optional[Effect] = None

    @field_validator("effects", mode="before")
    @classmethod
    def check_stat_names(cls, v: Optional[dict[str, int]]) -> Optional[dict[str, int]]:
        return _validate_effect(v)
