"""Scorer and distribution outputs."""

from enum import Enum

from pydantic import BaseModel


class ScoreSlot(str, Enum):
    """The three behaviours the heuristic scores, in output order."""
    ADDTOCART = "addtocart"
    TRANSACTION = "transaction"
    VIEW = "view"


SCORE_SLOTS: tuple[ScoreSlot, ...] = tuple(ScoreSlot)


class ScoreVector(BaseModel):
    """Raw class-affinity scores (unbounded, may be negative)."""
    addtocart: float = 0.0
    transaction: float = 0.0
    view: float = 0.0

    def as_list(self) -> list[float]:
        return [getattr(self, slot.value) for slot in SCORE_SLOTS]


class PredictionResult(BaseModel):
    """Arg-max label plus the probability of every target class."""
    label: str
    probabilities: dict[str, float] = {}
