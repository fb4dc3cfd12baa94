"""Distribution converter: raw slot scores -> softmax probabilities + arg-max label."""

from collections.abc import Sequence

import numpy as np

from models.schemas.prediction_result import SCORE_SLOTS, PredictionResult, ScoreVector


def softmax(scores: Sequence[float]) -> list[float]:
    """Plain ``exp(s) / sum(exp(s))``.

    Scores are not shifted by their maximum, so large inputs overflow to inf
    and the affected probabilities come out as nan instead of raising.
    """
    arr = np.asarray(scores, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        exps = np.exp(arr)
        probs = exps / exps.sum()
    return probs.tolist()


def argmax_first(values: Sequence[float]) -> int:
    """Index of the maximum, keeping the earliest index on ties (and on nan)."""
    best = 0
    for i in range(1, len(values)):
        if values[i] > values[best]:
            best = i
    return best


def to_distribution(scores: ScoreVector, target_classes: Sequence[str]) -> PredictionResult:
    """Map slot probabilities onto *target_classes* (slot order) and pick the label."""
    if len(target_classes) != len(SCORE_SLOTS):
        raise ValueError(
            f"Expected {len(SCORE_SLOTS)} target classes, got {len(target_classes)}"
        )

    probs = softmax(scores.as_list())
    label = target_classes[argmax_first(probs)]
    return PredictionResult(
        label=label,
        probabilities=dict(zip(target_classes, probs)),
    )
