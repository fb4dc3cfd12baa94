"""Pydantic contracts shared by the prediction pipeline stages."""

from models.schemas.feature_schema import FeatureSchema
from models.schemas.scaler_params import ScalerParams
from models.schemas.prediction_result import (
    SCORE_SLOTS,
    PredictionResult,
    ScoreSlot,
    ScoreVector,
)

__all__ = [
    "FeatureSchema",
    "ScalerParams",
    "ScoreSlot",
    "SCORE_SLOTS",
    "ScoreVector",
    "PredictionResult",
]
