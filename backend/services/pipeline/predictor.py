"""User behaviour predictor: wires the pipeline stages together.

Flow per request:
    raw feature vector
      ├─ normalize(raw, schema, scaler)        → normalized vector
      ├─ score(normalized, schema, rules)      → ScoreVector
      └─ to_distribution(scores, classes)      → PredictionResult

Mock mode: no trained model is loaded. The scores come from a fixed
heuristic over the configured feature layout.
"""

import logging
from collections.abc import Sequence
from typing import Any

from models.schemas.feature_schema import FeatureSchema
from models.schemas.prediction_result import PredictionResult
from models.schemas.scaler_params import ScalerParams
from services.pipeline.base import BaseModelService
from services.pipeline.distribution import to_distribution
from services.pipeline.normalizer import normalize
from services.pipeline.scaler_loader import load_scaler
from services.pipeline.schema_loader import ConfigSource, load_schema
from services.pipeline.scorer import Rule, compile_rules, score

logger = logging.getLogger(__name__)


class BehaviorPredictor(BaseModelService):
    model_name = "user_behavior_mock"

    def __init__(self, metadata_source: ConfigSource, scaler_source: ConfigSource) -> None:
        self._metadata_source = metadata_source
        self._scaler_source = scaler_source
        self._schema: FeatureSchema | None = None
        self._scaler: ScalerParams | None = None
        self._rules: tuple[Rule, ...] = ()

    def load(self) -> None:
        # ConfigError propagates: the service must not start half-configured
        schema = load_schema(self._metadata_source)
        scaler = load_scaler(self._scaler_source, schema)
        self._rules = compile_rules(schema)
        self._schema = schema
        self._scaler = scaler
        logger.info("Predictor initialized (Mock mode), input_size=%d", schema.input_size)

    @property
    def schema(self) -> FeatureSchema:
        self.ensure_loaded()
        return self._schema

    @property
    def scaler(self) -> ScalerParams:
        self.ensure_loaded()
        return self._scaler

    def predict(self, data: Sequence[float]) -> PredictionResult:
        self.ensure_loaded()
        normalized = normalize(data, self._schema, self._scaler)
        scores = score(normalized, self._schema, self._rules)
        return to_distribution(scores, self._schema.target_classes)

    def predict_and_format(self, data: Sequence[float]) -> dict[str, Any]:
        """Predict and shape the result as ``{"predicted_action", "probabilities"}``."""
        result = self.predict(data)
        return {
            "predicted_action": result.label,
            "probabilities": dict(result.probabilities),
        }
