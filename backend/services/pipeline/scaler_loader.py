"""Scaler loader: ``{"mean": [...], "scale": [...]}`` -> ScalerParams."""

import logging

from pydantic import BaseModel, ValidationError

from models.schemas.feature_schema import FeatureSchema
from models.schemas.scaler_params import ScalerParams
from services.errors import ConfigError
from services.pipeline.schema_loader import ConfigSource, read_json_document

logger = logging.getLogger(__name__)


class _ScalerDocument(BaseModel):
    mean: list[float]
    scale: list[float]


def load_scaler(source: ConfigSource, schema: FeatureSchema) -> ScalerParams:
    """Load offsets/ranges and check them against the schema's numerical features.

    A zero range is accepted; normalizing that feature then yields inf/nan.
    """
    doc = read_json_document(source, "scaler")
    try:
        parsed = _ScalerDocument.model_validate(doc)
    except ValidationError as e:
        raise ConfigError(f"Invalid scaler document: {e}") from e

    if len(parsed.mean) != schema.numerical_count:
        raise ConfigError("Scaler parameters size doesn't match numerical features")
    if len(parsed.scale) != len(parsed.mean):
        raise ConfigError(
            f"Scaler 'scale' has {len(parsed.scale)} entries, 'mean' has {len(parsed.mean)}"
        )

    zero_ranges = [
        name for name, r in zip(schema.numerical_features, parsed.scale) if r == 0
    ]
    if zero_ranges:
        logger.warning("Zero scale for features %s; their normalized values will be inf/nan", zero_ranges)

    logger.info("Loaded scaler parameters for %d numerical features", len(parsed.mean))
    return ScalerParams(offset=tuple(parsed.mean), range=tuple(parsed.scale))
