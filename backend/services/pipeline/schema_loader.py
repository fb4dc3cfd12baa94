"""Schema loader: model metadata document -> FeatureSchema.

Expected document::

    {
      "model_info": {"input_size": 25, "num_classes": 3,
                     "target_classes": ["addtocart", "transaction", "view"]},
      "preprocessing": {"numerical_features": [...],
                        "categorical_features": [...]}
    }

``preprocessing`` and either feature list may be omitted (empty).
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from models.schemas.feature_schema import FeatureSchema
from models.schemas.prediction_result import SCORE_SLOTS
from services.errors import ConfigError

logger = logging.getLogger(__name__)

ConfigSource = str | Path | Mapping[str, Any]


class _ModelInfo(BaseModel):
    input_size: int
    num_classes: int
    target_classes: list[str]


class _Preprocessing(BaseModel):
    numerical_features: list[str] = []
    categorical_features: list[str] = []


class _MetadataDocument(BaseModel):
    model_info: _ModelInfo
    preprocessing: _Preprocessing = _Preprocessing()

    model_config = {"protected_namespaces": ()}


def read_json_document(source: ConfigSource, kind: str) -> dict[str, Any]:
    """Return the parsed JSON object behind *source*.

    *source* is a file path or an already-parsed mapping. Anything that is not
    a readable JSON object raises ConfigError.
    """
    if isinstance(source, Mapping):
        return dict(source)

    path = Path(source)
    try:
        with path.open("r", encoding="utf-8") as fh:
            doc = json.load(fh)
    except OSError as e:
        raise ConfigError(f"Cannot open {kind} file: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Cannot parse {kind} file {path}: {e}") from e

    if not isinstance(doc, dict):
        raise ConfigError(f"{kind.capitalize()} file {path} must contain a JSON object")
    return doc


def load_schema(source: ConfigSource) -> FeatureSchema:
    """Parse and validate the model metadata into a FeatureSchema."""
    doc = read_json_document(source, "metadata")
    try:
        parsed = _MetadataDocument.model_validate(doc)
    except ValidationError as e:
        raise ConfigError(f"Invalid metadata document: {e}") from e

    info = parsed.model_info
    schema = FeatureSchema(
        input_size=info.input_size,
        num_classes=info.num_classes,
        target_classes=tuple(info.target_classes),
        numerical_features=tuple(parsed.preprocessing.numerical_features),
        categorical_features=tuple(parsed.preprocessing.categorical_features),
    )
    _validate(schema)

    logger.info(
        "Loaded feature schema: %d numerical, %d categorical, classes=%s",
        len(schema.numerical_features),
        len(schema.categorical_features),
        list(schema.target_classes),
    )
    return schema


def _validate(schema: FeatureSchema) -> None:
    n_features = len(schema.feature_order)
    if schema.input_size != n_features:
        raise ConfigError(
            f"input_size {schema.input_size} doesn't match feature count {n_features}"
        )

    # One target class per score slot, mapped positionally
    if len(schema.target_classes) != len(SCORE_SLOTS):
        raise ConfigError(
            f"Expected {len(SCORE_SLOTS)} target classes, got {len(schema.target_classes)}"
        )
    if schema.num_classes != len(schema.target_classes):
        raise ConfigError(
            f"num_classes {schema.num_classes} doesn't match "
            f"{len(schema.target_classes)} target classes"
        )
    if len(set(schema.target_classes)) != len(schema.target_classes):
        raise ConfigError(f"Duplicate target classes: {list(schema.target_classes)}")

    for slot, label in zip(SCORE_SLOTS, schema.target_classes):
        if slot.value != label:
            logger.warning("Score slot %s is reported as class %r", slot.value, label)
