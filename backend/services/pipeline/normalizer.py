"""Normalizer: scale the numerical prefix, pass categorical codes through."""

from collections.abc import Sequence

import numpy as np

from models.schemas.feature_schema import FeatureSchema
from models.schemas.scaler_params import ScalerParams
from services.errors import InputError


def normalize(
    raw: Sequence[float],
    schema: FeatureSchema,
    scaler: ScalerParams,
) -> list[float]:
    """Return ``(raw[i] - offset[i]) / range[i]`` for numerical features.

    Categorical features keep their raw (already encoded) value. A zero range
    produces inf or nan without raising.
    """
    if len(raw) != schema.input_size:
        raise InputError(
            f"Input data size mismatch. Expected: {schema.input_size}, Got: {len(raw)}"
        )

    values = np.asarray(raw, dtype=np.float64)
    n_num = schema.numerical_count
    scaled = values.copy()

    with np.errstate(divide="ignore", invalid="ignore"):
        scaled[:n_num] = (values[:n_num] - np.asarray(scaler.offset, dtype=np.float64)) / np.asarray(
            scaler.range, dtype=np.float64
        )

    return scaled.tolist()
