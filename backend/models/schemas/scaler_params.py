"""Per-feature scaling parameters for the numerical prefix of the input vector."""

from pydantic import BaseModel


class ScalerParams(BaseModel):
    """Positionally aligned with ``FeatureSchema.numerical_features``.

    ``offset`` comes from the scaler document's ``mean`` array and ``range``
    from its ``scale`` array.
    """
    offset: tuple[float, ...] = ()
    range: tuple[float, ...] = ()

    model_config = {"frozen": True}
