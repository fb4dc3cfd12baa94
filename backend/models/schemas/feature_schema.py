"""Feature layout of the input vector and the target classes it is scored against."""

from pydantic import BaseModel


class FeatureSchema(BaseModel):
    """Loaded from the model metadata document; read-only after startup.

    Every input vector is laid out as ``numerical_features`` followed by
    ``categorical_features``.
    """
    input_size: int = 0
    num_classes: int = 0
    target_classes: tuple[str, ...] = ()
    numerical_features: tuple[str, ...] = ()
    categorical_features: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @property
    def feature_order(self) -> tuple[str, ...]:
        return self.numerical_features + self.categorical_features

    @property
    def numerical_count(self) -> int:
        return len(self.numerical_features)
