from pydantic import BaseModel


class PredictBehaviorResponse(BaseModel):
    predicted_action: str
    # None where the probability is nan/inf (zero scale or exp overflow)
    probabilities: dict[str, float | None] = {}


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "User Behavior Prediction API"
    mode: str = "mock"


class ModelInfoResponse(BaseModel):
    model_name: str = ""
    input_size: int
    output_classes: list[str] = []
    numerical_features: list[str] = []
    categorical_features: list[str] = []
    mode: str = "mock"
    onnx_runtime: str = "not linked"
    model_path: str = ""

    model_config = {"protected_namespaces": ()}
