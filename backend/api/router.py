import logging
import math

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_predictor, get_settings
from config import Settings
from models.requests import PredictBehaviorRequest
from models.responses import HealthResponse, ModelInfoResponse, PredictBehaviorResponse
from services.errors import InputError
from services.pipeline.predictor import BehaviorPredictor

logger = logging.getLogger(__name__)


def build_limiter(app_settings: Settings) -> Limiter:
    """One limiter per app, with its own in-memory counters."""
    return Limiter(key_func=get_remote_address, enabled=app_settings.rate_limit_enabled)


def create_router(limiter: Limiter, app_settings: Settings) -> APIRouter:
    """Build the API routes, rate limiting /predict_behavior with *limiter*."""
    router = APIRouter()

    @router.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse()

    @router.get("/model_info", response_model=ModelInfoResponse)
    async def model_info(
        predictor: BehaviorPredictor = Depends(get_predictor),
        settings: Settings = Depends(get_settings),
    ):
        schema = predictor.schema
        return ModelInfoResponse(
            model_name=predictor.model_name,
            input_size=schema.input_size,
            output_classes=list(schema.target_classes),
            numerical_features=list(schema.numerical_features),
            categorical_features=list(schema.categorical_features),
            model_path=settings.model_path,
        )

    @router.post("/predict_behavior", response_model=PredictBehaviorResponse)
    @limiter.limit(app_settings.predict_rate_limit)
    async def predict_behavior(
        request: Request,
        body: PredictBehaviorRequest,
        predictor: BehaviorPredictor = Depends(get_predictor),
    ):
        if body.data is None:
            raise HTTPException(status_code=400, detail="Missing 'data' field in request")

        try:
            result = predictor.predict_and_format(body.data)
        except InputError as e:
            logger.warning("Rejected prediction request: %s", e)
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.exception("Prediction failed")
            raise HTTPException(status_code=500, detail=str(e))

        # JSON has no nan/inf
        probabilities = {
            label: (p if math.isfinite(p) else None)
            for label, p in result["probabilities"].items()
        }
        return PredictBehaviorResponse(
            predicted_action=result["predicted_action"],
            probabilities=probabilities,
        )

    return router
