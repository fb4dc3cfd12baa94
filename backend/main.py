import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import build_limiter, create_router
from config import Settings, settings
from services.pipeline.predictor import BehaviorPredictor

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ConfigError propagates and aborts startup
        predictor = BehaviorPredictor(app_settings.metadata_path, app_settings.scaler_path)
        predictor.ensure_loaded()
        app.state.predictor = predictor
        logger.info("Endpoints: POST /predict_behavior, GET /health, GET /model_info")
        yield

    app = FastAPI(
        title="User Behavior Prediction API",
        description="Predicts the next e-commerce action (addtocart, transaction, view)",
        version="1.0.0",
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    limiter = build_limiter(app_settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_router(limiter, app_settings))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting User Behavior Prediction API on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
