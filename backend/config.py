import os
from pathlib import Path

from pydantic_settings import BaseSettings

ARTIFACTS_DIR = Path(__file__).resolve().parent / "artifacts"


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # Configuration artifacts, loaded once at startup
    metadata_path: str = str(ARTIFACTS_DIR / "model_metadata.json")
    scaler_path: str = str(ARTIFACTS_DIR / "scaler_params.json")
    model_path: str = str(ARTIFACTS_DIR / "user_behavior_model.onnx")  # reported by /model_info, never loaded

    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    predict_rate_limit: str = "120/minute"
    rate_limit_enabled: bool = True

    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
