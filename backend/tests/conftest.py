"""Shared test configuration, pytest markers and config-document fixtures."""

import json

import pytest

TARGET_CLASSES = ["addtocart", "transaction", "view"]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI application end to end"
    )


def _metadata(numerical, categorical=(), classes=TARGET_CLASSES, input_size=None):
    numerical = list(numerical)
    categorical = list(categorical)
    return {
        "model_info": {
            "input_size": len(numerical) + len(categorical) if input_size is None else input_size,
            "num_classes": len(classes),
            "target_classes": list(classes),
        },
        "preprocessing": {
            "numerical_features": numerical,
            "categorical_features": categorical,
        },
    }


@pytest.fixture
def make_metadata():
    """Factory for metadata documents: make_metadata(numerical, categorical=...)."""
    return _metadata


@pytest.fixture
def write_json(tmp_path):
    """Write a document to tmp_path and return its path."""
    def _write(name, doc):
        path = tmp_path / name
        path.write_text(json.dumps(doc), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def session_metadata():
    """Four named numerical features, one generic one and four categorical codes."""
    return _metadata(
        numerical=[
            "cart_abandonment",
            "session_transaction",
            "session_addtocart",
            "session_view",
            "hour",
        ],
        categorical=["prev_event", "hour_category", "day_category", "time_diff_category"],
    )


@pytest.fixture
def identity_scaler():
    def _scaler(n):
        return {"mean": [0.0] * n, "scale": [1.0] * n}
    return _scaler
