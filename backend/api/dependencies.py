"""Shared dependencies for API routes."""

from fastapi import Request

from config import Settings
from services.pipeline.predictor import BehaviorPredictor


def get_predictor(request: Request) -> BehaviorPredictor:
    return request.app.state.predictor


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
