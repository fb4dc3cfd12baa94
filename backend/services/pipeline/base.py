"""Abstract base class for prediction services."""

from abc import ABC, abstractmethod
from typing import Any
import logging

logger = logging.getLogger(__name__)


class BaseModelService(ABC):
    """Base class for services that load artifacts once and then serve predictions.

    Subclasses must implement:
        - model_name: identifier used in logs and /model_info
        - load(): read configuration artifacts into memory
        - predict(...): run inference and return a typed schema
    """

    model_name: str = ""
    _loaded: bool = False

    @abstractmethod
    def load(self) -> None:
        """Load artifacts. Called once, before the first prediction."""

    @abstractmethod
    def predict(self, *args: Any, **kwargs: Any) -> Any:
        """Run inference. Returns a Pydantic schema."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        """Load artifacts if not already loaded."""
        if not self._loaded:
            logger.info("Loading model: %s", self.model_name)
            self.load()
            self._loaded = True
            logger.info("Model loaded: %s", self.model_name)
