"""Error types raised by the prediction pipeline.

``ConfigError`` is fatal and surfaces while the service starts up.
``InputError`` rejects a single request and leaves shared state untouched.
"""


class PredictorError(Exception):
    """Base class for prediction pipeline failures."""


class ConfigError(PredictorError):
    """Metadata or scaler configuration is missing, malformed or inconsistent."""


class InputError(PredictorError, ValueError):
    """A request feature vector does not match the loaded schema."""
