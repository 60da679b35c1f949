"""Domain errors surfaced to the entry forms."""


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""


class ValidationError(ValueError):
    """Raised when a form draft cannot be committed."""


class EstimationError(RuntimeError):
    """Raised when a calorie estimate is unavailable."""


class TransientEstimationError(EstimationError):
    """Estimation failure that is worth a single retry."""
