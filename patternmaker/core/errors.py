class InvalidInputError(ValueError):
    """Raised when the caller hands the pipeline something it cannot convert."""


__all__ = ["InvalidInputError"]
