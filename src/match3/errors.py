class BoardConfigurationError(ValueError):
    """Raised when a board is requested with unusable dimensions."""


class SupplierExhaustedError(RuntimeError):
    """Raised when the tile supplier has no further values to hand out."""
