class RasterizationError(Exception):
    """Raised when pages cannot be converted to images."""
