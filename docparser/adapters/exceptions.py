class AdapterError(Exception):
    """Base exception for format adapter failures."""


class UnsupportedFormatError(AdapterError):
    """Raised when a buffer cannot be read in the requested format."""
