class PdfExtractionError(Exception):
    """Base exception for PDF text recovery failures."""


class CorruptDocumentError(PdfExtractionError):
    """Raised when no PDF structure can be located in the buffer."""


class NoExtractableTextError(PdfExtractionError):
    """Raised when every strategy ran but no readable text was recovered."""
