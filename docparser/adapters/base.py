from abc import ABC, abstractmethod

from docparser.parser.models import ParsedDocument


class BaseDocumentAdapter(ABC):
    """Contract for all format-specific document adapters."""

    @abstractmethod
    def parse(self, buffer: bytes) -> ParsedDocument:
        """Turn a raw upload into a ParsedDocument with non-empty content.

        Args:
            buffer: Raw file content; may be empty, corrupt or mislabelled.

        Returns:
            ParsedDocument whose content is text, a page-image fragment or a
            human-readable placeholder.

        Raises:
            UnsupportedFormatError: only from TextAdapter, when the buffer is
                not text.
        """
