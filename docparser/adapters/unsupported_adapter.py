from docparser.adapters.base import BaseDocumentAdapter
from docparser.adapters.exceptions import UnsupportedFormatError
from docparser.adapters.text_adapter import TextAdapter
from docparser.logging.logger import Log
from docparser.parser.models import DocumentMetadata, DocumentType, ParsedDocument

CONVERT_HINT = "Please convert to Word (.docx) or text format for better compatibility."


class NotYetSupportedAdapter(BaseDocumentAdapter):
    """Known formats without an inline extractor (slide decks, e-books)."""

    def __init__(self, document_type: DocumentType, label: str, metadata: DocumentMetadata) -> None:
        self._document_type = document_type
        self._label = label
        self._metadata = metadata

    def parse(self, buffer: bytes) -> ParsedDocument:
        content = f"{self._label} are not yet supported for inline viewing. {CONVERT_HINT}"
        return ParsedDocument.from_text(content, self._document_type, self._metadata)


class FallbackAdapter(BaseDocumentAdapter):
    """Unrecognised extensions: read as text, otherwise report the format as unsupported."""

    def __init__(self, extension: str, text_adapter: TextAdapter | None = None) -> None:
        self._extension = extension
        self._text_adapter = text_adapter or TextAdapter()

    def parse(self, buffer: bytes) -> ParsedDocument:
        try:
            return self._text_adapter.parse(buffer)
        except UnsupportedFormatError as exc:
            Log.warning("Unrecognised binary upload", extension=self._extension, error=str(exc))
            label = f".{self._extension}" if self._extension else "no extension"
            return ParsedDocument.from_text(
                f"Unsupported file format ({label}). {CONVERT_HINT}",
                DocumentType.TEXT,
                DocumentMetadata(title="Unsupported Document"),
            )
