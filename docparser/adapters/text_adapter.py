from docparser.adapters.base import BaseDocumentAdapter
from docparser.adapters.exceptions import UnsupportedFormatError
from docparser.parser.models import DocumentType, ParsedDocument

EMPTY_TEXT_MESSAGE = "No text content found in the document."


class TextAdapter(BaseDocumentAdapter):
    """Decodes plain text, markdown, RTF and HTML uploads as UTF-8."""

    def __init__(self, document_type: DocumentType = DocumentType.TEXT) -> None:
        self._document_type = document_type

    def parse(self, buffer: bytes) -> ParsedDocument:
        try:
            text = buffer.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise UnsupportedFormatError(f"buffer is not UTF-8 text: {exc.reason}") from exc
        if not text.strip():
            return ParsedDocument.from_text(EMPTY_TEXT_MESSAGE, self._document_type)
        return ParsedDocument.from_text(text, self._document_type)
