import io

from docx import Document
from docx.document import Document as DocxDocument

from docparser.adapters.base import BaseDocumentAdapter
from docparser.adapters.text_adapter import EMPTY_TEXT_MESSAGE
from docparser.logging.logger import Log
from docparser.parser.models import DocumentMetadata, DocumentType, ParsedDocument

DEFAULT_TITLE = "Word Document"
WORD_FAILURE_MESSAGE = (
    "Word document could not be parsed. The file may be corrupted or in an "
    "unsupported format. Please try converting to text format."
)


class WordAdapter(BaseDocumentAdapter):
    """Raw text extraction from .docx files with python-docx."""

    def parse(self, buffer: bytes) -> ParsedDocument:
        try:
            document = Document(io.BytesIO(buffer))
            text = self._raw_text(document)
            properties = document.core_properties
            metadata = DocumentMetadata(
                title=properties.title or DEFAULT_TITLE,
                author=properties.author or None,
            )
        except Exception as exc:
            Log.warning("Word extraction failed", error=str(exc))
            return ParsedDocument.from_text(
                WORD_FAILURE_MESSAGE,
                DocumentType.WORD,
                DocumentMetadata(title=DEFAULT_TITLE),
            )
        return ParsedDocument.from_text(text or EMPTY_TEXT_MESSAGE, DocumentType.WORD, metadata)

    @staticmethod
    def _raw_text(document: DocxDocument) -> str:
        blocks = [p.text.strip() for p in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                blocks.extend(cell.text.strip() for cell in row.cells)
        return "\n\n".join(block for block in blocks if block)
