from typing import ClassVar

from docparser.adapters.base import BaseDocumentAdapter
from docparser.adapters.pdf_adapter import PdfAdapter
from docparser.adapters.text_adapter import TextAdapter
from docparser.adapters.unsupported_adapter import FallbackAdapter, NotYetSupportedAdapter
from docparser.adapters.word_adapter import WordAdapter
from docparser.config.heuristics import HeuristicsConfig
from docparser.config.settings import Settings
from docparser.parser.models import DocumentMetadata, DocumentType
from docparser.pdf.extractor import PdfTextExtractor
from docparser.rasterization.factory import RasterizerFactory


class AdapterFactory:
    """Resolves the adapter for a file extension."""

    DOCUMENT_TYPES: ClassVar[dict[str, DocumentType]] = {
        "pdf": DocumentType.PDF,
        "docx": DocumentType.WORD,
        "doc": DocumentType.WORD,
        "pptx": DocumentType.POWERPOINT,
        "ppt": DocumentType.POWERPOINT,
        "epub": DocumentType.EPUB,
        "txt": DocumentType.TEXT,
        "md": DocumentType.TEXT,
        "rtf": DocumentType.TEXT,
        "html": DocumentType.HTML,
        "htm": DocumentType.HTML,
    }

    def __init__(self, pdf_adapter: PdfAdapter) -> None:
        self._text_adapter = TextAdapter()
        self._adapters: dict[DocumentType, BaseDocumentAdapter] = {
            DocumentType.PDF: pdf_adapter,
            DocumentType.WORD: WordAdapter(),
            DocumentType.POWERPOINT: NotYetSupportedAdapter(
                DocumentType.POWERPOINT,
                "PowerPoint presentations",
                DocumentMetadata(title="PowerPoint Presentation", slides=1),
            ),
            DocumentType.EPUB: NotYetSupportedAdapter(
                DocumentType.EPUB,
                "EPUB books",
                DocumentMetadata(title="EPUB Book"),
            ),
            DocumentType.TEXT: self._text_adapter,
            DocumentType.HTML: TextAdapter(DocumentType.HTML),
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> "AdapterFactory":
        text_extractor = PdfTextExtractor(
            heuristics=HeuristicsConfig.from_settings(settings),
            max_scan_bytes=settings.max_scan_bytes,
        )
        rasterizer = RasterizerFactory.create(settings)
        return cls(PdfAdapter(text_extractor, rasterizer))

    @classmethod
    def document_type_for(cls, extension: str) -> DocumentType:
        """Type reported for *extension*; unknown extensions report TEXT."""
        return cls.DOCUMENT_TYPES.get(extension.lower(), DocumentType.TEXT)

    def create(self, extension: str) -> BaseDocumentAdapter:
        document_type = self.DOCUMENT_TYPES.get(extension.lower())
        if document_type is None:
            return FallbackAdapter(extension.lower(), self._text_adapter)
        return self._adapters[document_type]
