from dataclasses import replace

from docparser.adapters.base import BaseDocumentAdapter
from docparser.logging.logger import Log
from docparser.parser.models import (
    DocumentMetadata,
    DocumentType,
    PageCount,
    ParsedDocument,
    RenderedPages,
)
from docparser.pdf.decoder import DecodedSurface
from docparser.pdf.exceptions import CorruptDocumentError, NoExtractableTextError
from docparser.pdf.extractor import PdfTextExtractor
from docparser.rasterization.base import BasePageRasterizer
from docparser.rasterization.exceptions import RasterizationError
from docparser.rasterization.viewer import render_pages_html

DEFAULT_TITLE = "PDF Document"
CORRUPT_MESSAGE = (
    "PDF document could not be parsed. The file may be corrupted, password-protected, "
    "or in an unsupported format. Please try a different PDF file."
)
IMAGE_BASED_MESSAGE = (
    "This PDF appears to be image-based or contains only non-text elements. The document "
    "may contain scanned images, graphics, or other visual content that cannot be extracted "
    "as text. For better compatibility, please convert the PDF to a text-based format or use "
    "a PDF with selectable text content."
)
COMPLEX_CONTENT_MESSAGE = (
    "This PDF contains complex formatting or image-based content that cannot be displayed as "
    "text. The document may contain scanned images, graphics, or special formatting that "
    "requires a PDF viewer. For better compatibility, please convert the PDF to a text-based "
    "format or use a PDF with selectable text content."
)


class PdfAdapter(BaseDocumentAdapter):
    """PDF pipeline: text recovery first, page images when no readable text exists.

    Outcomes, in order of preference:
    1. readable text from the extraction strategies;
    2. rasterized pages wrapped in an HTML fragment;
    3. text from an aggressive literal scan when rasterization fails;
    4. a fixed explanatory placeholder.
    """

    def __init__(self, text_extractor: PdfTextExtractor, rasterizer: BasePageRasterizer) -> None:
        self._text_extractor = text_extractor
        self._rasterizer = rasterizer

    def parse(self, buffer: bytes) -> ParsedDocument:
        try:
            surface = self._text_extractor.decode(buffer)
        except CorruptDocumentError as exc:
            Log.warning("PDF structure not found", error=str(exc), size=len(buffer))
            return ParsedDocument.from_text(
                CORRUPT_MESSAGE,
                DocumentType.PDF,
                DocumentMetadata(title=DEFAULT_TITLE, pages=PageCount(value=1)),
            )

        title, author = self._text_extractor.read_info(surface)
        metadata = DocumentMetadata(
            title=title or DEFAULT_TITLE,
            author=author,
            pages=self._text_extractor.estimate_pages(surface),
        )

        try:
            text = self._text_extractor.extract(surface)
        except NoExtractableTextError as exc:
            Log.warning("No readable PDF text, rasterizing pages", reason=str(exc))
            return self._rasterize(buffer, surface, metadata)

        Log.info("Extracted PDF text", chars=len(text), encoding=surface.encoding)
        return ParsedDocument.from_text(text, DocumentType.PDF, metadata)

    def _rasterize(
        self,
        buffer: bytes,
        surface: DecodedSurface,
        metadata: DocumentMetadata,
    ) -> ParsedDocument:
        try:
            images = self._rasterizer.rasterize(buffer)
        except RasterizationError as exc:
            Log.warning("Rasterization failed, trying aggressive literal scan", error=str(exc))
            text = self._text_extractor.extract_aggressive(surface)
            if text:
                return ParsedDocument.from_text(text, DocumentType.PDF, metadata)
            return ParsedDocument.from_text(COMPLEX_CONTENT_MESSAGE, DocumentType.PDF, metadata)

        if not images:
            return ParsedDocument.from_text(IMAGE_BASED_MESSAGE, DocumentType.PDF, metadata)

        pages = RenderedPages(images=tuple(images))
        Log.info("Rasterized PDF pages", pages=pages.page_count)
        return ParsedDocument.from_pages(
            pages,
            render_pages_html(pages),
            DocumentType.PDF,
            replace(metadata, pages=PageCount(value=pages.page_count, estimated=False)),
        )
