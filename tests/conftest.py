import io
from unittest.mock import MagicMock

import pytest
from docx import Document
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docparser.adapters.factory import AdapterFactory
from docparser.adapters.pdf_adapter import PdfAdapter
from docparser.parser.document_parser import DocumentParser
from docparser.pdf.extractor import PdfTextExtractor
from docparser.rasterization.base import BasePageRasterizer
from docparser.rasterization.exceptions import RasterizationError

# Structural keywords and numeric tuples only; no literal text anywhere.
GARBAGE_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj\n<< /Length 20 >>\nstream\n0 0 612 792 0 0\nendstream\nendobj\n"
    b"2 0 obj\n<< /Filter /FlateDecode >>\nendobj\n"
    b"xref\n0 3\ntrailer\nstartxref\n9\n%%EOF\n"
)

HELLO_WORLD_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj\n<< /Length 44 >>\nstream\n"
    b"BT /F1 12 Tf 72 712 Td (Hello World from the test suite) Tj ET\n"
    b"endstream\nendobj\n%%EOF\n"
)


def _canvas(buf: io.BytesIO) -> canvas.Canvas:
    # Uncompressed page streams keep text operators visible in the raw bytes.
    return canvas.Canvas(buf, pagesize=letter, pageCompression=0)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = _canvas(buf)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = _canvas(buf)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = _canvas(buf)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def garbage_pdf_bytes() -> bytes:
    return GARBAGE_PDF


@pytest.fixture()
def hello_world_pdf_bytes() -> bytes:
    return HELLO_WORLD_PDF


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    document = Document()
    document.core_properties.title = "Quarterly Report"
    document.core_properties.author = "Jane Analyst"
    document.add_paragraph("Revenue grew in the third quarter.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Region"
    table.rows[0].cells[1].text = "North"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    buf = io.BytesIO()
    Document().save(buf)
    return buf.getvalue()


@pytest.fixture()
def failing_rasterizer() -> MagicMock:
    rasterizer = MagicMock(spec=BasePageRasterizer)
    rasterizer.rasterize.side_effect = RasterizationError("no renderer")
    return rasterizer


@pytest.fixture()
def parser_without_renderer(failing_rasterizer: MagicMock) -> DocumentParser:
    """Facade wired with the real text pipeline and a rasterizer that always fails."""
    return DocumentParser(AdapterFactory(PdfAdapter(PdfTextExtractor(), failing_rasterizer)))
