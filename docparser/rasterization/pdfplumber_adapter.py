import io

import pdfplumber
from pdfplumber.page import Page

from docparser.parser.models import PageImage
from docparser.rasterization.base import BasePageRasterizer
from docparser.rasterization.exceptions import RasterizationError


class PdfPlumberRasterizer(BasePageRasterizer):
    """Renders PDF pages to PNG using pdfplumber's page images."""

    def rasterize(self, pdf_bytes: bytes) -> list[PageImage]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [
                    self._render(index, page) for index, page in enumerate(pdf.pages, start=1)
                ]
        except RasterizationError:
            raise
        except Exception as exc:
            raise RasterizationError(f"pdfplumber rasterization failed: {exc}") from exc

    def _render(self, page_number: int, page: Page) -> PageImage:
        scale = self._fit_scale(float(page.width), float(page.height))
        image = page.to_image(resolution=72 * scale).original
        buf = io.BytesIO()
        image.save(buf, format="PNG")
        return PageImage(
            page_number=page_number,
            data=buf.getvalue(),
            width=image.width,
            height=image.height,
        )
