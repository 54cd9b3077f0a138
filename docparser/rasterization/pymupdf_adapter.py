import pymupdf

from docparser.parser.models import PageImage
from docparser.rasterization.base import BasePageRasterizer
from docparser.rasterization.exceptions import RasterizationError


class PyMuPdfRasterizer(BasePageRasterizer):
    """Renders PDF pages to PNG using PyMuPDF."""

    def rasterize(self, pdf_bytes: bytes) -> list[PageImage]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise RasterizationError("document is password-protected")
                return [self._render(page) for page in doc]
        except RasterizationError:
            raise
        except Exception as exc:
            raise RasterizationError(f"pymupdf rasterization failed: {exc}") from exc

    def _render(self, page: pymupdf.Page) -> PageImage:
        scale = self._fit_scale(page.rect.width, page.rect.height)
        pix = page.get_pixmap(matrix=pymupdf.Matrix(scale, scale))
        return PageImage(
            page_number=page.number + 1,
            data=pix.tobytes("png"),
            width=pix.width,
            height=pix.height,
        )
