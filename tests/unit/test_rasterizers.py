import pytest

from docparser.rasterization.base import BasePageRasterizer
from docparser.rasterization.exceptions import RasterizationError
from docparser.rasterization.pdfplumber_adapter import PdfPlumberRasterizer
from docparser.rasterization.pymupdf_adapter import PyMuPdfRasterizer

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

RASTERIZERS = [PyMuPdfRasterizer, PdfPlumberRasterizer]


@pytest.mark.parametrize("rasterizer_cls", RASTERIZERS)
class TestPageRasterizers:
    def test_renders_png(
        self, rasterizer_cls: type[BasePageRasterizer], sample_pdf_bytes: bytes
    ) -> None:
        images = rasterizer_cls().rasterize(sample_pdf_bytes)

        assert len(images) == 1
        assert images[0].page_number == 1
        assert images[0].mime_type == "image/png"
        assert images[0].data.startswith(PNG_SIGNATURE)

    def test_renders_every_page_in_order(
        self, rasterizer_cls: type[BasePageRasterizer], multi_page_pdf_bytes: bytes
    ) -> None:
        images = rasterizer_cls().rasterize(multi_page_pdf_bytes)
        assert [image.page_number for image in images] == [1, 2]

    def test_fits_within_bounds(
        self, rasterizer_cls: type[BasePageRasterizer], sample_pdf_bytes: bytes
    ) -> None:
        image = rasterizer_cls(max_width=800, max_height=1200).rasterize(sample_pdf_bytes)[0]
        # letter pages are width-bound at the default density
        assert abs(image.width - 800) <= 1
        assert image.height <= 1200

    def test_blank_page_still_renders(
        self, rasterizer_cls: type[BasePageRasterizer], empty_pdf_bytes: bytes
    ) -> None:
        assert len(rasterizer_cls().rasterize(empty_pdf_bytes)) == 1

    def test_raises_on_invalid_bytes(self, rasterizer_cls: type[BasePageRasterizer]) -> None:
        with pytest.raises(RasterizationError):
            rasterizer_cls().rasterize(b"not a pdf")


class TestFitScale:
    def test_density_bound(self) -> None:
        rasterizer = PyMuPdfRasterizer(density=72)
        assert rasterizer._fit_scale(612, 792) == pytest.approx(1.0)

    def test_width_bound(self) -> None:
        rasterizer = PyMuPdfRasterizer(density=300, max_width=800, max_height=1200)
        assert rasterizer._fit_scale(612, 792) == pytest.approx(800 / 612)

    def test_height_bound(self) -> None:
        rasterizer = PyMuPdfRasterizer(density=300, max_width=10_000, max_height=1200)
        assert rasterizer._fit_scale(612, 792) == pytest.approx(1200 / 792)

    def test_zero_size_page_uses_density(self) -> None:
        assert PyMuPdfRasterizer(density=144)._fit_scale(0, 0) == pytest.approx(2.0)
