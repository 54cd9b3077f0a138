from docparser.config.settings import Settings
from docparser.rasterization.base import BasePageRasterizer
from docparser.rasterization.pdfplumber_adapter import PdfPlumberRasterizer
from docparser.rasterization.pymupdf_adapter import PyMuPdfRasterizer


class RasterizerFactory:
    """Creates the page rasterizer selected in settings."""

    ADAPTERS: dict[str, type[BasePageRasterizer]] = {
        "pdfplumber": PdfPlumberRasterizer,
        "pymupdf": PyMuPdfRasterizer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePageRasterizer:
        engine = settings.raster_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown raster engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(
            density=settings.raster_density,
            max_width=settings.raster_max_width,
            max_height=settings.raster_max_height,
        )
