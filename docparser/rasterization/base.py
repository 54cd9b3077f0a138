from abc import ABC, abstractmethod

from docparser.parser.models import PageImage


class BasePageRasterizer(ABC):
    """Contract for all page rasterization adapters."""

    def __init__(self, density: int = 100, max_width: int = 800, max_height: int = 1200) -> None:
        self._density = density
        self._max_width = max_width
        self._max_height = max_height

    @abstractmethod
    def rasterize(self, pdf_bytes: bytes) -> list[PageImage]:
        """Render every page of a PDF to a PNG image in one batch.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One PageImage per page, in page order. Each image fits within
            max_width x max_height.

        Raises:
            RasterizationError: if the document cannot be opened or rendered.
        """

    def _fit_scale(self, width: float, height: float) -> float:
        """Zoom factor from PDF points: the configured density, capped by the size bounds."""
        scale = self._density / 72
        if width > 0:
            scale = min(scale, self._max_width / width)
        if height > 0:
            scale = min(scale, self._max_height / height)
        return scale
