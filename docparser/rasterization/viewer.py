"""HTML fragment that presents rasterized pages inline."""

from html import escape

from docparser.parser.models import RenderedPages


def render_pages_html(pages: RenderedPages, title: str = "PDF Document Viewer") -> str:
    total = pages.page_count
    plural = "s" if total > 1 else ""
    page_blocks = "".join(
        f'<div class="pdf-page">'
        f'<img src="{image.data_uri}" alt="PDF Page {image.page_number}" '
        f'width="{image.width}" height="{image.height}" />'
        f'<p class="pdf-page-caption">Page {image.page_number} of {total}</p>'
        f"</div>"
        for image in pages.images
    )
    return (
        '<div class="pdf-image-viewer">'
        '<div class="pdf-viewer-header">'
        f"<h3>{escape(title)}</h3>"
        f"<p>This PDF contains image-based content. {total} page{plural} "
        "converted to images for viewing.</p>"
        "</div>"
        f"{page_blocks}"
        "</div>"
    )
