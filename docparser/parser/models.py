import base64
from dataclasses import dataclass, field
from enum import Enum


class DocumentType(str, Enum):
    """Input adapter that produced a result; values are the wire strings."""

    TEXT = "text"
    HTML = "html"
    PDF = "pdf"
    WORD = "word"
    POWERPOINT = "powerpoint"
    EPUB = "epub"


@dataclass(frozen=True)
class PageCount:
    """Number of pages; ``estimated`` is True when counted from structural markers."""

    value: int
    estimated: bool = True


@dataclass(frozen=True)
class DocumentMetadata:
    title: str | None = None
    author: str | None = None
    pages: PageCount | None = None
    slides: int | None = None


@dataclass(frozen=True)
class PageImage:
    """One rasterized page."""

    page_number: int  # 1-based
    data: bytes
    width: int
    height: int
    mime_type: str = "image/png"

    @property
    def data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class RenderedPages:
    images: tuple[PageImage, ...] = field(default_factory=tuple)

    @property
    def page_count(self) -> int:
        return len(self.images)


DocumentBody = PlainText | RenderedPages


@dataclass(frozen=True)
class ParsedDocument:
    """Normalized output of a single parse call.

    ``content`` is always non-empty. ``body`` tells callers what ``content`` is:
    ``PlainText`` for text (including placeholders) or ``RenderedPages`` when
    ``content`` is an HTML fragment of embedded page images.
    """

    content: str
    type: DocumentType
    body: DocumentBody
    metadata: DocumentMetadata | None = None

    @classmethod
    def from_text(
        cls,
        text: str,
        document_type: DocumentType,
        metadata: DocumentMetadata | None = None,
    ) -> "ParsedDocument":
        return cls(
            content=text,
            type=document_type,
            body=PlainText(text=text),
            metadata=metadata,
        )

    @classmethod
    def from_pages(
        cls,
        pages: RenderedPages,
        html: str,
        document_type: DocumentType,
        metadata: DocumentMetadata | None = None,
    ) -> "ParsedDocument":
        return cls(content=html, type=document_type, body=pages, metadata=metadata)

    @property
    def is_rendered(self) -> bool:
        return isinstance(self.body, RenderedPages)

    def to_payload(self) -> dict[str, object]:
        """JSON-ready envelope for HTTP callers."""
        metadata: dict[str, object] = {}
        if self.metadata is not None:
            if self.metadata.title is not None:
                metadata["title"] = self.metadata.title
            if self.metadata.author is not None:
                metadata["author"] = self.metadata.author
            if self.metadata.pages is not None:
                metadata["pages"] = self.metadata.pages.value
                metadata["pages_estimated"] = self.metadata.pages.estimated
            if self.metadata.slides is not None:
                metadata["slides"] = self.metadata.slides
        return {
            "content": self.content,
            "type": self.type.value,
            "metadata": metadata,
            "body_kind": "rendered_pages" if self.is_rendered else "plain_text",
        }
