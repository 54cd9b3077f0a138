from docparser.parser.document_parser import (
    DocumentParser,
    build_document_parser,
    get_document_parser,
    parse_document,
)
from docparser.parser.models import (
    DocumentMetadata,
    DocumentType,
    PageCount,
    PageImage,
    ParsedDocument,
    PlainText,
    RenderedPages,
)

__all__ = [
    "DocumentMetadata",
    "DocumentParser",
    "DocumentType",
    "PageCount",
    "PageImage",
    "ParsedDocument",
    "PlainText",
    "RenderedPages",
    "build_document_parser",
    "get_document_parser",
    "parse_document",
]
