import asyncio
from functools import lru_cache

from docparser.adapters.factory import AdapterFactory
from docparser.config.settings import Settings
from docparser.logging.logger import Log
from docparser.parser.models import DocumentMetadata, ParsedDocument

PARSE_ERROR_MESSAGE = (
    "Error parsing document. The file may be corrupted or in an unsupported format. "
    "Please try a different file."
)


class DocumentParser:
    """Entry point for uploads: dispatches on extension and never raises."""

    def __init__(self, adapter_factory: AdapterFactory) -> None:
        self._adapter_factory = adapter_factory

    def parse(self, buffer: bytes, filename: str) -> ParsedDocument:
        """Parse *buffer* according to the extension of *filename*.

        Any failure inside an adapter is logged and converted into a
        placeholder document; the returned content is never empty.
        """
        extension = self.extension_of(filename or "")
        try:
            document = self._adapter_factory.create(extension).parse(buffer)
        except Exception as exc:
            Log.error("Error parsing document", exc=exc, filename=filename)
            return self.error_document(extension)

        if not document.content:
            Log.warning("Adapter returned empty content", filename=filename)
            return self.error_document(extension)

        Log.info(
            "Parsed document",
            filename=filename,
            type=document.type.value,
            rendered=document.is_rendered,
        )
        return document

    @staticmethod
    def extension_of(filename: str) -> str:
        _, dot, extension = filename.rpartition(".")
        return extension.lower() if dot else ""

    @staticmethod
    def error_document(extension: str) -> ParsedDocument:
        """Placeholder returned whenever a document cannot be parsed."""
        return ParsedDocument.from_text(
            PARSE_ERROR_MESSAGE,
            AdapterFactory.document_type_for(extension),
            DocumentMetadata(title="Parsing Error"),
        )


def build_document_parser(settings: Settings | None = None) -> DocumentParser:
    """Build a DocumentParser with all adapters configured from settings."""
    settings = settings or Settings()
    Log.configure(settings.log_level)
    return DocumentParser(AdapterFactory.from_settings(settings))


@lru_cache(maxsize=1)
def get_document_parser() -> DocumentParser:
    return build_document_parser()


async def parse_document(
    buffer: bytes,
    filename: str,
    parser: DocumentParser | None = None,
) -> ParsedDocument:
    """Async entry point; the whole parse runs in a worker thread.

    Never raises: a parser that cannot be built from settings yields the
    same placeholder as a failed parse.
    """
    if parser is None:
        try:
            parser = get_document_parser()
        except Exception as exc:
            Log.error("Document parser could not be built", exc=exc, filename=filename)
            return DocumentParser.error_document(DocumentParser.extension_of(filename or ""))
    return await asyncio.to_thread(parser.parse, buffer, filename)
