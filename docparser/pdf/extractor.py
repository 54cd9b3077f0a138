import re
from collections import Counter
from dataclasses import dataclass
from typing import ClassVar

from docparser.config.heuristics import DEFAULT_HEURISTICS, HeuristicsConfig
from docparser.logging.logger import Log
from docparser.parser.models import PageCount
from docparser.pdf.cleaner import TextCleaner
from docparser.pdf.decoder import ByteDecoder, DecodedSurface
from docparser.pdf.exceptions import CorruptDocumentError, NoExtractableTextError
from docparser.pdf.readability import ReadabilityClassifier
from docparser.pdf.strategies import (
    LITERAL,
    SHOW_ARRAY,
    ExtractionStrategy,
    default_strategies,
    find_literals,
)


@dataclass(frozen=True)
class ExtractionResult:
    text: str
    strategies: tuple[str, ...] = ()


class MultiStrategyExtractor:
    """Runs strategies in order until enough cleaned text has accumulated."""

    def __init__(
        self,
        strategies: tuple[ExtractionStrategy, ...] | None = None,
        cleaner: TextCleaner | None = None,
        heuristics: HeuristicsConfig = DEFAULT_HEURISTICS,
    ) -> None:
        self._strategies = strategies if strategies is not None else default_strategies(heuristics)
        self._cleaner = cleaner or TextCleaner(heuristics)
        self._min_length = heuristics.min_text_length

    def extract(self, surface: str) -> ExtractionResult:
        fragments: list[str] = []
        seen: Counter[str] = Counter()
        used: list[str] = []
        for strategy in self._strategies:
            if len(" ".join(fragments)) >= self._min_length:
                break
            cleaned = (self._cleaner.clean_fragment(raw) for raw in strategy.find_literals(surface))
            accepted = self._unseen([fragment for fragment in cleaned if fragment], seen)
            if accepted:
                fragments.extend(accepted)
                seen.update(accepted)
                used.append(strategy.name)
                Log.debug(
                    "Strategy produced fragments",
                    strategy=strategy.name,
                    fragments=len(accepted),
                )
        return ExtractionResult(text=" ".join(fragments), strategies=tuple(used))

    @staticmethod
    def _unseen(candidates: list[str], seen: Counter[str]) -> list[str]:
        """Drop one candidate per occurrence an earlier strategy already accepted.

        Region strategies overlap (a text block usually sits inside a stream), so
        the same literal is found again by every later scan.
        """
        remaining = seen.copy()
        fresh: list[str] = []
        for fragment in candidates:
            if remaining[fragment] > 0:
                remaining[fragment] -= 1
            else:
                fresh.append(fragment)
        return fresh


class PdfTextExtractor:
    """Recovers readable text from raw PDF bytes without a rendering engine.

    Flow: decode -> multi-strategy extraction -> document cleaning -> readability.
    ``extract`` either returns readable text or raises ``NoExtractableTextError``
    so the caller can fall back to rasterization.
    """

    _PAGE_MARKER_RE: ClassVar[re.Pattern[str]] = re.compile(r"/Type\s*/Page\b")
    _TITLE_RE: ClassVar[re.Pattern[str]] = re.compile(r"/Title\s*" + LITERAL)
    _AUTHOR_RE: ClassVar[re.Pattern[str]] = re.compile(r"/Author\s*" + LITERAL)
    _QUOTED_RE: ClassVar[re.Pattern[str]] = re.compile(r'"([^"\r\n]+)"')
    _OPERATOR_PREFIXED_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"Tj\s*" + LITERAL + r"|TJ\s*" + SHOW_ARRAY
    )

    def __init__(
        self,
        decoder: ByteDecoder | None = None,
        extractor: MultiStrategyExtractor | None = None,
        cleaner: TextCleaner | None = None,
        classifier: ReadabilityClassifier | None = None,
        heuristics: HeuristicsConfig = DEFAULT_HEURISTICS,
        max_scan_bytes: int | None = None,
    ) -> None:
        self._heuristics = heuristics
        self._decoder = decoder or ByteDecoder(heuristics)
        self._cleaner = cleaner or TextCleaner(heuristics)
        self._extractor = extractor or MultiStrategyExtractor(
            cleaner=self._cleaner, heuristics=heuristics
        )
        self._classifier = classifier or ReadabilityClassifier(heuristics)
        self._max_scan_bytes = max_scan_bytes

    def decode(self, pdf_bytes: bytes) -> DecodedSurface:
        """Decode the buffer into the working surface.

        Raises:
            CorruptDocumentError: if the best decoding shows no PDF structure.
        """
        if self._max_scan_bytes is not None and len(pdf_bytes) > self._max_scan_bytes:
            Log.warning(
                "Truncating oversized buffer before scanning",
                size=len(pdf_bytes),
                limit=self._max_scan_bytes,
            )
            pdf_bytes = pdf_bytes[: self._max_scan_bytes]
        surface = self._decoder.decode(pdf_bytes)
        if not self._decoder.has_structure(surface):
            raise CorruptDocumentError("no PDF structure markers found")
        Log.debug("Selected working surface", encoding=surface.encoding)
        return surface

    def extract(self, surface: DecodedSurface) -> str:
        """Return readable text recovered from *surface*.

        Raises:
            NoExtractableTextError: if the text is not longer than ``min_text_length``
                or fails readability.
        """
        result = self._extractor.extract(surface.text)
        text = self._cleaner.clean_document(result.text)
        if len(text) <= self._heuristics.min_text_length:
            raise NoExtractableTextError(
                f"recovered {len(text)} chars, need more than {self._heuristics.min_text_length}"
            )
        if not self._classifier.is_readable(text):
            report = self._classifier.assess(text)
            raise NoExtractableTextError(
                f"text failed readability (ratio={report.readable_ratio:.2f}, "
                f"garbled={report.garbled_score})"
            )
        Log.debug("Recovered readable text", chars=len(text), strategies=result.strategies)
        return text

    def extract_aggressive(self, surface: DecodedSurface) -> str:
        """Format-agnostic literal scan used after rasterization fails.

        Collects parenthesized literals, double-quoted strings and literals that
        follow show operators. Returns "" unless the result reads as prose.
        """
        raw: list[str] = find_literals(surface.text)
        raw.extend(m.group(1) for m in self._QUOTED_RE.finditer(surface.text))
        for match in self._OPERATOR_PREFIXED_RE.finditer(surface.text):
            if match.group(1) is not None:
                raw.append(match.group(1))
            else:
                raw.extend(find_literals(match.group(2)))

        min_length = self._heuristics.aggressive_min_fragment_length
        fragments = [c for c in (self._cleaner.clean_fragment(r) for r in raw) if len(c) >= min_length]
        text = self._cleaner.filter_structure(self._cleaner.clean_document(" ".join(fragments)))
        if len(text) <= self._heuristics.min_text_length or not self._classifier.is_readable(text):
            return ""
        return text

    def estimate_pages(self, surface: DecodedSurface) -> PageCount:
        count = len(self._PAGE_MARKER_RE.findall(surface.text))
        return PageCount(value=max(1, count), estimated=True)

    def read_info(self, surface: DecodedSurface) -> tuple[str | None, str | None]:
        """Title and author literals from the document information dictionary."""
        return (
            self._first_literal(self._TITLE_RE, surface.text),
            self._first_literal(self._AUTHOR_RE, surface.text),
        )

    def _first_literal(self, pattern: re.Pattern[str], text: str) -> str | None:
        for match in pattern.finditer(text):
            cleaned = self._cleaner.clean_fragment(match.group(1))
            if cleaned:
                return cleaned
        return None
