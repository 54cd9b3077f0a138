"""Text-recovery strategies over a decoded PDF surface.

Each strategy returns the raw literal payloads it finds; cleaning and the
length threshold are applied by ``MultiStrategyExtractor``. Order matters:
``DEFAULT_STRATEGIES`` runs from the most structured scan to the loosest.
"""

import re
from abc import ABC, abstractmethod
from typing import ClassVar

from docparser.config.heuristics import DEFAULT_HEURISTICS, HeuristicsConfig
from docparser.pdf.cleaner import TextCleaner

# A parenthesized PDF string literal; escaped characters (including "\)") belong to the payload.
# An unescaped "(" ends the candidate, so a run of open parentheses is scanned once.
LITERAL = r"\(((?:\\.|[^\\()\r\n])*)\)"
SHOW_ARRAY = r"\[([^\[\]\r\n]*)\]"

_LITERAL_RE = re.compile(LITERAL)
_SHOW_STRING_RE = re.compile(LITERAL + r"\s*Tj")
_SHOW_ARRAY_RE = re.compile(SHOW_ARRAY + r"\s*TJ")


def find_show_literals(text: str) -> list[str]:
    """Payloads of ``(...) Tj`` and of every string inside ``[...] TJ`` arrays."""
    literals = [m.group(1) for m in _SHOW_STRING_RE.finditer(text)]
    for array in _SHOW_ARRAY_RE.finditer(text):
        literals.extend(m.group(1) for m in _LITERAL_RE.finditer(array.group(1)))
    return literals


def find_literals(text: str) -> list[str]:
    return [m.group(1) for m in _LITERAL_RE.finditer(text)]


class ExtractionStrategy(ABC):
    """Contract for one way of locating text literals in a surface."""

    name: ClassVar[str]

    @abstractmethod
    def find_literals(self, surface: str) -> list[str]:
        """Return raw (uncleaned) literal payloads found in *surface*."""


class _RegionStrategy(ExtractionStrategy):
    """Show-operator scan restricted to regions from ``START_RE`` to the next ``END_RE``.

    Each start marker is paired with the first end marker after it and the scan
    resumes past that end; it stops at the first start without an end, so the
    surface is read once.
    """

    START_RE: ClassVar[re.Pattern[str]]
    END_RE: ClassVar[re.Pattern[str]]

    def find_literals(self, surface: str) -> list[str]:
        literals: list[str] = []
        for region in self.regions(surface):
            literals.extend(find_show_literals(region))
        return literals

    def regions(self, surface: str) -> list[str]:
        found: list[str] = []
        pos = 0
        while True:
            start = self.START_RE.search(surface, pos)
            if start is None:
                break
            end = self.END_RE.search(surface, start.end())
            if end is None:
                break
            found.append(surface[start.start() : end.end()])
            pos = end.end()
        return found


class TextBlockStrategy(_RegionStrategy):
    name = "text_blocks"
    START_RE = re.compile(r"\bBT\b")
    END_RE = re.compile(r"\bET\b")


class StreamStrategy(_RegionStrategy):
    name = "streams"
    START_RE = re.compile(r"\bstream\b")
    END_RE = re.compile(r"\bendstream\b")


class ContentObjectStrategy(_RegionStrategy):
    name = "content_objects"
    START_RE = re.compile(r"/Contents\s+\d+\s+\d+\s+R")
    END_RE = re.compile(r"\bendobj\b")


class GlobalOperatorStrategy(ExtractionStrategy):
    name = "global_operators"

    def find_literals(self, surface: str) -> list[str]:
        return find_show_literals(surface)


class FormFieldStrategy(ExtractionStrategy):
    name = "form_fields"
    _VALUE_RE: ClassVar[re.Pattern[str]] = re.compile(r"/V\s*" + LITERAL)

    def find_literals(self, surface: str) -> list[str]:
        return [m.group(1) for m in self._VALUE_RE.finditer(surface)]


class AnnotationMetadataStrategy(ExtractionStrategy):
    name = "annotations_metadata"
    _ANNOTATION_RE: ClassVar[re.Pattern[str]] = re.compile(r"/Contents\s*" + LITERAL)
    _INFO_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"/(?:Title|Subject|Author|Keywords)\s*" + LITERAL
    )

    def find_literals(self, surface: str) -> list[str]:
        literals = [m.group(1) for m in self._ANNOTATION_RE.finditer(surface)]
        literals.extend(m.group(1) for m in self._INFO_RE.finditer(surface))
        return literals


class RawTextStrategy(ExtractionStrategy):
    """Last-resort scan of printable ASCII with PDF structure filtered out."""

    name = "raw_text"
    _NON_PRINTABLE_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\x20-\x7e\n\r]")
    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")

    def __init__(
        self,
        cleaner: TextCleaner | None = None,
        heuristics: HeuristicsConfig = DEFAULT_HEURISTICS,
    ) -> None:
        self._cleaner = cleaner or TextCleaner(heuristics)
        self._min_length = heuristics.raw_fallback_min_length
        self._max_chars = heuristics.raw_fallback_max_chars

    def find_literals(self, surface: str) -> list[str]:
        readable = self._NON_PRINTABLE_RE.sub(" ", surface)
        readable = self._WHITESPACE_RE.sub(" ", readable).strip()
        filtered = self._cleaner.filter_structure(readable)
        if len(filtered) <= self._min_length:
            return []
        return [filtered[: self._max_chars]]


class ResidualLiteralStrategy(ExtractionStrategy):
    name = "residual_literals"

    def find_literals(self, surface: str) -> list[str]:
        return find_literals(surface)


def default_strategies(
    heuristics: HeuristicsConfig = DEFAULT_HEURISTICS,
) -> tuple[ExtractionStrategy, ...]:
    return (
        TextBlockStrategy(),
        StreamStrategy(),
        ContentObjectStrategy(),
        GlobalOperatorStrategy(),
        FormFieldStrategy(),
        AnnotationMetadataStrategy(),
        RawTextStrategy(heuristics=heuristics),
        ResidualLiteralStrategy(),
    )


DEFAULT_STRATEGIES = default_strategies()
