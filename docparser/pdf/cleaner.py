import re
from typing import ClassVar

from docparser.config.heuristics import DEFAULT_HEURISTICS, EXTENDED_LATIN, HeuristicsConfig


class TextCleaner:
    """Cleans literal payloads pulled out of PDF content streams.

    Two levels:
    - ``clean_fragment`` un-escapes and sanitizes one literal, rejecting it
      when it is mostly garbage.
    - ``clean_document`` normalizes whitespace once over the joined fragments.
    """

    _ESCAPE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\\([nrt()\\/*\[\]{}^$.+?|])")
    _ESCAPED_CONTROLS: ClassVar[dict[str, str]] = {"n": "\n", "r": "\r", "t": "\t"}
    _CONTROL_RE: ClassVar[re.Pattern[str]] = re.compile(r"[\x00-\x1f\x7f]")
    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")
    _PRINTABLE_RE: ClassVar[re.Pattern[str]] = re.compile(rf"[\x20-\x7e{EXTENDED_LATIN}]")

    _INLINE_SPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\S\n]+")
    _SPACE_AFTER_NEWLINE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\n +")
    _SPACE_BEFORE_NEWLINE_RE: ClassVar[re.Pattern[str]] = re.compile(r" +\n")
    _EXTRA_NEWLINES_RE: ClassVar[re.Pattern[str]] = re.compile(r"\n{3,}")

    _NUMBER_TUPLE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\b(?:\d+\s+){5}\d+\b")
    _ALL_CAPS_RE: ClassVar[re.Pattern[str]] = re.compile(r"\b[A-Z]{2,}\b")
    _DECIMAL_RE: ClassVar[re.Pattern[str]] = re.compile(r"\b\d+\.\d+\b")
    _INTEGER_RE: ClassVar[re.Pattern[str]] = re.compile(r"\b\d+\b")

    def __init__(self, heuristics: HeuristicsConfig = DEFAULT_HEURISTICS) -> None:
        self._min_ratio = heuristics.fragment_min_readable_ratio
        keywords = sorted(heuristics.noise_keywords, key=len, reverse=True)
        self._noise_keyword_re = re.compile(
            r"\b(?:" + "|".join(re.escape(k) for k in keywords) + r")\b"
        )

    def clean_fragment(self, payload: str) -> str:
        """Return the cleaned literal, or "" when it looks like garbage."""
        if not payload:
            return ""
        cleaned = self._ESCAPE_RE.sub(self._unescape, payload)
        cleaned = self._CONTROL_RE.sub(" ", cleaned)
        cleaned = self._WHITESPACE_RE.sub(" ", cleaned).strip()
        if not cleaned:
            return ""
        printable = len(self._PRINTABLE_RE.findall(cleaned))
        if printable / len(cleaned) < self._min_ratio:
            return ""
        return cleaned

    def clean_document(self, text: str) -> str:
        """Normalize whitespace across the joined text. Idempotent."""
        cleaned = self._INLINE_SPACE_RE.sub(" ", text)
        cleaned = self._SPACE_AFTER_NEWLINE_RE.sub("\n", cleaned)
        cleaned = self._SPACE_BEFORE_NEWLINE_RE.sub("\n", cleaned)
        cleaned = self._EXTRA_NEWLINES_RE.sub("\n\n", cleaned)
        return cleaned.strip()

    def filter_structure(self, text: str) -> str:
        """Drop PDF keywords, number tuples, all-caps tokens and bare numbers."""
        filtered = self._noise_keyword_re.sub("", text)
        filtered = self._NUMBER_TUPLE_RE.sub("", filtered)
        filtered = self._ALL_CAPS_RE.sub("", filtered)
        filtered = self._DECIMAL_RE.sub("", filtered)
        filtered = self._INTEGER_RE.sub("", filtered)
        return self._WHITESPACE_RE.sub(" ", filtered).strip()

    def _unescape(self, match: re.Match[str]) -> str:
        char = match.group(1)
        return self._ESCAPED_CONTROLS.get(char, char)
