import re
from dataclasses import dataclass

from docparser.config.heuristics import DEFAULT_HEURISTICS, EXTENDED_LATIN, HeuristicsConfig


@dataclass(frozen=True)
class ReadabilityReport:
    garbled_score: int
    word_count: int
    readable_word_count: int
    has_common_word: bool

    @property
    def readable_ratio(self) -> float:
        return self.readable_word_count / max(self.word_count, 1)


class ReadabilityClassifier:
    """Tells recovered prose apart from operator and structure noise."""

    _NOISE_PATTERNS = (
        re.compile(r"[{}\[\]\\|`~^]"),
        re.compile(rf"[^\x20-\x7e{EXTENDED_LATIN}]"),
        re.compile(r" {3,}"),
        re.compile(r"[A-Z]{3,}"),
    )
    _ASCII_WORD_RE = re.compile(r"^[a-zA-Z0-9.,!?;:()\-'\"]+$")
    _LATIN_WORD_RE = re.compile(rf"^[{EXTENDED_LATIN}]+$")

    def __init__(self, heuristics: HeuristicsConfig = DEFAULT_HEURISTICS) -> None:
        self._heuristics = heuristics

    def assess(self, text: str) -> ReadabilityReport:
        garbled = sum(len(pattern.findall(text)) for pattern in self._NOISE_PATTERNS)
        words = [
            w for w in text.split() if len(w) >= self._heuristics.readable_word_min_length
        ]
        readable = [
            w for w in words if self._ASCII_WORD_RE.match(w) or self._LATIN_WORD_RE.match(w)
        ]
        lowered = text.lower()
        has_common = any(word in lowered for word in self._heuristics.stopwords)
        return ReadabilityReport(
            garbled_score=garbled,
            word_count=len(words),
            readable_word_count=len(readable),
            has_common_word=has_common,
        )

    def is_readable(self, text: str) -> bool:
        h = self._heuristics
        if not text or len(text) < h.readable_min_length:
            return False
        report = self.assess(text)
        return (
            report.readable_ratio > h.readable_word_ratio
            and report.garbled_score < len(text) * h.garbled_ratio
            and (report.has_common_word or report.readable_word_count > h.readable_word_count)
        )
