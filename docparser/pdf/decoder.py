import re
from dataclasses import dataclass
from typing import ClassVar

from docparser.config.heuristics import DEFAULT_HEURISTICS, EXTENDED_LATIN, HeuristicsConfig
from docparser.logging.logger import Log
from docparser.pdf.strategies import LITERAL, SHOW_ARRAY


@dataclass(frozen=True)
class DecodedSurface:
    """Buffer decoded with the best-scoring codec; read-only input for the strategies."""

    text: str
    encoding: str
    score: float


class ByteDecoder:
    """Picks the byte-to-text decoding that looks most like a PDF."""

    SHOW_OPERATOR_RE: ClassVar[re.Pattern[str]] = re.compile(
        LITERAL + r"\s*Tj|" + SHOW_ARRAY + r"\s*TJ"
    )
    _READABLE_RE: ClassVar[re.Pattern[str]] = re.compile(
        rf"[a-zA-Z0-9\s.,!?;:()\-'\"{EXTENDED_LATIN}]"
    )

    def __init__(self, heuristics: HeuristicsConfig = DEFAULT_HEURISTICS) -> None:
        self._heuristics = heuristics

    def decode(self, buffer: bytes) -> DecodedSurface:
        best: DecodedSurface | None = None
        for encoding in self._heuristics.encodings:
            try:
                text = buffer.decode(encoding, errors="replace")
            except LookupError:
                Log.warning("Skipping unknown codec", encoding=encoding)
                continue
            score = self.score(text)
            Log.debug("Scored candidate decoding", encoding=encoding, score=round(score, 2))
            # strict comparison keeps the earliest candidate on ties
            if best is None or score > best.score:
                best = DecodedSurface(text=text, encoding=encoding, score=score)
        if best is None:
            return DecodedSurface(text=buffer.decode("latin-1"), encoding="latin-1", score=0.0)
        return best

    def score(self, text: str) -> float:
        """Structure-plausibility score for one candidate decoding."""
        h = self._heuristics
        score = 0.0
        if h.signature in text[: h.signature_window]:
            score += h.signature_weight
        for keyword in h.structure_keywords:
            if keyword in text:
                score += h.keyword_weight
        score += len(self.SHOW_OPERATOR_RE.findall(text)) * h.operator_weight
        if text:
            readable = len(self._READABLE_RE.findall(text))
            score += readable / len(text) * h.readable_ratio_weight
        if any(marker in text for marker in h.accent_markers):
            score += h.accent_bonus
        return score

    def has_structure(self, surface: DecodedSurface) -> bool:
        """True when the surface carries a PDF signature or any structural keyword."""
        text = surface.text
        if self._heuristics.signature in text[: self._heuristics.signature_window]:
            return True
        return any(keyword in text for keyword in self._heuristics.structure_keywords)
