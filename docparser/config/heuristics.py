"""Scoring weights, keyword tables and thresholds for PDF text recovery.

Every tunable number or word list used by the decoder, the cleaners and the
readability classifier lives here so they can be adjusted and tested in
isolation instead of being buried in regular expressions.
"""

from dataclasses import dataclass, replace

from docparser.config.settings import Settings

# Latin-1 Supplement letters through Latin Extended-B, plus Latin Extended Additional.
EXTENDED_LATIN = "À-ɏḀ-ỿ"


@dataclass(frozen=True)
class HeuristicsConfig:
    """Immutable bundle of heuristic tables shared by the PDF pipeline."""

    # Byte decoder / scorer
    encodings: tuple[str, ...] = ("utf-8", "latin-1", "ascii", "cp1252")
    signature: str = "%PDF"
    signature_window: int = 1024
    signature_weight: float = 10.0
    structure_keywords: tuple[str, ...] = ("obj", "endobj", "stream", "endstream")
    keyword_weight: float = 5.0
    operator_weight: float = 2.0
    readable_ratio_weight: float = 25.0
    accent_markers: tuple[str, ...] = ("é", "ñ", "ü", "ç")
    accent_bonus: float = 10.0

    # Extraction
    min_text_length: int = 20
    raw_fallback_min_length: int = 30
    raw_fallback_max_chars: int = 3000
    aggressive_min_fragment_length: int = 4
    noise_keywords: tuple[str, ...] = (
        "obj", "endobj", "stream", "endstream", "xref", "trailer", "startxref",
        "PDF", "Linearized", "L", "O", "E", "N", "T", "H", "W", "Length",
        "Filter", "FlateDecode", "Deflate", "DCTDecode", "JPXDecode",
        "CCITTFaxDecode", "JBIG2Decode", "ASCIIHexDecode", "ASCII85Decode",
        "RunLengthDecode", "LZWDecode", "BT", "ET", "Tj", "TJ", "Tm", "Td",
        "TD", "Tf", "Tr", "Ts", "Tc", "Tw", "Tz", "TL",
    )

    # Cleaning
    fragment_min_readable_ratio: float = 0.2

    # Readability
    readable_min_length: int = 10
    readable_word_min_length: int = 3
    readable_word_ratio: float = 0.6
    garbled_ratio: float = 0.1
    readable_word_count: int = 5
    stopwords: tuple[str, ...] = (
        "the", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "is", "are", "was", "were", "be", "been", "have", "has",
        "had", "do", "does", "did", "will", "would", "could", "should", "may",
        "might", "can", "must", "shall",
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "HeuristicsConfig":
        """Defaults with the settings-level overrides applied."""
        return replace(DEFAULT_HEURISTICS, min_text_length=settings.min_text_length)


DEFAULT_HEURISTICS = HeuristicsConfig()
