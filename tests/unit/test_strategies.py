import time

import pytest

from docparser.pdf.extractor import MultiStrategyExtractor
from docparser.pdf.strategies import (
    AnnotationMetadataStrategy,
    ContentObjectStrategy,
    ExtractionStrategy,
    FormFieldStrategy,
    GlobalOperatorStrategy,
    RawTextStrategy,
    ResidualLiteralStrategy,
    StreamStrategy,
    TextBlockStrategy,
    default_strategies,
    find_literals,
    find_show_literals,
)


class _FixedStrategy(ExtractionStrategy):
    def __init__(self, name: str, literals: list[str]) -> None:
        self.name = name
        self.literals = literals
        self.calls = 0

    def find_literals(self, surface: str) -> list[str]:
        self.calls += 1
        return list(self.literals)


class TestLiteralScanning:
    def test_show_string_and_array(self) -> None:
        text = "(Hello) Tj [(Wor) -250 (ld)] TJ"
        assert find_show_literals(text) == ["Hello", "Wor", "ld"]

    def test_escaped_parenthesis_stays_in_payload(self) -> None:
        assert find_show_literals(r"(a \) b) Tj") == [r"a \) b"]

    def test_literal_does_not_cross_lines(self) -> None:
        assert find_literals("(open\nclose)") == []
        assert find_show_literals("(open\nclose) Tj") == []

    def test_plain_literals(self) -> None:
        assert find_literals("(one) junk (two)") == ["one", "two"]

    def test_unescaped_open_parenthesis_restarts_literal(self) -> None:
        assert find_literals("(a(b)") == ["b"]


class TestStrategies:
    def test_text_block_ignores_outside_text(self) -> None:
        assert TextBlockStrategy().find_literals("BT (Inside) Tj ET (Outside) Tj") == ["Inside"]

    def test_stream_region(self) -> None:
        surface = "stream\n(Streamed) Tj\nendstream (Loose) Tj"
        assert StreamStrategy().find_literals(surface) == ["Streamed"]

    def test_content_object_region(self) -> None:
        surface = "/Contents 4 0 R >> (Page text) Tj endobj (After) Tj"
        assert ContentObjectStrategy().find_literals(surface) == ["Page text"]

    def test_global_operators(self) -> None:
        assert GlobalOperatorStrategy().find_literals("x (A) Tj y (B) Tj") == ["A", "B"]

    def test_form_field_values(self) -> None:
        surface = "<< /T (name) /V (Jane Doe) >>"
        assert FormFieldStrategy().find_literals(surface) == ["Jane Doe"]

    def test_annotations_then_info(self) -> None:
        surface = "/Title (Report) /Contents (A note) /Author (Ann)"
        assert AnnotationMetadataStrategy().find_literals(surface) == ["A note", "Report", "Ann"]

    def test_raw_text_filters_structure(self) -> None:
        surface = (
            "1 0 obj << /Length 5 >> stream "
            "the quick brown fox jumps over the lazy dog endstream endobj"
        )
        assert RawTextStrategy().find_literals(surface) == [
            "<< / >> the quick brown fox jumps over the lazy dog"
        ]

    def test_raw_text_rejects_short_result(self) -> None:
        assert RawTextStrategy().find_literals("1 0 obj short endobj") == []

    def test_residual_literals(self) -> None:
        assert ResidualLiteralStrategy().find_literals("(one) (two)") == ["one", "two"]

    def test_default_order(self) -> None:
        assert [s.name for s in default_strategies()] == [
            "text_blocks",
            "streams",
            "content_objects",
            "global_operators",
            "form_fields",
            "annotations_metadata",
            "raw_text",
            "residual_literals",
        ]


class TestRegionScanning:
    def test_pairs_each_start_with_next_end(self) -> None:
        surface = "BT (one) Tj ET junk BT (two) Tj ET"
        assert TextBlockStrategy().regions(surface) == ["BT (one) Tj ET", "BT (two) Tj ET"]

    def test_stops_at_unterminated_start(self) -> None:
        assert TextBlockStrategy().find_literals("BT (one) Tj ET BT (two) Tj") == ["one"]

    @pytest.mark.parametrize(
        "surface",
        [
            "BT " * 50_000,
            "stream " * 50_000,
            "/Contents 1 0 R " * 20_000,
            "(" * 50_000,
            "[" * 50_000,
            "Tj (" * 20_000,
        ],
    )
    def test_unterminated_markers_scan_in_linear_time(self, surface: str) -> None:
        started = time.perf_counter()
        for strategy in default_strategies():
            strategy.find_literals(surface)
        assert time.perf_counter() - started < 2.0


class TestMultiStrategyExtractor:
    def test_stops_once_threshold_reached(self) -> None:
        first = _FixedStrategy("first", ["enough text to pass the threshold"])
        second = _FixedStrategy("second", ["never read"])

        result = MultiStrategyExtractor(strategies=(first, second)).extract("surface")

        assert result.text == "enough text to pass the threshold"
        assert result.strategies == ("first",)
        assert second.calls == 0

    def test_accumulates_across_strategies(self) -> None:
        first = _FixedStrategy("first", ["short"])
        second = _FixedStrategy("second", ["also short"])
        third = _FixedStrategy("third", ["and one more fragment"])

        result = MultiStrategyExtractor(strategies=(first, second, third)).extract("surface")

        assert result.text == "short also short and one more fragment"
        assert result.strategies == ("first", "second", "third")

    def test_drops_garbage_fragments(self) -> None:
        strategy = _FixedStrategy("only", ["\x01\x02", "Valid words here"])

        result = MultiStrategyExtractor(strategies=(strategy,)).extract("surface")

        assert result.text == "Valid words here"

    def test_strategy_without_fragments_is_not_recorded(self) -> None:
        empty = _FixedStrategy("empty", [])
        useful = _FixedStrategy("useful", ["Some words"])

        result = MultiStrategyExtractor(strategies=(empty, useful)).extract("surface")

        assert result.strategies == ("useful",)

    def test_nothing_found(self) -> None:
        result = MultiStrategyExtractor(strategies=(_FixedStrategy("none", []),)).extract("x")
        assert result.text == ""
        assert result.strategies == ()

    def test_literal_found_by_overlapping_strategies_counts_once(self) -> None:
        first = _FixedStrategy("first", ["Short title line"])
        second = _FixedStrategy("second", ["Short title line"])
        third = _FixedStrategy("third", ["Short title line", "and a new fragment"])

        result = MultiStrategyExtractor(strategies=(first, second, third)).extract("surface")

        assert result.text == "Short title line and a new fragment"
        assert result.strategies == ("first", "third")

    def test_repeats_within_one_strategy_are_kept(self) -> None:
        strategy = _FixedStrategy("only", ["Page header", "Page header"])

        result = MultiStrategyExtractor(strategies=(strategy,)).extract("surface")

        assert result.text == "Page header Page header"

    def test_text_block_inside_stream_is_not_doubled(self) -> None:
        surface = "stream\nBT (Short title line) Tj ET\nendstream"

        result = MultiStrategyExtractor().extract(surface)

        assert result.text == "Short title line"
        assert result.strategies == ("text_blocks",)
