import asyncio

import pytest

from docinsight.extraction.page_text import PageTextExtractor, join_fragments
from docinsight.extraction.progress import ProgressNotifier
from docinsight.extraction.slots import join_pages
from docinsight.pdf.exceptions import PdfParseError
from fakes import FakeDocument, FakePage, RecordingSink, make_fake_document


def _extract(document: FakeDocument, sink: RecordingSink | None = None):  # type: ignore[no-untyped-def]
    return asyncio.run(PageTextExtractor().extract(document, ProgressNotifier(sink)))


class TestJoinFragments:
    def test_joins_with_single_space(self) -> None:
        assert join_fragments(["Hello", "world"]) == "Hello world"

    def test_drops_blank_fragments(self) -> None:
        assert join_fragments(["a", "", "   ", "b"]) == "a b"

    def test_keeps_fragment_text_as_is(self) -> None:
        assert join_fragments([" padded "]) == " padded "


class TestPageTextExtractor:
    def test_returns_page_per_index(self) -> None:
        document = make_fake_document([["one"], ["two", "2"], []])
        results = _extract(document)
        assert [(r.page_index, r.text) for r in results] == [(0, "one"), (1, "two 2"), (2, "")]

    def test_order_ignores_completion_order(self) -> None:
        document = FakeDocument(
            [
                FakePage(0, ["first"], delay=0.2),
                FakePage(1, ["second"], delay=0.1),
                FakePage(2, ["third"]),
            ]
        )
        assert join_pages(_extract(document)) == "first\nsecond\nthird"

    def test_reports_progress_per_page(self) -> None:
        sink = RecordingSink()
        _extract(make_fake_document([["a"], ["b"], ["c"]]), sink)
        assert sink.page_events() == [(0, 3), (1, 3), (2, 3), (3, 3)]
        assert sink.ocr_events() == []

    def test_partially_empty_layer_gives_empty_strings(self) -> None:
        pages = [[f"Text on page {n}"] for n in range(1, 6)] + [[] for _ in range(5)]
        results = _extract(make_fake_document(pages))
        assert [r.text for r in results[5:]] == [""] * 5
        assert join_pages(results).strip().startswith("Text on page 1")

    def test_page_error_propagates(self) -> None:
        document = FakeDocument(
            [FakePage(0, ["ok"]), FakePage(1, [], error=PdfParseError("broken page"))]
        )
        with pytest.raises(PdfParseError, match="broken page"):
            _extract(document)

    def test_zero_pages(self) -> None:
        assert _extract(make_fake_document([])) == []
