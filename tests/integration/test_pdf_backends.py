import pytest
from PIL import Image

from docinsight.pdf.base import BasePdfBackend
from docinsight.pdf.exceptions import PdfParseError
from docinsight.pdf.pdfplumber_adapter import PdfPlumberBackend
from docinsight.pdf.pymupdf_adapter import PyMuPdfBackend

BACKENDS = [PyMuPdfBackend, PdfPlumberBackend]


@pytest.mark.integration
@pytest.mark.parametrize("backend_cls", BACKENDS)
class TestPdfBackends:
    def test_reads_text_fragments(
        self, backend_cls: type[BasePdfBackend], sample_pdf_bytes: bytes
    ) -> None:
        with backend_cls().open(sample_pdf_bytes) as document:
            assert document.page_count() == 1
            text = " ".join(document.get_page(0).text_fragments())
        assert "Hello PDF World" in text

    def test_multi_page(
        self, backend_cls: type[BasePdfBackend], multi_page_pdf_bytes: bytes
    ) -> None:
        with backend_cls().open(multi_page_pdf_bytes) as document:
            pages = [" ".join(document.get_page(i).text_fragments()) for i in range(document.page_count())]
        assert "Page one content" in pages[0]
        assert "Page two content" in pages[1]

    def test_blank_page_has_no_text(
        self, backend_cls: type[BasePdfBackend], empty_pdf_bytes: bytes
    ) -> None:
        with backend_cls().open(empty_pdf_bytes) as document:
            fragments = document.get_page(0).text_fragments()
        assert all(not fragment.strip() for fragment in fragments)

    def test_renders_upscaled_rgb_image(
        self, backend_cls: type[BasePdfBackend], sample_pdf_bytes: bytes
    ) -> None:
        with backend_cls().open(sample_pdf_bytes) as document:
            image = document.get_page(0).render(2.0)
        assert isinstance(image, Image.Image)
        assert image.mode == "RGB"
        # US letter is 612pt wide.
        assert abs(image.width - 1224) <= 2

    def test_page_index_out_of_range(
        self, backend_cls: type[BasePdfBackend], sample_pdf_bytes: bytes
    ) -> None:
        with backend_cls().open(sample_pdf_bytes) as document:
            with pytest.raises(IndexError):
                document.get_page(1)

    def test_raises_on_invalid_bytes(self, backend_cls: type[BasePdfBackend]) -> None:
        with pytest.raises(PdfParseError):
            backend_cls().open(b"not a pdf")
