import io
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docinsight.files.models import MIME_PDF, MIME_TEXT_PLAIN, UploadedFile
from fakes import FakeDocument, RecordingSink, make_fake_document


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def half_text_pdf_bytes() -> bytes:
    """Generate a ten-page PDF with text on pages 1-5 and blank pages 6-10."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for number in range(1, 11):
        if number <= 5:
            c.drawString(72, 720, f"Text on page {number}")
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def fake_document() -> Callable[..., FakeDocument]:
    return make_fake_document


@pytest.fixture()
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def text_file() -> Callable[..., UploadedFile]:
    def _make(name: str = "notes.txt", content: str = "Some notes", size: int | None = None) -> UploadedFile:
        data = content.encode("utf-8")
        return UploadedFile(
            file_name=name,
            mime_type=MIME_TEXT_PLAIN,
            size_bytes=len(data) if size is None else size,
            data=data,
        )

    return _make


@pytest.fixture()
def pdf_file() -> Callable[..., UploadedFile]:
    def _make(name: str = "doc.pdf", data: bytes = b"%PDF-fake", size: int | None = None) -> UploadedFile:
        return UploadedFile(
            file_name=name,
            mime_type=MIME_PDF,
            size_bytes=len(data) if size is None else size,
            data=data,
        )

    return _make
