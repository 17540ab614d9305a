import io
import threading

import pdfplumber
from pdfplumber.page import Page
from pdfplumber.pdf import PDF
from PIL import Image

from docinsight.pdf.base import BasePdfBackend, DocumentHandle, PageHandle
from docinsight.pdf.exceptions import PdfParseError

_BASE_DPI = 72


class PdfPlumberPage(PageHandle):
    """Page handle backed by a pdfplumber page."""

    def __init__(self, page: Page, index: int, lock: threading.Lock) -> None:
        self._page = page
        self._index = index
        self._lock = lock

    def text_fragments(self) -> list[str]:
        try:
            with self._lock:
                words = self._page.extract_words()
        except Exception as exc:
            raise PdfParseError(
                f"pdfplumber could not read text of page {self._index + 1}: {exc}"
            ) from exc
        return [word.get("text", "") for word in words]

    def render(self, scale: float) -> Image.Image:
        try:
            with self._lock:
                image = self._page.to_image(resolution=round(_BASE_DPI * scale)).original
                return image.convert("RGB")
        except Exception as exc:
            raise PdfParseError(
                f"pdfplumber could not render page {self._index + 1}: {exc}"
            ) from exc


class PdfPlumberDocument(DocumentHandle):
    """Document handle backed by pdfplumber; access is serialized per document."""

    def __init__(self, pdf: PDF) -> None:
        self._pdf = pdf
        self._lock = threading.Lock()
        self._pages = list(pdf.pages)

    def page_count(self) -> int:
        return len(self._pages)

    def get_page(self, index: int) -> PageHandle:
        self._check_index(index)
        return PdfPlumberPage(self._pages[index], index, self._lock)

    def close(self) -> None:
        with self._lock:
            self._pdf.close()


class PdfPlumberBackend(BasePdfBackend):
    """Opens PDFs with pdfplumber."""

    def open(self, pdf_bytes: bytes) -> DocumentHandle:
        pdf = None
        try:
            pdf = pdfplumber.open(io.BytesIO(pdf_bytes))
            return PdfPlumberDocument(pdf)
        except Exception as exc:
            if pdf is not None:
                pdf.close()
            raise PdfParseError(f"pdfplumber could not open PDF: {exc}") from exc
