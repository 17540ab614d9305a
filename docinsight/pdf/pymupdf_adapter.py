import threading

import pymupdf
from PIL import Image

from docinsight.pdf.base import BasePdfBackend, DocumentHandle, PageHandle
from docinsight.pdf.exceptions import PdfParseError

_TEXT_BLOCK = 0


class PyMuPdfPage(PageHandle):
    """Page handle backed by a PyMuPDF page."""

    def __init__(self, doc: pymupdf.Document, index: int, lock: threading.Lock) -> None:
        self._doc = doc
        self._index = index
        self._lock = lock

    def text_fragments(self) -> list[str]:
        try:
            with self._lock:
                content = self._doc[self._index].get_text("dict")
        except Exception as exc:
            raise PdfParseError(
                f"pymupdf could not read text of page {self._index + 1}: {exc}"
            ) from exc
        fragments: list[str] = []
        for block in content.get("blocks", []):
            if block.get("type") != _TEXT_BLOCK:
                continue
            for line in block.get("lines", []):
                fragments.extend(span.get("text", "") for span in line.get("spans", []))
        return fragments

    def render(self, scale: float) -> Image.Image:
        try:
            with self._lock:
                pix = self._doc[self._index].get_pixmap(
                    matrix=pymupdf.Matrix(scale, scale), alpha=False
                )
                return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
        except Exception as exc:
            raise PdfParseError(
                f"pymupdf could not render page {self._index + 1}: {exc}"
            ) from exc


class PyMuPdfDocument(DocumentHandle):
    """Document handle backed by PyMuPDF.

    PyMuPDF objects are not thread-safe, so every page access goes through a
    per-document lock.
    """

    def __init__(self, doc: pymupdf.Document) -> None:
        self._doc = doc
        self._lock = threading.Lock()
        self._page_count = doc.page_count

    def page_count(self) -> int:
        return self._page_count

    def get_page(self, index: int) -> PageHandle:
        self._check_index(index)
        return PyMuPdfPage(self._doc, index, self._lock)

    def close(self) -> None:
        with self._lock:
            self._doc.close()


class PyMuPdfBackend(BasePdfBackend):
    """Opens PDFs with PyMuPDF."""

    def open(self, pdf_bytes: bytes) -> DocumentHandle:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfParseError(f"pymupdf could not open PDF: {exc}") from exc
        if doc.needs_pass:
            doc.close()
            raise PdfParseError("PDF is password protected")
        return PyMuPdfDocument(doc)
