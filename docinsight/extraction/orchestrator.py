import asyncio
from collections.abc import Sequence

from docinsight.extraction.exceptions import (
    EmptyExtractionError,
    FileExtractionError,
    UnsupportedMimeTypeError,
)
from docinsight.extraction.models import FileExtractionResult
from docinsight.extraction.ocr import OcrFallback
from docinsight.extraction.page_text import PageTextExtractor
from docinsight.extraction.progress import ProgressNotifier, ProgressSink
from docinsight.extraction.slots import join_pages
from docinsight.files.models import MIME_PDF, MIME_TEXT_PLAIN, UploadedFile
from docinsight.logging.logger import Log
from docinsight.pdf.base import BasePdfBackend


class ExtractionOrchestrator:
    """Turns uploaded files into trimmed text, one file at a time.

    PDFs are read from their text layer first; OCR runs only when the whole
    document's text layer is empty. One failing file fails the batch.
    """

    def __init__(
        self,
        pdf_backend: BasePdfBackend,
        page_text_extractor: PageTextExtractor,
        ocr_fallback: OcrFallback,
    ) -> None:
        self._pdf_backend = pdf_backend
        self._page_text_extractor = page_text_extractor
        self._ocr_fallback = ocr_fallback

    async def extract_all(
        self,
        files: Sequence[UploadedFile],
        progress: ProgressSink | ProgressNotifier | None = None,
    ) -> list[FileExtractionResult]:
        """Extract every file in input order.

        Raises:
            FileExtractionError: for the first file that cannot be extracted;
                results of earlier files are discarded.
        """
        notifier = progress if isinstance(progress, ProgressNotifier) else ProgressNotifier(progress)
        results: list[FileExtractionResult] = []
        for uploaded in files:
            results.append(await self._extract_file(uploaded, notifier))
        Log.info(f"Extracted text from {len(results)} files")
        return results

    async def _extract_file(
        self,
        uploaded: UploadedFile,
        notifier: ProgressNotifier,
    ) -> FileExtractionResult:
        Log.info(f"Extracting {uploaded.file_name} ({uploaded.mime_type}, {uploaded.size_bytes} bytes)")
        try:
            text = (await self._extract_text(uploaded, notifier)).strip()
            if not text:
                raise EmptyExtractionError(uploaded.file_name)
        except Exception as exc:
            Log.error(f"Error processing {uploaded.file_name}: {exc}")
            raise FileExtractionError(uploaded.file_name, exc) from exc
        finally:
            notifier.ocr_status(False)
        Log.info(f"Extracted {len(text)} chars from {uploaded.file_name}")
        return FileExtractionResult(file_name=uploaded.file_name, text=text)

    async def _extract_text(self, uploaded: UploadedFile, notifier: ProgressNotifier) -> str:
        if uploaded.mime_type == MIME_TEXT_PLAIN:
            return uploaded.data.decode("utf-8-sig", errors="replace")
        if uploaded.mime_type == MIME_PDF:
            return await self._extract_pdf(uploaded, notifier)
        raise UnsupportedMimeTypeError(uploaded.mime_type)

    async def _extract_pdf(self, uploaded: UploadedFile, notifier: ProgressNotifier) -> str:
        document = await asyncio.to_thread(self._pdf_backend.open, uploaded.data)
        with document:
            pages = await self._page_text_extractor.extract(document, notifier)
            text = join_pages(pages)
            if text.strip():
                return text
            Log.info(f"No text layer in {uploaded.file_name}, falling back to OCR")
            pages = await self._ocr_fallback.extract(document, uploaded.file_name, notifier)
            return join_pages(pages)
