"""OCR fallback for PDFs whose text layer is empty."""

import asyncio
import os
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor

import pytesseract
from PIL import Image

from docinsight.extraction.exceptions import (
    OcrError,
    OcrFailedError,
    OcrTimeoutError,
    RecognitionTimeoutError,
)
from docinsight.extraction.models import PageResult
from docinsight.extraction.progress import PageProgressTracker, ProgressNotifier
from docinsight.extraction.slots import PageSlots, run_all
from docinsight.logging.logger import Log
from docinsight.pdf.base import DocumentHandle

MIN_RENDER_SCALE = 1.5
DEFAULT_RENDER_SCALE = 2.0
DEFAULT_PAGE_TIMEOUT_SECONDS = 120.0
DEFAULT_LANGUAGE = "eng"
DEFAULT_MAX_WORKERS = min(32, (os.cpu_count() or 1) + 4)


class OcrEngine(ABC):
    """Contract for optical character recognition engines."""

    @abstractmethod
    def recognize(self, image: Image.Image, language: str) -> str:
        """Return the text recognized in ``image``.

        Blocking; callers run it off the event loop.

        Raises:
            RecognitionTimeoutError: if the engine's own deadline expires.
            OcrError: if recognition fails.
        """


class TesseractOcrEngine(OcrEngine):
    """Recognizes text with the Tesseract binary through pytesseract."""

    def __init__(self, tesseract_cmd: str = "", timeout_seconds: float = 0) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self._timeout_seconds = timeout_seconds

    def recognize(self, image: Image.Image, language: str) -> str:
        try:
            # pytesseract kills the tesseract process itself once this expires,
            # so a page abandoned by the caller does not keep running.
            return pytesseract.image_to_string(
                image, lang=language, timeout=self._timeout_seconds
            )
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrError(f"Tesseract is not installed or not on PATH: {exc}") from exc
        except pytesseract.TesseractError as exc:
            raise OcrError(f"Tesseract recognition failed: {exc}") from exc
        except RuntimeError as exc:
            # pytesseract signals its own deadline as RuntimeError("Tesseract process timeout").
            if "timeout" in str(exc).lower():
                raise RecognitionTimeoutError(f"Tesseract timed out: {exc}") from exc
            raise OcrError(f"Tesseract recognition failed: {exc}") from exc


class OcrFallback:
    """Rasterizes every page and recognizes it, racing each page against a timeout.

    Pages are scheduled together but at most ``max_workers`` are rendered and
    recognized at once, on an executor owned by the extraction. A page's timer
    starts only once it holds a worker, so queueing time never counts against it.
    """

    def __init__(
        self,
        engine: OcrEngine,
        *,
        language: str = DEFAULT_LANGUAGE,
        render_scale: float = DEFAULT_RENDER_SCALE,
        page_timeout_seconds: float = DEFAULT_PAGE_TIMEOUT_SECONDS,
        max_workers: int | None = None,
    ) -> None:
        if render_scale < MIN_RENDER_SCALE:
            raise ValueError(
                f"render_scale must be at least {MIN_RENDER_SCALE}, got {render_scale}"
            )
        if page_timeout_seconds <= 0:
            raise ValueError("page_timeout_seconds must be positive")
        if max_workers is not None and max_workers <= 0:
            raise ValueError("max_workers must be positive")
        self._engine = engine
        self._language = language
        self._render_scale = render_scale
        self._page_timeout_seconds = page_timeout_seconds
        self._max_workers = max_workers or DEFAULT_MAX_WORKERS

    async def extract(
        self,
        document: DocumentHandle,
        file_name: str,
        notifier: ProgressNotifier,
    ) -> list[PageResult]:
        """Recognize all pages concurrently and return them in page order.

        OCR status is switched on before the first page and off on every
        exit path.

        Raises:
            OcrFailedError: for the first page that fails or times out.
        """
        total = document.page_count()
        slots = PageSlots(total)
        tracker = PageProgressTracker(notifier, total, ocr_active=True)
        workers = asyncio.Semaphore(self._max_workers)
        executor = ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="docinsight-ocr"
        )
        Log.info(f"Running OCR on {total} pages of {file_name} with {self._max_workers} workers")
        notifier.ocr_status(True)
        try:
            tracker.start()
            await run_all(
                self._recognize_page(
                    document, index, file_name, slots, tracker, notifier, workers, executor
                )
                for index in range(total)
            )
            return slots.results()
        finally:
            # Timed-out recognitions are abandoned; their threads finish on their own.
            executor.shutdown(wait=False, cancel_futures=True)
            notifier.ocr_status(False)

    async def _recognize_page(
        self,
        document: DocumentHandle,
        index: int,
        file_name: str,
        slots: PageSlots,
        tracker: PageProgressTracker,
        notifier: ProgressNotifier,
        workers: asyncio.Semaphore,
        executor: ThreadPoolExecutor,
    ) -> None:
        loop = asyncio.get_running_loop()
        try:
            async with workers:
                notifier.recognition_progress(index, 0)
                page = document.get_page(index)
                image = await loop.run_in_executor(executor, page.render, self._render_scale)
                text = await asyncio.wait_for(
                    loop.run_in_executor(
                        executor, self._engine.recognize, image, self._language
                    ),
                    timeout=self._page_timeout_seconds,
                )
        except (asyncio.TimeoutError, RecognitionTimeoutError) as exc:
            Log.warning(f"OCR timed out on page {index + 1} of {file_name}")
            timeout_error = OcrTimeoutError(index, self._page_timeout_seconds)
            raise OcrFailedError(file_name, index, timeout_error) from exc
        except Exception as exc:
            raise OcrFailedError(file_name, index, exc) from exc
        slots.assign(index, text.strip())
        notifier.recognition_progress(index, 100)
        Log.debug(f"OCR page {index + 1} of {file_name}: {len(text)} chars")
        tracker.page_done()
