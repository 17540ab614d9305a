"""Observer interface used by the extraction pipeline to report liveness."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from docinsight.extraction.models import ExtractionProgress
from docinsight.logging.logger import Log


class ProgressSink(ABC):
    """Receives fire-and-forget notifications; never queried by the pipeline."""

    @abstractmethod
    def on_ocr_status(self, active: bool) -> None:
        """Called when OCR starts (True) and when it stops (False)."""

    @abstractmethod
    def on_page_progress(self, current: int, total: int) -> None:
        """Called each time a page of the current file completes."""

    def on_recognition_progress(self, page_index: int, percent: int) -> None:
        """Called with 0-100 recognition progress of a single OCR page."""

    def on_stage(self, stage: str) -> None:
        """Called when the analysis moves to a new processing stage."""

    def on_warning(self, message: str) -> None:
        """Called with a user-facing, non-fatal warning."""


class NullProgressSink(ProgressSink):
    """Discards every notification."""

    def on_ocr_status(self, active: bool) -> None:
        pass

    def on_page_progress(self, current: int, total: int) -> None:
        pass


class CallbackProgressSink(ProgressSink):
    """Adapts plain callables to the ProgressSink interface."""

    def __init__(
        self,
        on_ocr_status: Callable[[bool], None] | None = None,
        on_page_progress: Callable[[int, int], None] | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self._on_ocr_status = on_ocr_status
        self._on_page_progress = on_page_progress
        self._on_warning = on_warning

    def on_ocr_status(self, active: bool) -> None:
        if self._on_ocr_status is not None:
            self._on_ocr_status(active)

    def on_page_progress(self, current: int, total: int) -> None:
        if self._on_page_progress is not None:
            self._on_page_progress(current, total)

    def on_warning(self, message: str) -> None:
        if self._on_warning is not None:
            self._on_warning(message)


class LoggingProgressSink(ProgressSink):
    """Writes notifications to the application log."""

    def on_ocr_status(self, active: bool) -> None:
        Log.info("OCR started" if active else "OCR finished")

    def on_page_progress(self, current: int, total: int) -> None:
        Log.info(f"Page {current}/{total} done")

    def on_recognition_progress(self, page_index: int, percent: int) -> None:
        Log.debug(f"Recognizing page {page_index + 1}: {percent}%")

    def on_stage(self, stage: str) -> None:
        Log.info(f"Stage: {stage}")

    def on_warning(self, message: str) -> None:
        Log.warning(message)


class ProgressNotifier:
    """Delivers notifications to a sink without letting sink errors escape.

    OCR status is only forwarded when it changes, so repeated "inactive"
    signals from nested cleanup paths reach the sink once.
    """

    def __init__(self, sink: ProgressSink | None = None) -> None:
        self._sink = sink if sink is not None else NullProgressSink()
        self._ocr_active: bool | None = None

    def ocr_status(self, active: bool) -> None:
        if self._ocr_active is active:
            return
        self._ocr_active = active
        self._deliver("on_ocr_status", active)

    def page_progress(self, progress: ExtractionProgress) -> None:
        self._deliver("on_page_progress", progress.current_page, progress.total_pages)

    def recognition_progress(self, page_index: int, percent: int) -> None:
        self._deliver("on_recognition_progress", page_index, percent)

    def stage(self, stage: str) -> None:
        self._deliver("on_stage", stage)

    def warning(self, message: str) -> None:
        self._deliver("on_warning", message)

    def _deliver(self, method: str, *args: object) -> None:
        try:
            getattr(self._sink, method)(*args)
        except Exception as exc:
            Log.warning(f"Progress sink {method} failed: {exc}")


class PageProgressTracker:
    """Counts completed pages for one phase of one file."""

    def __init__(self, notifier: ProgressNotifier, total_pages: int, ocr_active: bool) -> None:
        self._notifier = notifier
        self._progress = ExtractionProgress(
            current_page=0, total_pages=total_pages, ocr_active=ocr_active
        )

    @property
    def progress(self) -> ExtractionProgress:
        return self._progress

    def start(self) -> None:
        self._notifier.page_progress(self._progress)

    def page_done(self) -> None:
        self._progress = ExtractionProgress(
            current_page=self._progress.current_page + 1,
            total_pages=self._progress.total_pages,
            ocr_active=self._progress.ocr_active,
        )
        self._notifier.page_progress(self._progress)
