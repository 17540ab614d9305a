from docinsight.config.settings import Settings
from docinsight.extraction.ocr import OcrEngine, OcrFallback, TesseractOcrEngine
from docinsight.extraction.orchestrator import ExtractionOrchestrator
from docinsight.extraction.page_text import PageTextExtractor
from docinsight.pdf.factory import PdfBackendFactory


class ExtractionOrchestratorFactory:
    """Creates an orchestrator wired from settings."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        ocr_engine: OcrEngine | None = None,
    ) -> ExtractionOrchestrator:
        if ocr_engine is None:
            ocr_engine = TesseractOcrEngine(
                tesseract_cmd=settings.tesseract_cmd,
                timeout_seconds=settings.ocr_page_timeout_seconds,
            )
        ocr_fallback = OcrFallback(
            ocr_engine,
            language=settings.ocr_language,
            render_scale=settings.ocr_render_scale,
            page_timeout_seconds=settings.ocr_page_timeout_seconds,
            max_workers=settings.ocr_max_workers,
        )
        return ExtractionOrchestrator(
            pdf_backend=PdfBackendFactory.create(settings),
            page_text_extractor=PageTextExtractor(),
            ocr_fallback=ocr_fallback,
        )
