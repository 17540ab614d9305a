from collections.abc import Sequence

from docinsight.config.settings import Settings
from docinsight.extraction.factory import ExtractionOrchestratorFactory
from docinsight.extraction.ocr import OcrEngine
from docinsight.extraction.progress import ProgressNotifier, ProgressSink
from docinsight.files.models import UploadedFile
from docinsight.files.validator import FileValidator
from docinsight.logging.logger import Log
from docinsight.processor.models import AnalysisOutcome
from docinsight.processor.pipeline import PipelineContext, PipelineStep
from docinsight.processor.steps import (
    CombinePayloadStep,
    ExtractTextStep,
    GenerateReportStep,
    NotifyFailureStep,
    ValidateFilesStep,
)
from docinsight.report.base import BaseReportGenerator
from docinsight.report.factory import ReportGeneratorFactory


class Processor:
    """Runs one analysis session through its pipeline steps.

    Pipeline: validate -> extract -> combine -> generate report.
    Any failure runs the failed step and re-raises the original error;
    no partial outcome is returned.
    """

    def __init__(self, steps: Sequence[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = list(steps)
        self._failed_step = failed_step

    async def process(
        self,
        files: Sequence[UploadedFile],
        progress: ProgressSink | None = None,
    ) -> AnalysisOutcome:
        Log.info(f"Processing {len(files)} files")
        context = PipelineContext(files=list(files), notifier=ProgressNotifier(progress))
        try:
            for step in self._steps:
                context = await step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            await self._failed_step.run(context)
            raise
        if context.report is None or context.payload is None:
            raise RuntimeError("Pipeline finished without producing a report")
        return AnalysisOutcome(
            report=context.report,
            payload=context.payload,
            files=context.extraction_results,
            warnings=context.warnings,
        )


def build_processor(
    settings: Settings,
    ocr_engine: OcrEngine | None = None,
    report_generator: BaseReportGenerator | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    validator = FileValidator(
        max_files=settings.max_files,
        max_file_size_bytes=settings.max_file_size_bytes,
    )
    orchestrator = ExtractionOrchestratorFactory.create(settings, ocr_engine=ocr_engine)
    if report_generator is None:
        report_generator = ReportGeneratorFactory.create(settings)
    steps: list[PipelineStep] = [
        ValidateFilesStep(validator),
        ExtractTextStep(orchestrator),
        CombinePayloadStep(settings.max_payload_chars),
        GenerateReportStep(report_generator),
    ]
    return Processor(steps=steps, failed_step=NotifyFailureStep())
