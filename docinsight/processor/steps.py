import asyncio

from docinsight.extraction.orchestrator import ExtractionOrchestrator
from docinsight.files.validator import FileValidator
from docinsight.logging.logger import Log
from docinsight.payload.combiner import TRUNCATION_WARNING, build_combined_payload
from docinsight.processor.models import STAGE_ANALYZING, STAGE_COMPLETE, STAGE_EXTRACTING
from docinsight.processor.pipeline import PipelineContext, PipelineStep
from docinsight.report.base import BaseReportGenerator
from docinsight.report.exceptions import ReportError

GENERIC_REPORT_FAILURE = "Failed to generate report. Please try again."


class ValidateFilesStep(PipelineStep):
    def __init__(self, validator: FileValidator) -> None:
        self._validator = validator

    async def run(self, context: PipelineContext) -> PipelineContext:
        self._validator.validate(context.files)
        Log.info(f"Validated {len(context.files)} files")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, orchestrator: ExtractionOrchestrator) -> None:
        self._orchestrator = orchestrator

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.notifier.stage(STAGE_EXTRACTING)
        context.extraction_results = await self._orchestrator.extract_all(
            context.files, context.notifier
        )
        return context


class CombinePayloadStep(PipelineStep):
    def __init__(self, max_chars: int) -> None:
        self._max_chars = max_chars

    async def run(self, context: PipelineContext) -> PipelineContext:
        payload = build_combined_payload(context.extraction_results, self._max_chars)
        Log.info(f"Extracted text length: {payload.original_length} characters")
        if payload.truncated:
            Log.warning(
                f"Combined text truncated from {payload.original_length} "
                f"to {len(payload.text)} characters"
            )
            context.warnings.append(TRUNCATION_WARNING)
            context.notifier.warning(TRUNCATION_WARNING)
        context.payload = payload
        return context


class GenerateReportStep(PipelineStep):
    def __init__(self, generator: BaseReportGenerator) -> None:
        self._generator = generator

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.payload is None:
            raise ValueError("PipelineContext.payload must be set before report generation")
        context.notifier.stage(STAGE_ANALYZING)
        try:
            context.report = await asyncio.to_thread(
                self._generator.generate, context.payload.text
            )
        except ReportError:
            raise
        except Exception as exc:
            raise ReportError(GENERIC_REPORT_FAILURE) from exc
        context.notifier.stage(STAGE_COMPLETE)
        return context


class NotifyFailureStep(PipelineStep):
    async def run(self, context: PipelineContext) -> PipelineContext:
        context.notifier.ocr_status(False)
        Log.error(f"Analysis failed: {context.error_message}")
        return context
