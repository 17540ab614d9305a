from dataclasses import dataclass, field

from docinsight.extraction.models import FileExtractionResult
from docinsight.payload.combiner import CombinedPayload
from docinsight.report.models import Report

STAGE_EXTRACTING = "extracting"
STAGE_ANALYZING = "analyzing"
STAGE_COMPLETE = "complete"


@dataclass(frozen=True)
class AnalysisOutcome:
    """Everything produced by one successful analysis session."""

    report: Report
    payload: CombinedPayload
    files: list[FileExtractionResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
