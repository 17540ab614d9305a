from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docinsight.extraction.models import FileExtractionResult
from docinsight.extraction.progress import ProgressNotifier
from docinsight.files.models import UploadedFile
from docinsight.payload.combiner import CombinedPayload
from docinsight.report.models import Report


@dataclass(slots=True)
class PipelineContext:
    files: list[UploadedFile]
    notifier: ProgressNotifier = field(default_factory=ProgressNotifier)
    extraction_results: list[FileExtractionResult] = field(default_factory=list)
    payload: CombinedPayload | None = None
    report: Report | None = None
    warnings: list[str] = field(default_factory=list)
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
