from abc import ABC, abstractmethod

from docinsight.report.models import Report


class BaseReportGenerator(ABC):
    """Contract for all report generators."""

    @abstractmethod
    def generate(self, text: str) -> Report:
        """Analyze the combined document text.

        Args:
            text: Combined payload built from every extracted file.

        Returns:
            Report with summary, key points, insights, takeaways and stats.

        Raises:
            ReportError: on any failure.
        """
