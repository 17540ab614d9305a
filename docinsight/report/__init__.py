from docinsight.report.base import BaseReportGenerator
from docinsight.report.factory import ReportGeneratorFactory
from docinsight.report.generator import ReportGenerator
from docinsight.report.models import Report

__all__ = ["BaseReportGenerator", "Report", "ReportGenerator", "ReportGeneratorFactory"]
