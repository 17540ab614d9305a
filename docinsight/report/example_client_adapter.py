"""Example report client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseReportClient and register the provider in ReportGeneratorFactory.
"""

import json
from typing import ClassVar

from docinsight.report.client_base import BaseReportClient


class ExampleClientAdapter(BaseReportClient):
    """Example adapter that returns a fixed valid report JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example report generated without contacting an AI provider.",
        "keyPoints": ["The documents were extracted successfully."],
        "insights": ["No analysis was performed."],
        "actionableTakeaways": ["Configure a real report provider."],
        "wordCount": 0,
        "readingTime": 0,
        "sentiment": "neutral",
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
