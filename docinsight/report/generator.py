"""AI-powered document report generator."""

import dataclasses
import json
from pathlib import Path

from docinsight.logging.logger import Log
from docinsight.report.base import BaseReportGenerator
from docinsight.report.client_base import BaseReportClient
from docinsight.report.exceptions import ReportError, ReportInputError
from docinsight.report.models import Report
from docinsight.report.prompt_loader import load_json_schema, load_prompt_template
from docinsight.report.text_stats import count_words, estimate_reading_time
from docinsight.report.validator import validate_and_build

DEFAULT_MIN_TEXT_CHARS = 50


class ReportGenerator(BaseReportGenerator):
    """Generates a structured report from document text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseReportClient,
        model: str,
        temperature: float = 0.2,
        min_text_chars: int = DEFAULT_MIN_TEXT_CHARS,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._min_text_chars = min_text_chars
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    def generate(self, text: str) -> Report:
        """Analyze document text and return a validated Report."""
        self._check_input(text)
        prompt = self._build_prompt(text)
        Log.debug(f"Report prompt: {len(prompt)} chars")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        report = self._fill_stats(validate_and_build(parsed), text)

        Log.info(
            f"Report complete: {len(report.key_points)} key points, "
            f"sentiment {report.sentiment}"
        )
        return report

    def _check_input(self, text: str) -> None:
        if not text or not text.strip():
            raise ReportInputError("Text content is required")
        if len(text) < self._min_text_chars:
            raise ReportInputError("Text content is too short for meaningful analysis")

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            document_text=text,
            json_schema=self._json_schema,
        )

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )

    @staticmethod
    def _fill_stats(report: Report, text: str) -> Report:
        changes: dict[str, int] = {}
        if report.word_count <= 0:
            changes["word_count"] = count_words(text)
        if report.reading_time <= 0:
            changes["reading_time"] = estimate_reading_time(text)
        return dataclasses.replace(report, **changes) if changes else report

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ReportError(f"Failed to parse AI response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ReportError("JSON response must be an object")
        return parsed
