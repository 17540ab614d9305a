"""Tests for the ReportGenerator (AI-powered document analysis)."""

import json
from unittest.mock import MagicMock, patch

import pytest

from docinsight.report.exceptions import (
    ReportError,
    ReportInputError,
    ReportNetworkError,
    ReportValidationError,
)
from docinsight.report.generator import ReportGenerator

DOCUMENT = "=== notes.txt ===\n\n" + "The quarterly results improved across every region. " * 3


def _make_generator(client: MagicMock | None = None, **kwargs: object) -> ReportGenerator:
    if client is None:
        client = MagicMock()
    return ReportGenerator(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]


def _mock_ai_response(client: MagicMock, content: str) -> None:
    """Configure the mock client to return the given content."""
    client.create_chat_completion.return_value = content


def _valid_json_response(**overrides: object) -> str:
    data: dict[str, object] = {
        "summary": "Results improved.",
        "keyPoints": ["Revenue grew", "Costs fell"],
        "insights": ["Growth is broad-based"],
        "actionableTakeaways": ["Keep investing"],
        "wordCount": 120,
        "readingTime": 1,
        "sentiment": "positive",
    }
    data.update(overrides)
    return json.dumps(data)


class TestGenerateSuccess:
    def test_returns_report(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        report = _make_generator(client).generate(DOCUMENT)
        assert report.summary == "Results improved."
        assert report.key_points == ["Revenue grew", "Costs fell"]
        assert report.sentiment == "positive"
        assert report.word_count == 120

    def test_passes_document_text_to_prompt(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        _make_generator(client).generate(DOCUMENT)
        user_msg = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "quarterly results improved" in user_msg
        assert "=== notes.txt ===" in user_msg

    def test_text_with_braces_is_not_formatted(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        text = DOCUMENT + " {not_a_placeholder} {0}"
        _make_generator(client).generate(text)
        user_msg = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "{not_a_placeholder} {0}" in user_msg

    def test_calls_ai_with_model_and_schema(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        _make_generator(client).generate(DOCUMENT)
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert "keyPoints" in kwargs["json_schema"]["properties"]

    def test_clamps_temperature(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        _make_generator(client, temperature=3.0).generate(DOCUMENT)
        assert client.create_chat_completion.call_args.kwargs["temperature"] == 1.0

    def test_fills_missing_stats_from_text(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response(wordCount=None, readingTime=0))
        report = _make_generator(client).generate(DOCUMENT)
        assert report.word_count == len(DOCUMENT.split())
        assert report.reading_time == 1


class TestInputGuard:
    def test_blank_text_rejected(self) -> None:
        client = MagicMock()
        with pytest.raises(ReportInputError, match="required"):
            _make_generator(client).generate("   ")
        client.create_chat_completion.assert_not_called()

    def test_short_text_rejected(self) -> None:
        client = MagicMock()
        with pytest.raises(ReportInputError, match="too short"):
            _make_generator(client).generate("too short")
        client.create_chat_completion.assert_not_called()

    def test_custom_minimum(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        report = _make_generator(client, min_text_chars=1).generate("ok")
        assert report.summary


class TestJsonParsing:
    def test_strips_markdown_code_fences(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, "```json\n" + _valid_json_response() + "\n```")
        assert _make_generator(client).generate(DOCUMENT).summary == "Results improved."

    def test_invalid_json_raises_error(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, "Sure! Here is your report.")
        with pytest.raises(ReportError, match="Failed to parse AI response"):
            _make_generator(client).generate(DOCUMENT)

    def test_json_array_raises_error(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, "[]")
        with pytest.raises(ReportError, match="must be an object"):
            _make_generator(client).generate(DOCUMENT)

    def test_missing_summary_raises_validation_error(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response(summary=""))
        with pytest.raises(ReportValidationError, match="summary"):
            _make_generator(client).generate(DOCUMENT)

    def test_network_error_propagates(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = ReportNetworkError("network")
        with pytest.raises(ReportNetworkError, match="network"):
            _make_generator(client).generate(DOCUMENT)


class TestPromptLoading:
    def test_missing_template_raises(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(ReportError, match="prompt template"):
            _make_generator(prompt_template_path=tmp_path / "missing.txt")

    def test_logs_prompt_in_debug(self) -> None:
        client = MagicMock()
        _mock_ai_response(client, _valid_json_response())
        generator = _make_generator(client)
        with patch("docinsight.report.generator.Log") as mock_log:
            generator.generate(DOCUMENT)
        assert mock_log.debug.call_count >= 1
        mock_log.info.assert_called_once()
