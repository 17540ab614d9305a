from typing import Any

import pytest

from docinsight.report.exceptions import ReportValidationError
from docinsight.report.validator import validate_and_build


def _data(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "summary": " A summary. ",
        "keyPoints": ["one", "two"],
        "insights": ["insight"],
        "actionableTakeaways": ["act"],
        "wordCount": 300,
        "readingTime": 1.2,
        "sentiment": "Neutral",
    }
    data.update(overrides)
    return data


class TestValidateAndBuild:
    def test_builds_report(self) -> None:
        report = validate_and_build(_data())
        assert report.summary == "A summary."
        assert report.key_points == ["one", "two"]
        assert report.actionable_takeaways == ["act"]
        assert report.word_count == 300
        assert report.reading_time == 2
        assert report.sentiment == "neutral"

    def test_drops_blank_list_items(self) -> None:
        assert validate_and_build(_data(insights=["", "  ", "real"])).insights == ["real"]

    def test_missing_counts_default_to_zero(self) -> None:
        data = _data()
        del data["wordCount"]
        data["readingTime"] = None
        report = validate_and_build(data)
        assert report.word_count == 0
        assert report.reading_time == 0

    def test_round_trips_to_wire_shape(self) -> None:
        wire = validate_and_build(_data()).to_dict()
        assert set(wire) == {
            "summary", "keyPoints", "insights", "actionableTakeaways",
            "wordCount", "readingTime", "sentiment",
        }

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"summary": None}, "summary"),
            ({"summary": "   "}, "summary"),
            ({"keyPoints": "not a list"}, "keyPoints"),
            ({"insights": [1, 2]}, "insights"),
            ({"actionableTakeaways": None}, "actionableTakeaways"),
            ({"wordCount": "many"}, "wordCount"),
            ({"wordCount": True}, "wordCount"),
            ({"readingTime": -1}, "readingTime"),
            ({"readingTime": float("inf")}, "readingTime"),
            ({"sentiment": "angry"}, "sentiment"),
            ({"sentiment": None}, "sentiment"),
            ({"keyPoints": ["x"] * 51}, "Too many"),
        ],
    )
    def test_rejects_malformed_data(self, overrides: dict[str, Any], message: str) -> None:
        with pytest.raises(ReportValidationError, match=message):
            validate_and_build(_data(**overrides))
