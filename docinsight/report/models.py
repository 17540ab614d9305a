from dataclasses import dataclass, field

SENTIMENTS = ("positive", "neutral", "negative")


@dataclass(frozen=True)
class Report:
    """Structured analysis of the combined documents."""

    summary: str
    key_points: list[str] = field(default_factory=list)
    insights: list[str] = field(default_factory=list)
    actionable_takeaways: list[str] = field(default_factory=list)
    word_count: int = 0
    reading_time: int = 0
    sentiment: str = "neutral"

    def to_dict(self) -> dict[str, object]:
        """Return the report in the wire shape the AI is asked to produce."""
        return {
            "summary": self.summary,
            "keyPoints": list(self.key_points),
            "insights": list(self.insights),
            "actionableTakeaways": list(self.actionable_takeaways),
            "wordCount": self.word_count,
            "readingTime": self.reading_time,
            "sentiment": self.sentiment,
        }
