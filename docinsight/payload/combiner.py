from collections.abc import Sequence
from dataclasses import dataclass

from docinsight.extraction.models import FileExtractionResult

DEFAULT_MAX_PAYLOAD_CHARS = 3_800_000
FILE_SEPARATOR = "\n\n" + "=" * 50 + "\n\n"
TRUNCATION_WARNING = (
    "The document is too long to be processed. The extracted text has been truncated."
)


@dataclass(frozen=True)
class CombinedPayload:
    """Text sent to the report generator."""

    text: str
    original_length: int
    truncated: bool = False


def frame_file(result: FileExtractionResult) -> str:
    """Prefix a file's text with its filename header."""
    return f"=== {result.file_name} ===\n\n{result.text}"


def build_combined_payload(
    results: Sequence[FileExtractionResult],
    max_chars: int = DEFAULT_MAX_PAYLOAD_CHARS,
) -> CombinedPayload:
    """Concatenate framed file texts in order, cutting at ``max_chars``.

    Overflow is truncated to exactly ``max_chars`` characters, never rejected.
    """
    if max_chars <= 0:
        raise ValueError("max_chars must be positive")
    text = FILE_SEPARATOR.join(frame_file(result) for result in results)
    if len(text) <= max_chars:
        return CombinedPayload(text=text, original_length=len(text))
    return CombinedPayload(text=text[:max_chars], original_length=len(text), truncated=True)
