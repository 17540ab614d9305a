from pathlib import Path

from docinsight.report.exceptions import ReportError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the report prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled report_prompt.txt.

    Returns:
        The raw template string with ``{document_text}`` and ``{json_schema}``
        placeholders.

    Raises:
        ReportError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "report_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the report JSON schema from a file.

    Raises:
        ReportError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "report_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"Failed to load JSON schema: {exc}") from exc
