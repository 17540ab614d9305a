from dataclasses import dataclass


@dataclass(frozen=True)
class PageResult:
    """Text produced for one page by either the text layer or OCR."""

    page_index: int
    text: str


@dataclass(frozen=True)
class ExtractionProgress:
    """Snapshot of page completion within one extraction phase."""

    current_page: int
    total_pages: int
    ocr_active: bool


@dataclass(frozen=True)
class FileExtractionResult:
    """Final, trimmed text of one uploaded file."""

    file_name: str
    text: str
