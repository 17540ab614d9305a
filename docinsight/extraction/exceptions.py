class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedMimeTypeError(ExtractionError):
    """Raised when a file reaches extraction with a MIME type it cannot handle."""

    def __init__(self, mime_type: str) -> None:
        self.mime_type = mime_type
        super().__init__(f"Unsupported file type: {mime_type}")


class EmptyExtractionError(ExtractionError):
    """Raised when a file yields no text after trimming."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__("No text content found in file")


class OcrError(ExtractionError):
    """Base exception for OCR failures."""


class OcrTimeoutError(OcrError):
    """Raised when recognizing a single page takes longer than allowed."""

    def __init__(self, page_index: int, timeout_seconds: float) -> None:
        self.page_index = page_index
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"OCR timed out on page {page_index + 1} after {timeout_seconds:g} seconds"
        )


class OcrFailedError(OcrError):
    """Raised when OCR of one page fails; aborts the whole file."""

    def __init__(self, file_name: str, page_index: int, cause: BaseException) -> None:
        self.file_name = file_name
        self.page_index = page_index
        self.cause = cause
        super().__init__(f"OCR failed on page {page_index + 1}: {cause}")


class FileExtractionError(ExtractionError):
    """Raised by the orchestrator when any file in a batch cannot be extracted.

    The underlying error is chained as ``__cause__``.
    """

    def __init__(self, file_name: str, cause: BaseException) -> None:
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to process {file_name}: {cause}")


class RecognitionTimeoutError(OcrError):
    """Raised by an OCR engine when its own recognition deadline expires."""
