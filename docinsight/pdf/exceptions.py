class PdfExtractionError(Exception):
    """Base exception for PDF backend failures."""


class PdfParseError(PdfExtractionError):
    """Raised when PDF bytes cannot be opened or a page cannot be read."""


class UnknownPdfEngineError(PdfExtractionError, ValueError):
    """Raised when settings name a PDF backend that does not exist."""
