from dataclasses import dataclass

MIME_TEXT_PLAIN = "text/plain"
MIME_PDF = "application/pdf"
ALLOWED_MIME_TYPES = frozenset({MIME_TEXT_PLAIN, MIME_PDF})


@dataclass(frozen=True)
class UploadedFile:
    """A user-selected file: raw bytes plus the metadata the browser reports."""

    file_name: str
    mime_type: str
    size_bytes: int
    data: bytes

    def __repr__(self) -> str:
        return (
            f"UploadedFile(file_name={self.file_name!r}, mime_type={self.mime_type!r}, "
            f"size_bytes={self.size_bytes})"
        )
