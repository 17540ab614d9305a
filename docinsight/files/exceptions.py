class FileValidationError(Exception):
    """Base exception for rejected file selections."""


class NoFilesSelectedError(FileValidationError):
    """Raised when the selection is empty."""

    def __init__(self) -> None:
        super().__init__("Please select at least one file.")


class TooManyFilesError(FileValidationError):
    """Raised when more files are selected than allowed."""

    def __init__(self, max_files: int) -> None:
        self.max_files = max_files
        super().__init__(f"Maximum {max_files} files allowed.")


class UnsupportedFileTypeError(FileValidationError):
    """Raised when a file's MIME type is neither plain text nor PDF."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(
            f"Invalid file type: {file_name}. Please upload .txt or .pdf files only."
        )


class FileTooLargeError(FileValidationError):
    """Raised when a single file exceeds the size limit."""

    def __init__(self, file_name: str, max_size_bytes: int) -> None:
        self.file_name = file_name
        self.max_size_bytes = max_size_bytes
        max_mb = max_size_bytes // (1024 * 1024)
        super().__init__(
            f"File too large: {file_name}. Please upload files smaller than {max_mb}MB."
        )
