from collections.abc import Sequence

from docinsight.files.exceptions import (
    FileTooLargeError,
    NoFilesSelectedError,
    TooManyFilesError,
    UnsupportedFileTypeError,
)
from docinsight.files.models import ALLOWED_MIME_TYPES, UploadedFile

DEFAULT_MAX_FILES = 5
DEFAULT_MAX_FILE_SIZE_BYTES = 100 * 1024 * 1024


class FileValidator:
    """Rejects empty, oversized or unsupported selections before extraction starts.

    Only metadata is inspected; file contents are never read.
    """

    def __init__(
        self,
        max_files: int = DEFAULT_MAX_FILES,
        max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
    ) -> None:
        self._max_files = max_files
        self._max_file_size_bytes = max_file_size_bytes

    def validate(self, files: Sequence[UploadedFile]) -> None:
        """Check the selection; the first failing rule wins.

        Raises:
            NoFilesSelectedError: if ``files`` is empty.
            TooManyFilesError: if more than ``max_files`` are selected.
            UnsupportedFileTypeError: for the first file with a disallowed MIME type.
            FileTooLargeError: for the first file over the size limit.
        """
        if not files:
            raise NoFilesSelectedError()
        if len(files) > self._max_files:
            raise TooManyFilesError(self._max_files)
        for uploaded in files:
            if uploaded.mime_type not in ALLOWED_MIME_TYPES:
                raise UnsupportedFileTypeError(uploaded.file_name)
        for uploaded in files:
            if uploaded.size_bytes > self._max_file_size_bytes:
                raise FileTooLargeError(uploaded.file_name, self._max_file_size_bytes)
