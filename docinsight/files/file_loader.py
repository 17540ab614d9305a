import mimetypes
from pathlib import Path

from docinsight.files.models import UploadedFile

_EXTENSION_MIME_TYPES = {
    ".txt": "text/plain",
    ".pdf": "application/pdf",
}


class FileLoader:
    """Builds UploadedFile values from paths on disk."""

    def load(self, path: Path) -> UploadedFile:
        """Read a file and describe it the way a browser file picker would.

        Raises:
            FileNotFoundError: if the path does not exist.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        data = path.read_bytes()
        return UploadedFile(
            file_name=path.name,
            mime_type=self._guess_mime_type(path),
            size_bytes=len(data),
            data=data,
        )

    @staticmethod
    def _guess_mime_type(path: Path) -> str:
        known = _EXTENSION_MIME_TYPES.get(path.suffix.lower())
        if known is not None:
            return known
        guessed, _ = mimetypes.guess_type(path.name)
        return guessed or "application/octet-stream"
