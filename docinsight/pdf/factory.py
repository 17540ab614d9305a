from docinsight.config.settings import Settings
from docinsight.pdf.base import BasePdfBackend
from docinsight.pdf.loader import ensure_backend_loaded


class PdfBackendFactory:
    """Creates the PDF backend named in settings."""

    @classmethod
    def create(cls, settings: Settings) -> BasePdfBackend:
        backend_cls = ensure_backend_loaded(settings.pdf_engine)
        return backend_cls()
