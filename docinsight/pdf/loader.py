"""Process-wide, lazy loading of PDF backends.

Backend modules pull in heavy native libraries, so they are imported on first
use and cached for the lifetime of the process.
"""

import importlib
import threading

from docinsight.logging.logger import Log
from docinsight.pdf.base import BasePdfBackend
from docinsight.pdf.exceptions import UnknownPdfEngineError

BACKENDS: dict[str, tuple[str, str]] = {
    "pymupdf": ("docinsight.pdf.pymupdf_adapter", "PyMuPdfBackend"),
    "pdfplumber": ("docinsight.pdf.pdfplumber_adapter", "PdfPlumberBackend"),
}

_loaded: dict[str, type[BasePdfBackend]] = {}
_lock = threading.Lock()


def ensure_backend_loaded(engine: str) -> type[BasePdfBackend]:
    """Import the named backend once and return its class.

    Idempotent and safe to call from any thread.

    Raises:
        UnknownPdfEngineError: if ``engine`` is not a known backend name.
    """
    engine = engine.lower()
    with _lock:
        backend_cls = _loaded.get(engine)
        if backend_cls is not None:
            return backend_cls
        target = BACKENDS.get(engine)
        if target is None:
            raise UnknownPdfEngineError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(BACKENDS)}"
            )
        module_name, class_name = target
        module = importlib.import_module(module_name)
        backend_cls = getattr(module, class_name)
        _loaded[engine] = backend_cls
        Log.debug(f"Loaded PDF backend '{engine}'")
        return backend_cls


def is_backend_loaded(engine: str) -> bool:
    """Return True if ``engine`` has already been loaded in this process."""
    with _lock:
        return engine.lower() in _loaded


def reset_loaded_backends() -> None:
    """Forget loaded backends. Used by tests."""
    with _lock:
        _loaded.clear()
