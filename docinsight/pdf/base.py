from abc import ABC, abstractmethod
from types import TracebackType

from PIL import Image


class PageHandle(ABC):
    """Read access to a single page of an opened document."""

    @abstractmethod
    def text_fragments(self) -> list[str]:
        """Return the page's embedded text-layer fragments in content order.

        Fragments are returned as the backend reports them; callers decide
        how to filter and join them.

        Raises:
            PdfParseError: if the page's content stream cannot be read.
        """

    @abstractmethod
    def render(self, scale: float) -> Image.Image:
        """Rasterize the page to an RGB image at ``scale`` times its 72 dpi size.

        Raises:
            PdfParseError: if the page cannot be rendered.
        """


class DocumentHandle(ABC):
    """An opened, read-only PDF document.

    Page reads may be issued concurrently from several threads; implementations
    serialize access to their underlying library objects themselves.
    """

    @abstractmethod
    def page_count(self) -> int:
        """Return the number of pages."""

    @abstractmethod
    def get_page(self, index: int) -> PageHandle:
        """Return the page at zero-based ``index``.

        Raises:
            IndexError: if ``index`` is outside ``[0, page_count())``.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the resources held by the document."""

    def _check_index(self, index: int) -> None:
        count = self.page_count()
        if not 0 <= index < count:
            raise IndexError(f"Page index {index} out of range for {count} pages")

    def __enter__(self) -> "DocumentHandle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class BasePdfBackend(ABC):
    """Contract for all PDF parsing backends."""

    @abstractmethod
    def open(self, pdf_bytes: bytes) -> DocumentHandle:
        """Parse PDF bytes into a document handle.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            An open DocumentHandle; the caller is responsible for closing it.

        Raises:
            PdfParseError: if the bytes are not a readable PDF.
        """
