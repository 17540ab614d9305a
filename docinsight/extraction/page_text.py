import asyncio

from docinsight.extraction.models import PageResult
from docinsight.extraction.progress import PageProgressTracker, ProgressNotifier
from docinsight.extraction.slots import PageSlots, run_all
from docinsight.pdf.base import DocumentHandle


def join_fragments(fragments: list[str]) -> str:
    """Join a page's text fragments with single spaces, dropping blank ones."""
    return " ".join(fragment for fragment in fragments if fragment.strip())


class PageTextExtractor:
    """Reads the embedded text layer of every page concurrently."""

    async def extract(
        self,
        document: DocumentHandle,
        notifier: ProgressNotifier,
    ) -> list[PageResult]:
        """Return one PageResult per page, in page order.

        Pages without a text layer yield empty strings rather than errors.

        Raises:
            PdfParseError: if any page's content cannot be read.
        """
        total = document.page_count()
        slots = PageSlots(total)
        tracker = PageProgressTracker(notifier, total, ocr_active=False)
        tracker.start()

        async def read_page(index: int) -> None:
            page = document.get_page(index)
            fragments = await asyncio.to_thread(page.text_fragments)
            slots.assign(index, join_fragments(fragments))
            tracker.page_done()

        await run_all(read_page(index) for index in range(total))
        return slots.results()
