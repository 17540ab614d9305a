import asyncio
from collections.abc import Awaitable, Iterable

from docinsight.extraction.models import PageResult


class PageSlots:
    """Write-once storage for per-page results, read back in page order.

    Once ``results()`` has been taken the slots are sealed, so work that lost
    a race (e.g. a recognition that timed out) cannot change returned data.
    """

    def __init__(self, page_count: int) -> None:
        self._texts: list[str | None] = [None] * page_count
        self._sealed = False

    def assign(self, page_index: int, text: str) -> None:
        if self._sealed:
            raise RuntimeError(f"Results already collected; page {page_index} rejected")
        if self._texts[page_index] is not None:
            raise RuntimeError(f"Page {page_index} already has a result")
        self._texts[page_index] = text

    def results(self) -> list[PageResult]:
        missing = [index for index, text in enumerate(self._texts) if text is None]
        if missing:
            raise RuntimeError(f"Pages without results: {missing}")
        self._sealed = True
        return [PageResult(page_index=index, text=text or "") for index, text in enumerate(self._texts)]


def join_pages(pages: Iterable[PageResult]) -> str:
    """Join page texts with newlines in page order, whatever order they arrive in."""
    ordered = sorted(pages, key=lambda page: page.page_index)
    return "\n".join(page.text for page in ordered)


async def run_all(jobs: Iterable[Awaitable[None]]) -> None:
    """Run page jobs concurrently; on the first failure cancel the rest and re-raise."""
    tasks = [asyncio.ensure_future(job) for job in jobs]
    try:
        await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
