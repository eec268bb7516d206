"""Fetch page text with per-page failure isolation."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from chapterizer.core.document import DocumentAccessor
from chapterizer.errors import SegmentationCancelled

log = logging.getLogger(__name__)


def check_cancelled(cancel_event: threading.Event | None) -> None:
    """Raise SegmentationCancelled if the caller asked to stop."""
    if cancel_event is not None and cancel_event.is_set():
        raise SegmentationCancelled("Segmentation cancelled")


def fetch_page_text(
    document: DocumentAccessor,
    page_number: int,
    cancel_event: threading.Event | None = None,
) -> str:
    """Return a page's text, or "" if the accessor fails on that page."""
    check_cancelled(cancel_event)
    try:
        text = document.get_page_text(page_number)
    except Exception as e:
        log.warning(f"Skipping page {page_number}: {e}")
        return ""
    log.debug(f"Page {page_number} text length: {len(text)} characters")
    return text


def fetch_pages(
    document: DocumentAccessor,
    page_numbers: list[int] | range,
    max_workers: int = 1,
    cancel_event: threading.Event | None = None,
) -> list[str]:
    """Fetch several pages, keeping the order of ``page_numbers``.

    With ``max_workers > 1`` the fetches run on a bounded thread pool.
    """
    page_numbers = list(page_numbers)
    fetch_one = partial(fetch_page_text, document, cancel_event=cancel_event)

    if max_workers > 1 and len(page_numbers) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            texts = list(executor.map(fetch_one, page_numbers))
    else:
        texts = [fetch_one(page_number) for page_number in page_numbers]

    check_cancelled(cancel_event)
    return texts


def fetch_all_pages(
    document: DocumentAccessor,
    max_workers: int = 1,
    cancel_event: threading.Event | None = None,
) -> list[str]:
    """Fetch every page of the document; index ``i`` holds page ``i + 1``."""
    return fetch_pages(
        document,
        range(1, document.page_count + 1),
        max_workers=max_workers,
        cancel_event=cancel_event,
    )
