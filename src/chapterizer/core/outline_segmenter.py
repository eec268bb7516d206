"""Build chapters from page-anchored outline entries."""

import logging
import threading

from chapterizer.core.document import DocumentAccessor
from chapterizer.core.page_fetch import check_cancelled, fetch_pages
from chapterizer.core.skip_filter import should_skip_chapter
from chapterizer.models.book import Chapter, ChapterInfo

log = logging.getLogger(__name__)

MIN_OUTLINE_CHAPTER_LENGTH = 100


def outline_page_ranges(
    chapter_infos: list[ChapterInfo], total_pages: int
) -> list[tuple[int, int]]:
    """
    Compute the 1-based inclusive page range for each outline entry.

    A chapter starts on the page after its 0-based anchor and ends on the
    page numbered by the next entry's raw 0-based anchor; the last chapter
    runs to the end of the document.
    """
    ranges = []
    for i, info in enumerate(chapter_infos):
        start_page = info.page_index + 1
        if i + 1 < len(chapter_infos):
            end_page = chapter_infos[i + 1].page_index
        else:
            end_page = total_pages
        ranges.append((start_page, end_page))
    return ranges


def extract_text_from_pages(
    document: DocumentAccessor,
    start_page: int,
    end_page: int,
    max_workers: int = 1,
    cancel_event: threading.Event | None = None,
) -> str:
    """Join the non-empty texts of pages ``[start_page, end_page]``."""
    texts = fetch_pages(
        document,
        range(start_page, end_page + 1),
        max_workers=max_workers,
        cancel_event=cancel_event,
    )
    return "\n\n".join(text for text in texts if text)


def segment_by_outline(
    chapter_infos: list[ChapterInfo],
    document: DocumentAccessor,
    total_pages: int,
    skip_non_essential_chapters: bool = True,
    max_workers: int = 1,
    cancel_event: threading.Event | None = None,
) -> list[Chapter]:
    """
    Extract chapter content for each outline entry.

    Entries with skip-listed titles or too little text are dropped and do
    not consume a chapter number. Returns an empty list when nothing
    survives.
    """
    chapters: list[Chapter] = []
    ranges = outline_page_ranges(chapter_infos, total_pages)

    for info, (start_page, end_page) in zip(chapter_infos, ranges):
        check_cancelled(cancel_event)

        if skip_non_essential_chapters and should_skip_chapter(info.title):
            log.info(f"Skipping non-essential chapter: {info.title!r}")
            continue

        log.debug(f"Extracting chapter {info.title!r} (pages {start_page}-{end_page})")
        content = extract_text_from_pages(
            document, start_page, end_page, max_workers, cancel_event
        )

        if len(content.strip()) <= MIN_OUTLINE_CHAPTER_LENGTH:
            log.debug(f"  Dropping {info.title!r}: only {len(content.strip())} characters")
            continue

        chapters.append(
            Chapter(
                id=f"chapter-{len(chapters) + 1}",
                title=info.title,
                content=content,
                start_page=start_page,
                end_page=end_page,
                page_index=info.page_index,
            )
        )

    return chapters
