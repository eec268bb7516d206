"""Fallback segmentation into fixed-size page chunks."""

import logging

from chapterizer.models.book import Chapter

log = logging.getLogger(__name__)

TARGET_UNIFORM_CHAPTERS = 10
MIN_UNIFORM_CHAPTER_LENGTH = 100


def uniform_chunk_size(total_pages: int) -> int:
    """Pages per chunk: aims for at most ten chunks, never below one page."""
    return max(1, total_pages // TARGET_UNIFORM_CHAPTERS)


def segment_uniformly(page_texts: list[str], total_pages: int) -> list[Chapter]:
    """
    Split the document into consecutive chunks of equal page count.

    Chunks with too little text are dropped; the remaining chunks are
    numbered consecutively.
    """
    chapters: list[Chapter] = []
    chunk_size = uniform_chunk_size(total_pages)

    for start in range(0, total_pages, chunk_size):
        end = min(start + chunk_size, total_pages)
        content = "\n\n".join(page_texts[start:end]).strip()

        if len(content) <= MIN_UNIFORM_CHAPTER_LENGTH:
            continue

        n = len(chapters) + 1
        chapters.append(
            Chapter(
                id=f"chapter-{n}",
                title=f"Part {n} (Pages {start + 1}-{end})",
                content=content,
                start_page=start + 1,
                end_page=end,
            )
        )

    return chapters
