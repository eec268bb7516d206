"""Detect chapter boundaries directly from page text."""

import logging
import re
from dataclasses import dataclass

from chapterizer.models.book import Chapter

log = logging.getLogger(__name__)

MIN_PAGE_LENGTH = 50
MIN_CHAPTER_LENGTH = 200
MAX_TITLE_LENGTH = 100

_CN_NUMERALS = "0-9０-９一二三四五六七八九十百千零〇两"


@dataclass(frozen=True)
class BoundaryPattern:
    """A named predicate marking a page as the start of a chapter."""

    name: str
    regex: re.Pattern

    def matches(self, page_text: str) -> bool:
        return self.regex.search(page_text) is not None


# Order is precedence: the first matching pattern wins. Each pattern is
# anchored at the start of any line of the page.
BOUNDARY_PATTERNS: list[BoundaryPattern] = [
    BoundaryPattern("cn_chapter", re.compile(rf"^第[{_CN_NUMERALS}]+章", re.MULTILINE)),
    BoundaryPattern("en_chapter", re.compile(r"^Chapter\s+\d+", re.MULTILINE | re.IGNORECASE)),
    BoundaryPattern("cn_section", re.compile(rf"^第[{_CN_NUMERALS}]+节", re.MULTILINE)),
    # Very permissive: any line starting with "12."
    BoundaryPattern("numbered", re.compile(r"^\d+\.", re.MULTILINE)),
    BoundaryPattern("cn_enumerated", re.compile(r"^[0-9０-９一二三四五六七八九十]、", re.MULTILINE)),
]


@dataclass
class _Accumulator:
    title: str
    content: str
    start_page: int
    end_page: int


def first_line_title(page_text: str) -> str:
    """First line of the page, capped at MAX_TITLE_LENGTH characters."""
    lines = page_text.strip().splitlines()
    if not lines:
        return ""
    return lines[0][:MAX_TITLE_LENGTH].strip()


def match_boundary(
    page_text: str, patterns: list[BoundaryPattern] = BOUNDARY_PATTERNS
) -> BoundaryPattern | None:
    """Return the first pattern matching the page, or None."""
    for pattern in patterns:
        if pattern.matches(page_text):
            return pattern
    return None


def segment_by_pattern(
    page_texts: list[str],
    patterns: list[BoundaryPattern] = BOUNDARY_PATTERNS,
    min_page_length: int = MIN_PAGE_LENGTH,
    min_chapter_length: int = MIN_CHAPTER_LENGTH,
) -> list[Chapter]:
    """
    Scan pages left to right, opening a chapter at every boundary match.

    Pages shorter than ``min_page_length`` (after trimming) are ignored.
    Text before the first boundary becomes an implicit first chapter.
    A chapter is kept only if its content exceeds ``min_chapter_length``
    characters.
    """
    chapters: list[Chapter] = []
    current: _Accumulator | None = None
    chapter_count = 0

    def commit(acc: _Accumulator | None) -> None:
        if acc is None:
            return
        content = acc.content.strip()
        if len(content) <= min_chapter_length:
            log.debug(f"Discarding {acc.title!r}: only {len(content)} characters")
            return
        # ids count emitted chapters only, so a discarded accumulator leaves no gap
        chapters.append(
            Chapter(
                id=f"chapter-{len(chapters) + 1}",
                title=acc.title,
                content=content,
                start_page=acc.start_page,
                end_page=acc.end_page,
            )
        )

    for i, raw_text in enumerate(page_texts):
        page_number = i + 1
        page_text = raw_text.strip()
        if len(page_text) < min_page_length:
            continue

        pattern = match_boundary(page_text, patterns)
        if pattern is not None:
            commit(current)

            title = first_line_title(page_text) or f"chapter {chapter_count + 1}"
            chapter_count += 1
            current = _Accumulator(
                title=title,
                content=page_text,
                start_page=page_number,
                end_page=page_number,
            )
            log.debug(f"New chapter ({pattern.name}) on page {page_number}: {title!r}")
        elif current is not None:
            current.content += "\n\n" + page_text
            current.end_page = page_number
        else:
            chapter_count += 1
            current = _Accumulator(
                title=f"Chapter {chapter_count}",
                content=page_text,
                start_page=page_number,
                end_page=page_number,
            )

    commit(current)

    log.info(f"Pattern detection found {len(chapters)} chapters")
    return chapters
