"""Plain-text document accessor."""

from pathlib import Path

from chapterizer.core.document import DocumentAccessor
from chapterizer.errors import (
    DocumentOpenError,
    OutlineResolutionError,
    PageExtractionError,
)
from chapterizer.models.book import Destination, OutlineNode, PageIndexDestination

PAGE_BREAK = "\f"


class TextDocument(DocumentAccessor):
    """Text split into pages on form feeds, as written by ``pdftotext``.

    Plain text carries no outline.
    """

    def __init__(self, pages: list[str]):
        self._pages = pages

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> "TextDocument":
        try:
            raw = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentOpenError(f"Cannot read text file: {e}")

        pages = raw.split(PAGE_BREAK)
        # pdftotext terminates the last page with a form feed too
        if len(pages) > 1 and not pages[-1].strip():
            pages.pop()
        return cls(pages)

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def get_outline(self) -> list[OutlineNode] | None:
        return None

    def get_page_text(self, page_number: int) -> str:
        if not 1 <= page_number <= len(self._pages):
            raise PageExtractionError(page_number, "page out of range")
        return self._pages[page_number - 1].strip()

    def resolve_destination(self, destination: Destination) -> int:
        if isinstance(destination, PageIndexDestination):
            return destination.page_index
        raise OutlineResolutionError(f"Unsupported destination: {destination.kind}")
