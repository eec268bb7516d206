from collections import Counter

import pytest

from chapterizer.core.document import DocumentAccessor
from chapterizer.errors import OutlineResolutionError, PageExtractionError
from chapterizer.models.book import (
    NamedDestination,
    OutlineNode,
    PageIndexDestination,
)


class FakeDocument(DocumentAccessor):
    """In-memory accessor with injectable page and destination failures."""

    def __init__(
        self,
        pages,
        outline=None,
        named=None,
        failing_pages=(),
        outline_error=None,
    ):
        self.pages = list(pages)
        self.outline = outline
        self.named = named or {}
        self.failing_pages = set(failing_pages)
        self.outline_error = outline_error
        self.fetches = Counter()

    @property
    def page_count(self):
        return len(self.pages)

    def get_outline(self):
        if self.outline_error is not None:
            raise self.outline_error
        return self.outline

    def get_page_text(self, page_number):
        self.fetches[page_number] += 1
        if page_number in self.failing_pages:
            raise PageExtractionError(page_number, "broken content stream")
        return self.pages[page_number - 1]

    def resolve_destination(self, destination):
        if isinstance(destination, PageIndexDestination):
            return destination.page_index
        if isinstance(destination, NamedDestination) and destination.name in self.named:
            return self.named[destination.name]
        raise OutlineResolutionError(f"cannot resolve {destination!r}")


def text_of(length, start="lorem"):
    """Text of exactly ``length`` characters with no boundary heading."""
    body = (start + " ipsum dolor sit amet ") * (length // 10 + 1)
    return body[: length - 1] + "x"


def node(title, page_index=None, children=None, name=None):
    if name is not None:
        destination = NamedDestination(name=name)
    elif page_index is not None:
        destination = PageIndexDestination(page_index=page_index)
    else:
        destination = None
    return OutlineNode(title=title, destination=destination, children=children or [])


@pytest.fixture
def make_document():
    return FakeDocument
