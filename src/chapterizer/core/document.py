"""Abstract document capability consumed by the segmentation engine."""

from abc import ABC, abstractmethod

from chapterizer.models.book import Destination, OutlineNode


class DocumentAccessor(ABC):
    """Read-only access to a paginated document.

    Page numbers passed to :meth:`get_page_text` are 1-based; page indexes
    returned by :meth:`resolve_destination` are 0-based.
    """

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages in the document."""
        pass

    @abstractmethod
    def get_outline(self) -> list[OutlineNode] | None:
        """Return the top-level outline entries, or None if there is no outline."""
        pass

    @abstractmethod
    def get_page_text(self, page_number: int) -> str:
        """Return the text of a page.

        Raises:
            PageExtractionError: If the page cannot be read
        """
        pass

    @abstractmethod
    def resolve_destination(self, destination: Destination) -> int:
        """Resolve an outline destination to a 0-based page index.

        Raises:
            OutlineResolutionError: If the destination cannot be resolved
        """
        pass

    def close(self) -> None:
        """Release any resources held by the accessor."""

    def __enter__(self) -> "DocumentAccessor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
