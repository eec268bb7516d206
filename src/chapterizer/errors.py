"""Exceptions raised by the segmentation engine and document accessors."""


class ChapterizerError(Exception):
    """Base class for chapterizer errors."""


class DocumentOpenError(ChapterizerError):
    """Raised when a source document cannot be opened."""


class PageExtractionError(ChapterizerError):
    """Raised by an accessor when a single page's text cannot be fetched."""

    def __init__(self, page_number: int, reason: str = ""):
        self.page_number = page_number
        message = f"Failed to extract page {page_number}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class OutlineResolutionError(ChapterizerError):
    """Raised by an accessor when an outline destination cannot be resolved."""


class EmptyDocumentError(ChapterizerError):
    """Raised when no segmentation strategy yields any chapter."""

    def __init__(self, message: str = "No valid chapter content found"):
        super().__init__(message)


class SegmentationCancelled(ChapterizerError):
    """Raised when the caller cancels a running segmentation."""
