"""Data models."""

from chapterizer.models.book import (
    Chapter,
    ChapterInfo,
    Destination,
    ExplicitDestination,
    NamedDestination,
    OutlineNode,
    PageIndexDestination,
)
from chapterizer.models.extraction import (
    SegmentationMethod,
    SegmentationOptions,
    SegmentationResult,
)
from chapterizer.models.output import (
    BookOutput,
    ChapterMetadata,
    ChapterOutput,
)

__all__ = [
    # Document models
    "Destination",
    "PageIndexDestination",
    "NamedDestination",
    "ExplicitDestination",
    "OutlineNode",
    "ChapterInfo",
    "Chapter",
    # Segmentation models
    "SegmentationMethod",
    "SegmentationOptions",
    "SegmentationResult",
    # Output models
    "ChapterMetadata",
    "ChapterOutput",
    "BookOutput",
]
