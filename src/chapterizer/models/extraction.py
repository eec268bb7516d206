"""Data models for segmentation configuration and results."""

from enum import Enum

from pydantic import BaseModel, Field

from chapterizer.models.book import Chapter


class SegmentationMethod(str, Enum):
    """Strategy that produced a segmentation result."""

    OUTLINE = "outline"
    PATTERN = "pattern"
    UNIFORM = "uniform"


class SegmentationOptions(BaseModel):
    """Caller-supplied configuration for one pipeline run."""

    use_smart_detection: bool = False
    skip_non_essential_chapters: bool = True
    max_sub_chapter_depth: int = Field(default=0, ge=0)
    max_workers: int = Field(default=1, ge=1)  # page fetch pool size

    def cache_key(self) -> str:
        """Stable key for the options that affect segmentation output."""
        return (
            f"smart={int(self.use_smart_detection)}"
            f";skip={int(self.skip_non_essential_chapters)}"
            f";depth={self.max_sub_chapter_depth}"
        )


class SegmentationResult(BaseModel):
    """Chapters produced by exactly one strategy."""

    chapters: list[Chapter]
    method: SegmentationMethod
    total_pages: int
    warnings: list[str] = Field(default_factory=list)
