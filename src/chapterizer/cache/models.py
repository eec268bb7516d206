"""Cache data models."""

from datetime import datetime

from pydantic import BaseModel, Field

from chapterizer.models.extraction import SegmentationResult


class CacheMetadata(BaseModel):
    """Metadata for cache invalidation."""

    file_path: str
    file_hash: str
    file_size: int
    file_mtime: float
    options_key: str
    text_backend: str = "pypdf"
    cached_at: datetime = Field(default_factory=datetime.now)
    cache_version: str = "1.1"


class CachedSegmentation(BaseModel):
    """Segmentation result stored for one file and one set of options."""

    cache_metadata: CacheMetadata
    result: SegmentationResult


class CacheIndex(BaseModel):
    """Index mapping "<path>::<options digest>" to cache entry keys."""

    entries: dict[str, str] = Field(default_factory=dict)
