"""Data models for output format."""

from datetime import datetime

from pydantic import BaseModel, Field


class ChapterMetadata(BaseModel):
    """Metadata accompanying chapter content."""

    chapter_id: str
    chapter_index: int
    title: str
    source_path: str
    extracted_at: datetime = Field(default_factory=datetime.now)
    word_count: int
    character_count: int
    paragraph_count: int
    start_page: int
    end_page: int
    segmentation_method: str


class ChapterOutput(BaseModel):
    """Complete chapter output for AI consumption."""

    metadata: ChapterMetadata
    content: str


class BookOutput(BaseModel):
    """Complete book output manifest."""

    source_path: str
    total_pages: int
    total_chapters: int
    output_directory: str
    created_at: datetime = Field(default_factory=datetime.now)
    chapters: list[ChapterMetadata]
    segmentation_method: str
    warnings: list[str] = Field(default_factory=list)
