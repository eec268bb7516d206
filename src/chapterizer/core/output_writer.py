"""Write segmented chapters to an output directory."""

from datetime import datetime
from pathlib import Path

from chapterizer.models.book import Chapter
from chapterizer.models.extraction import SegmentationResult
from chapterizer.models.output import BookOutput, ChapterMetadata, ChapterOutput


class OutputWriter:
    """Write chapters as JSON files plus a manifest."""

    def __init__(self, output_dir: Path, source_path: Path):
        """Initialize output writer.

        Args:
            output_dir: Directory to write output files
            source_path: Path to the segmented document
        """
        self.output_dir = output_dir
        self.source_path = source_path
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write_chapter(
        self, chapter: Chapter, index: int, result: SegmentationResult
    ) -> tuple[Path, ChapterMetadata]:
        """Write single chapter to JSON file."""
        paragraphs = [p for p in chapter.content.split("\n\n") if p.strip()]
        metadata = ChapterMetadata(
            chapter_id=chapter.id,
            chapter_index=index,
            title=chapter.title,
            source_path=str(self.source_path),
            extracted_at=datetime.now(),
            word_count=chapter.word_count,
            character_count=chapter.character_count,
            paragraph_count=len(paragraphs),
            start_page=chapter.start_page,
            end_page=chapter.end_page,
            segmentation_method=result.method.value,
        )

        output = ChapterOutput(metadata=metadata, content=chapter.content)

        filepath = self.output_dir / f"chapter_{index + 1:03d}.json"
        filepath.write_text(output.model_dump_json(indent=2))

        return filepath, metadata

    def write_manifest(
        self, result: SegmentationResult, chapter_metadata: list[ChapterMetadata]
    ) -> Path:
        """Write book manifest file."""
        manifest = BookOutput(
            source_path=str(self.source_path),
            total_pages=result.total_pages,
            total_chapters=len(result.chapters),
            output_directory=str(self.output_dir),
            created_at=datetime.now(),
            chapters=chapter_metadata,
            segmentation_method=result.method.value,
            warnings=result.warnings,
        )

        filepath = self.output_dir / "manifest.json"
        filepath.write_text(manifest.model_dump_json(indent=2))
        return filepath
