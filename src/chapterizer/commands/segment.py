"""Segment command implementation."""

import re
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from chapterizer.cache.manager import CacheManager
from chapterizer.core.document_factory import DocumentFactory
from chapterizer.core.output_writer import OutputWriter
from chapterizer.core.pipeline import segment_document
from chapterizer.models.extraction import (
    SegmentationMethod,
    SegmentationOptions,
    SegmentationResult,
)


def get_default_output_dir(book_path: Path) -> Path:
    """Get default output directory based on the document filename."""
    stem = book_path.stem
    clean_stem = re.sub(r"[^\w\s-]", "", stem).strip()
    clean_stem = re.sub(r"[-\s]+", "_", clean_stem)
    return book_path.parent / f"{clean_stem}_chapters"


def display_chapters(result: SegmentationResult, console: Console) -> None:
    """Display the chapter table."""
    table = Table(title="Chapters", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white")
    table.add_column("Pages", justify="right", style="dim")
    table.add_column("Words", justify="right", style="green")

    for i, chapter in enumerate(result.chapters):
        table.add_row(
            str(i + 1),
            chapter.title,
            f"{chapter.start_page}-{chapter.end_page}",
            f"{chapter.word_count:,}",
        )

    console.print(table)


def _segment(
    book_path: Path, options: SegmentationOptions, text_backend: str
) -> SegmentationResult:
    with DocumentFactory.open(book_path, text_backend=text_backend) as document:
        return segment_document(document, options)


def execute_segment(
    book_path: Path,
    options: SegmentationOptions,
    output_dir: Path | None,
    text_backend: str,
    force: bool,
    quiet: bool,
    console: Console,
) -> SegmentationResult:
    """Execute the segment command."""
    cache_manager = CacheManager(book_path.parent)

    result: SegmentationResult | None = None
    if not force:
        result = cache_manager.get_cached_result(book_path, options, text_backend)
        if result is not None and not quiet:
            console.print("[dim]Using cached segmentation[/]")

    if result is None:
        if not quiet:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                progress.add_task(f"Segmenting {book_path.name}...", total=None)
                result = _segment(book_path, options, text_backend)
        else:
            result = _segment(book_path, options, text_backend)

        cache_manager.save_result(book_path, options, result, text_backend)

    if not quiet:
        method_display = result.method.value.title()
        info_lines = [
            f"[bold]{book_path.name}[/]",
            f"[dim]Pages:[/] {result.total_pages}",
            f"[dim]Chapters:[/] {len(result.chapters)}",
            f"[dim]Detection:[/] {method_display}",
        ]

        if result.warnings:
            info_lines.append("")
            for warning in result.warnings:
                info_lines.append(f"[yellow]! {warning}[/]")

        if (
            result.method == SegmentationMethod.UNIFORM
            and not options.use_smart_detection
        ):
            info_lines.append("")
            info_lines.append(
                "[cyan]Tip: Use --smart to detect chapter headings in the page text[/]"
            )

        console.print()
        console.print(Panel("\n".join(info_lines), title="Document Info", border_style="green"))
        console.print()
        display_chapters(result, console)

    if output_dir is not None:
        writer = OutputWriter(output_dir, book_path)
        chapter_metadata = []
        for i, chapter in enumerate(result.chapters):
            _, metadata = writer.write_chapter(chapter, i, result)
            chapter_metadata.append(metadata)
        manifest_path = writer.write_manifest(result, chapter_metadata)

        if not quiet:
            console.print()
            console.print(
                Panel(
                    f"[green]Wrote {len(result.chapters)} chapter(s)[/]\n\n"
                    f"[dim]Output directory:[/] {output_dir}\n"
                    f"[dim]Manifest:[/] {manifest_path.name}",
                    title="Complete",
                    border_style="green",
                )
            )

    return result
