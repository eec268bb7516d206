"""Outline command implementation."""

from pathlib import Path

from rich.console import Console
from rich.table import Table

from chapterizer.core.document_factory import DocumentFactory
from chapterizer.core.outline import flatten_outline
from chapterizer.core.skip_filter import should_skip_chapter


def execute_outline(book_path: Path, max_depth: int, console: Console) -> int:
    """Print the flattened outline anchors. Returns the number of entries."""
    with DocumentFactory.open(book_path) as document:
        outline = document.get_outline()
        if not outline:
            console.print("[yellow]Document has no outline[/]")
            return 0
        chapter_infos = flatten_outline(outline, document, max_depth=max_depth)

    table = Table(title="Outline", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="white")
    table.add_column("Page", justify="right", style="green")
    table.add_column("Skipped", justify="center", style="dim")

    for i, info in enumerate(chapter_infos):
        table.add_row(
            str(i + 1),
            info.title,
            str(info.page_index + 1),
            "yes" if should_skip_chapter(info.title) else "",
        )

    console.print(table)
    return len(chapter_infos)
