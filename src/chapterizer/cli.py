"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from chapterizer.cache.manager import CacheManager
from chapterizer.commands.outline import execute_outline
from chapterizer.commands.segment import execute_segment, get_default_output_dir
from chapterizer.core.document_factory import DocumentFactory
from chapterizer.errors import EmptyDocumentError
from chapterizer.models.extraction import SegmentationOptions

app = typer.Typer(
    name="chapterize",
    help="Split PDF and paginated text documents into chapters.",
    add_completion=False,
)

console = Console()

# Cache subcommand group
cache_app = typer.Typer(help="Cache management commands")
app.add_typer(cache_app, name="cache")


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route library logging through rich on stderr."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _check_supported(book_path: Path) -> None:
    if not DocumentFactory.is_supported(book_path):
        console.print(f"[red]Unsupported file format: {book_path.suffix}[/]")
        console.print("[dim]Supported formats: .pdf, .txt[/]")
        raise typer.Exit(1)


@app.command()
def segment(
    book_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the document (PDF or form-feed paginated text)",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    smart: Annotated[
        bool,
        typer.Option(
            "--smart",
            help="Detect chapter headings in page text when there is no usable outline",
        ),
    ] = False,
    keep_all: Annotated[
        bool,
        typer.Option(
            "--keep-all",
            help="Keep front/back matter such as prefaces and references",
        ),
    ] = False,
    depth: Annotated[
        int,
        typer.Option(
            "--depth",
            help="Outline levels to descend into (0 = top-level entries only)",
        ),
    ] = 0,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-w",
            help="Page fetch worker threads",
        ),
    ] = 1,
    backend: Annotated[
        str,
        typer.Option(
            "--backend",
            help="PDF text extraction backend: pypdf or pdfplumber",
        ),
    ] = "pypdf",
    write: Annotated[
        bool,
        typer.Option(
            "--write",
            help="Write chapters to the output directory",
        ),
    ] = False,
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Output directory (implies --write; default: {name}_chapters/)",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Force re-segmentation, ignore cache",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress progress output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log strategy progress"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log per-page details"),
    ] = False,
) -> None:
    """Segment a document into chapters."""
    configure_logging(verbose, debug)
    _check_supported(book_path)

    if backend not in ("pypdf", "pdfplumber"):
        console.print(f"[red]Invalid backend: {backend}. Use pypdf or pdfplumber.[/]")
        raise typer.Exit(1)

    try:
        options = SegmentationOptions(
            use_smart_detection=smart,
            skip_non_essential_chapters=not keep_all,
            max_sub_chapter_depth=depth,
            max_workers=workers,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid options: {e.errors()[0]['msg']}[/]")
        raise typer.Exit(1)

    if write and output_dir is None:
        output_dir = get_default_output_dir(book_path)

    try:
        execute_segment(
            book_path=book_path,
            options=options,
            output_dir=output_dir,
            text_backend=backend,
            force=force,
            quiet=quiet,
            console=console,
        )
    except EmptyDocumentError as e:
        console.print(f"[red]{e}. The document may be scanned or image-based.[/]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def outline(
    book_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the document",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    depth: Annotated[
        int,
        typer.Option(
            "--depth",
            min=0,
            help="Outline levels to descend into (0 = top-level entries only)",
        ),
    ] = 0,
) -> None:
    """Display the document outline as chapter anchors."""
    configure_logging()
    _check_supported(book_path)

    try:
        execute_outline(book_path, depth, console)
    except Exception as e:
        console.print(f"[red]Error reading file: {e}[/]")
        raise typer.Exit(1)


@cache_app.command("clear")
def cache_clear(
    project_dir: Annotated[
        Path,
        typer.Option(
            "--dir",
            "-d",
            help="Directory containing the cache (default: current directory)",
        ),
    ] = Path("."),
) -> None:
    """Clear all cached data."""
    cache_manager = CacheManager(project_dir.resolve())
    count = cache_manager.clear_cache()

    if count > 0:
        console.print(f"[green]Cleared {count} cached result(s)[/]")
    else:
        console.print("[dim]No cache to clear[/]")


@cache_app.command("list")
def cache_list(
    project_dir: Annotated[
        Path,
        typer.Option(
            "--dir",
            "-d",
            help="Directory containing the cache (default: current directory)",
        ),
    ] = Path("."),
) -> None:
    """List all cached results."""
    cache_manager = CacheManager(project_dir.resolve())
    cached = cache_manager.list_cached()

    if not cached:
        console.print("[dim]No cached results[/]")
        return

    table = Table(title="Cached Results", show_header=True, header_style="bold cyan")
    table.add_column("Path", style="white")
    table.add_column("Options", style="dim", width=12)
    table.add_column("Entry", style="dim", width=12)

    for index_key, entry_key in cached:
        path, _, digest = index_key.rpartition("::")
        # Truncate path for display
        display_path = path if len(path) < 60 else "..." + path[-57:]
        table.add_row(display_path, digest, entry_key[:12])

    console.print(table)


if __name__ == "__main__":
    app()
