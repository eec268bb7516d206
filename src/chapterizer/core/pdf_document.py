"""PDF document accessor backed by pypdf, with optional pdfplumber text extraction."""

import logging
import threading
from pathlib import Path
from typing import Literal

# Suppress warnings about malformed PDF object references from PDF libraries
logging.getLogger("pdfminer").setLevel(logging.ERROR)
logging.getLogger("pypdf").setLevel(logging.ERROR)

import pdfplumber
import pypdf
from pypdf.errors import EmptyFileError, FileNotDecryptedError, PdfReadError
from pypdf.generic import NullObject

from chapterizer.core.document import DocumentAccessor
from chapterizer.errors import (
    DocumentOpenError,
    OutlineResolutionError,
    PageExtractionError,
)
from chapterizer.models.book import (
    Destination,
    ExplicitDestination,
    NamedDestination,
    OutlineNode,
    PageIndexDestination,
)

log = logging.getLogger(__name__)

TextBackend = Literal["pypdf", "pdfplumber"]


def _destination_name(item) -> str | None:
    """Name of the /Dest entry of the raw outline dictionary, if it is a name."""
    node = getattr(item, "node", None)
    if node is None:
        return None
    dest = node.get("/Dest")
    if isinstance(dest, bytes):
        return dest.decode("latin-1")
    if isinstance(dest, str):
        return str(dest)
    return None


class PdfDocument(DocumentAccessor):
    """Access PDF pages, outline and destinations.

    pypdf readers are not safe for concurrent use, so every read goes
    through a per-document lock.
    """

    def __init__(self, pdf_path: Path, text_backend: TextBackend = "pypdf"):
        self.path = pdf_path
        self.text_backend = text_backend
        self._lock = threading.Lock()
        self._plumber = None

        try:
            self._reader = pypdf.PdfReader(str(pdf_path))
            page_count = len(self._reader.pages)
        except FileNotDecryptedError:
            raise DocumentOpenError("PDF is encrypted. Please decrypt first.")
        except EmptyFileError:
            raise DocumentOpenError("PDF file is empty.")
        except PdfReadError as e:
            raise DocumentOpenError(f"PDF appears corrupted: {e}")

        self._page_count = page_count

    @property
    def page_count(self) -> int:
        return self._page_count

    def get_outline(self) -> list[OutlineNode] | None:
        with self._lock:
            outline = self._reader.outline
            if not outline:
                return None
            return self._build_outline(outline)

    def _build_outline(self, items: list) -> list[OutlineNode]:
        """Convert pypdf's outline into a tree.

        pypdf returns a flat list where a nested list holds the children of
        the item right before it.
        """
        nodes: list[OutlineNode] = []
        for item in items:
            if isinstance(item, list):
                children = self._build_outline(item)
                if nodes:
                    nodes[-1].children.extend(children)
                else:
                    nodes.extend(children)
                continue

            title = str(getattr(item, "title", "") or "").strip()
            nodes.append(OutlineNode(title=title, destination=self._destination_of(item)))
        return nodes

    def _destination_of(self, item) -> Destination | None:
        """Map a pypdf outline item to a destination.

        pypdf resolves named destinations it can find while building the
        outline; a name it could not resolve leaves the page empty, and is
        kept as a NamedDestination so resolution fails per entry.
        """
        page = getattr(item, "page", None)
        if page is None or isinstance(page, NullObject):
            name = _destination_name(item)
            return NamedDestination(name=name) if name else None
        if isinstance(page, int):
            return PageIndexDestination(page_index=page)
        return ExplicitDestination(ref=item)

    def resolve_destination(self, destination: Destination) -> int:
        if isinstance(destination, PageIndexDestination):
            return destination.page_index

        with self._lock:
            if isinstance(destination, NamedDestination):
                named = self._reader.named_destinations
                if destination.name not in named:
                    raise OutlineResolutionError(
                        f"Unknown named destination: {destination.name!r}"
                    )
                target = named[destination.name]
            else:
                target = destination.ref

            try:
                page_index = self._reader.get_destination_page_number(target)
            except Exception as e:
                raise OutlineResolutionError(f"Cannot resolve destination: {e}") from e

        if page_index is None or page_index < 0:
            raise OutlineResolutionError("Destination does not point at a page")
        return page_index

    def get_page_text(self, page_number: int) -> str:
        if not 1 <= page_number <= self._page_count:
            raise PageExtractionError(page_number, "page out of range")

        with self._lock:
            try:
                if self.text_backend == "pdfplumber":
                    if self._plumber is None:
                        self._plumber = pdfplumber.open(str(self.path))
                    text = self._plumber.pages[page_number - 1].extract_text()
                else:
                    text = self._reader.pages[page_number - 1].extract_text()
            except Exception as e:
                raise PageExtractionError(page_number, str(e)) from e

        return (text or "").strip()

    def close(self) -> None:
        if self._plumber is not None:
            self._plumber.close()
            self._plumber = None
        self._reader.close()
