"""Chapter segmentation pipeline: outline, then patterns, then uniform chunks."""

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from chapterizer.core.document import DocumentAccessor
from chapterizer.core.outline import flatten_outline
from chapterizer.core.outline_segmenter import segment_by_outline
from chapterizer.core.page_fetch import check_cancelled, fetch_all_pages
from chapterizer.core.pattern_segmenter import segment_by_pattern
from chapterizer.core.uniform_segmenter import segment_uniformly
from chapterizer.errors import EmptyDocumentError, SegmentationCancelled
from chapterizer.models.book import Chapter
from chapterizer.models.extraction import (
    SegmentationMethod,
    SegmentationOptions,
    SegmentationResult,
)

log = logging.getLogger(__name__)


# =============================================================================
# Strategy Layer Configuration
# =============================================================================


@dataclass
class SegmentationLayer:
    """Configuration for a segmentation strategy."""

    name: str
    method: SegmentationMethod
    fn: Callable[[], list[Chapter]]
    enabled: bool
    description: str


# =============================================================================
# Pipeline
# =============================================================================


class ChapterSegmentationPipeline:
    """Run segmentation strategies in fixed precedence on one document.

    The first strategy that yields any chapter wins; results from
    different strategies are never combined.
    """

    def __init__(
        self,
        document: DocumentAccessor,
        options: SegmentationOptions | None = None,
    ):
        self.document = document
        self.options = options or SegmentationOptions()
        self._cancel_event: threading.Event | None = None
        self._page_texts: list[str] | None = None
        self._warnings: list[str] = []

    def layers(self) -> list[SegmentationLayer]:
        """Strategies in priority order."""
        return [
            SegmentationLayer(
                name="outline",
                method=SegmentationMethod.OUTLINE,
                fn=self._segment_by_outline,
                enabled=True,
                description="Document outline/bookmarks",
            ),
            SegmentationLayer(
                name="pattern",
                method=SegmentationMethod.PATTERN,
                fn=self._segment_by_pattern,
                enabled=self.options.use_smart_detection,
                description="Chapter heading patterns",
            ),
            SegmentationLayer(
                name="uniform",
                method=SegmentationMethod.UNIFORM,
                fn=self._segment_uniformly,
                enabled=True,
                description="Fixed-size page chunks",
            ),
        ]

    def run(self, cancel_event: threading.Event | None = None) -> SegmentationResult:
        """
        Segment the document.

        Raises:
            EmptyDocumentError: If no strategy yields a chapter
            SegmentationCancelled: If ``cancel_event`` is set during the run
        """
        self._cancel_event = cancel_event
        self._page_texts = None
        self._warnings = []

        total_pages = self.document.page_count
        log.info(f"Segmenting document: {total_pages} pages")

        for layer in self.layers():
            if not layer.enabled:
                log.info(f"Skipping layer: {layer.name} (disabled)")
                continue

            check_cancelled(cancel_event)
            log.info(f"Trying segmentation layer: {layer.name} ({layer.description})")

            try:
                chapters = layer.fn()
            except SegmentationCancelled:
                raise
            except Exception as e:
                log.warning(f"Layer {layer.name} failed with error: {e}")
                self._warnings.append(f"{layer.description} failed: {e}")
                continue

            if not chapters:
                log.info(f"  Layer {layer.name}: No results")
                continue

            log.info(f"  Layer {layer.name}: SUCCESS - {len(chapters)} chapters")
            if layer.method == SegmentationMethod.UNIFORM:
                self._warnings.append(
                    "No document structure detected. Using page-based chunking."
                )

            return SegmentationResult(
                chapters=chapters,
                method=layer.method,
                total_pages=total_pages,
                warnings=list(self._warnings),
            )

        log.warning("All segmentation layers produced no chapters")
        raise EmptyDocumentError()

    # -------------------------------------------------------------------------
    # Layers
    # -------------------------------------------------------------------------

    def _segment_by_outline(self) -> list[Chapter]:
        try:
            outline = self.document.get_outline()
        except Exception as e:
            log.warning(f"Unable to read document outline: {e}")
            return []

        if not outline:
            return []

        chapter_infos = flatten_outline(
            outline,
            self.document,
            current_depth=0,
            max_depth=self.options.max_sub_chapter_depth,
        )
        log.info(f"  Outline yielded {len(chapter_infos)} anchored entries")

        return segment_by_outline(
            chapter_infos,
            self.document,
            self.document.page_count,
            skip_non_essential_chapters=self.options.skip_non_essential_chapters,
            max_workers=self.options.max_workers,
            cancel_event=self._cancel_event,
        )

    def _segment_by_pattern(self) -> list[Chapter]:
        return segment_by_pattern(self._all_page_texts())

    def _segment_uniformly(self) -> list[Chapter]:
        return segment_uniformly(self._all_page_texts(), self.document.page_count)

    def _all_page_texts(self) -> list[str]:
        """Fetch every page once and share it between the fallback layers."""
        if self._page_texts is None:
            self._page_texts = fetch_all_pages(
                self.document,
                max_workers=self.options.max_workers,
                cancel_event=self._cancel_event,
            )
        return self._page_texts


def segment_document(
    document: DocumentAccessor,
    options: SegmentationOptions | None = None,
    cancel_event: threading.Event | None = None,
) -> SegmentationResult:
    """Segment ``document`` into chapters with a fresh pipeline."""
    return ChapterSegmentationPipeline(document, options).run(cancel_event)
