"""Flatten a document outline into page-anchored chapter entries."""

import logging

from chapterizer.core.document import DocumentAccessor
from chapterizer.models.book import ChapterInfo, OutlineNode

log = logging.getLogger(__name__)


def flatten_outline(
    nodes: list[OutlineNode],
    document: DocumentAccessor,
    current_depth: int = 0,
    max_depth: int = 0,
) -> list[ChapterInfo]:
    """
    Turn outline nodes into an ordered list of (title, page anchor) entries.

    A node with children is replaced by its flattened children while
    ``current_depth < max_depth``; ``max_depth=0`` never descends. Nodes
    whose destination cannot be resolved are skipped. The result is
    sorted by page index, keeping authored order for equal anchors.
    """
    chapter_infos: list[ChapterInfo] = []

    for node in nodes:
        if node.children and max_depth > 0 and current_depth < max_depth:
            chapter_infos.extend(
                flatten_outline(node.children, document, current_depth + 1, max_depth)
            )
        elif node.destination is not None:
            try:
                page_index = document.resolve_destination(node.destination)
            except Exception as e:
                log.warning(f"Skipping outline entry {node.title!r}: {e}")
                continue

            title = node.title or f"chapter {len(chapter_infos) + 1}"
            chapter_infos.append(ChapterInfo(title=title, page_index=page_index))
            log.debug(f"Outline entry {title!r} -> page {page_index + 1}")

    # sorted() is stable
    return sorted(chapter_infos, key=lambda info: info.page_index)
