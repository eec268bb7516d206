from conftest import text_of

from chapterizer.core.uniform_segmenter import segment_uniformly, uniform_chunk_size


def test_chunk_size_targets_ten_parts():
    assert uniform_chunk_size(95) == 9
    assert uniform_chunk_size(100) == 10
    assert uniform_chunk_size(5) == 1
    assert uniform_chunk_size(0) == 1


def test_ninety_five_pages_make_eleven_chunks():
    pages = [text_of(150) for _ in range(95)]

    chapters = segment_uniformly(pages, 95)

    assert len(chapters) == 11
    assert [c.start_page for c in chapters] == [1, 10, 19, 28, 37, 46, 55, 64, 73, 82, 91]
    assert (chapters[-1].start_page, chapters[-1].end_page) == (91, 95)
    assert [c.id for c in chapters] == [f"chapter-{n}" for n in range(1, 12)]
    assert chapters[0].title == "Part 1 (Pages 1-9)"
    assert chapters[-1].title == "Part 11 (Pages 91-95)"


def test_blank_chunks_are_skipped_and_numbering_stays_dense():
    pages = ["", ""] + [text_of(150) for _ in range(18)]

    chapters = segment_uniformly(pages, 20)

    assert chapters[0].id == "chapter-1"
    assert chapters[0].title == "Part 1 (Pages 3-4)"
    assert len(chapters) == 9


def test_chunk_content_is_joined_and_trimmed():
    pages = ["  " + text_of(60, "a"), text_of(60, "b") + "  "]

    chapters = segment_uniformly(pages, 2)

    # one page per chunk, each below the threshold
    assert chapters == []

    # two pages per chunk
    chapters = segment_uniformly(pages * 10, 20)
    assert len(chapters) == 10
    assert chapters[0].content == text_of(60, "a") + "\n\n" + text_of(60, "b")


def test_all_blank_document_yields_nothing():
    assert segment_uniformly([""] * 30, 30) == []
