from conftest import text_of

from chapterizer.core.pattern_segmenter import (
    BOUNDARY_PATTERNS,
    first_line_title,
    match_boundary,
    segment_by_pattern,
)


def _heading(length, label="Chapter 2"):
    return label + " " + "a" * (length - len(label) - 1)


def test_patterns_keep_documented_precedence():
    assert [p.name for p in BOUNDARY_PATTERNS] == [
        "cn_chapter",
        "en_chapter",
        "cn_section",
        "numbered",
        "cn_enumerated",
    ]


def test_first_matching_pattern_wins():
    assert match_boundary("Chapter 3\n1. First point").name == "en_chapter"
    assert match_boundary("第三章 总论\n1. 概述").name == "cn_chapter"
    assert match_boundary("第12节 方法").name == "cn_section"
    assert match_boundary("1. Introduction").name == "numbered"
    assert match_boundary("三、研究方法").name == "cn_enumerated"
    assert match_boundary("chapter 7 in lower case").name == "en_chapter"
    assert match_boundary("Nothing to see here") is None


def test_boundary_may_start_any_line():
    assert match_boundary("running header\nCHAPTER 4 The Storm").name == "en_chapter"
    assert match_boundary("see Chapter 4 for details") is None


def test_page_of_49_characters_is_ignored():
    heading = _heading(49)
    assert len(heading) == 49
    pages = [text_of(300), heading, text_of(300, "tail")]

    chapters = segment_by_pattern(pages)

    assert len(chapters) == 1
    assert chapters[0].title == "Chapter 1"
    assert heading not in chapters[0].content
    assert (chapters[0].start_page, chapters[0].end_page) == (1, 3)


def test_page_of_50_characters_is_a_boundary():
    heading = _heading(50)
    assert len(heading) == 50
    pages = [text_of(300), heading, text_of(300, "tail")]

    chapters = segment_by_pattern(pages)

    assert [(c.id, c.title, c.start_page, c.end_page) for c in chapters] == [
        ("chapter-1", "Chapter 1", 1, 1),
        ("chapter-2", heading, 2, 3),
    ]
    assert chapters[1].content == heading + "\n\n" + text_of(300, "tail")


def test_leading_content_becomes_implicit_first_chapter():
    pages = [text_of(250, "prologue"), "Chapter 1 Arrival " + text_of(250)]

    chapters = segment_by_pattern(pages)

    assert chapters[0].title == "Chapter 1"
    assert chapters[0].content == text_of(250, "prologue")
    assert chapters[1].title.startswith("Chapter 1 Arrival")


def test_title_is_first_hundred_characters():
    page = "Chapter 9 " + text_of(400)

    chapters = segment_by_pattern([page])

    assert chapters[0].title == page[:100].strip()
    assert len(chapters[0].title) <= 100


def test_title_stops_at_first_line():
    page = "Chapter 3\nThe Storm\n" + text_of(300, "It was a dark night")

    chapters = segment_by_pattern([page])

    assert chapters[0].title == "Chapter 3"
    assert chapters[0].content == page


def test_first_line_title():
    assert first_line_title("  Chapter 3  \nThe Storm") == "Chapter 3"
    assert first_line_title("第三章 总论\r\n正文") == "第三章 总论"
    assert first_line_title("x" * 150) == "x" * 100
    assert first_line_title("   ") == ""


def test_short_accumulators_are_discarded_and_ids_stay_dense():
    pages = [
        "Chapter 1 " + text_of(60),
        "Chapter 2 " + text_of(300),
        "Chapter 3 " + text_of(300),
    ]

    chapters = segment_by_pattern(pages)

    assert [c.id for c in chapters] == ["chapter-1", "chapter-2"]
    assert [c.start_page for c in chapters] == [2, 3]
    assert chapters[0].title.startswith("Chapter 2")


def test_trailing_chapter_needs_enough_content():
    pages = ["Chapter 1 " + text_of(300), "Chapter 2 " + text_of(100)]

    chapters = segment_by_pattern(pages)

    assert [c.title[:9] for c in chapters] == ["Chapter 1"]


def test_short_pages_between_chapters_are_not_accumulated():
    pages = ["Chapter 1 " + text_of(300), "   12   ", text_of(80, "more")]

    chapters = segment_by_pattern(pages)

    assert chapters[0].content == "Chapter 1 " + text_of(300) + "\n\n" + text_of(80, "more")
    assert chapters[0].end_page == 3


def test_no_eligible_pages_yields_nothing():
    assert segment_by_pattern([]) == []
    assert segment_by_pattern(["short", "", text_of(49)]) == []


def test_custom_thresholds():
    pages = ["Chapter 1 " + text_of(30), "Chapter 2 " + text_of(30)]

    chapters = segment_by_pattern(pages, min_page_length=10, min_chapter_length=20)

    assert len(chapters) == 2
