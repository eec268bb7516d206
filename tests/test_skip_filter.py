from chapterizer.core.skip_filter import SKIP_CHAPTER_KEYWORDS, should_skip_chapter


def test_skip_is_case_insensitive():
    assert should_skip_chapter("ACKNOWLEDGMENTS")
    assert should_skip_chapter("Acknowledgments")


def test_skip_trims_and_matches_substrings():
    assert should_skip_chapter("   Preface to the Second Edition  ")
    assert should_skip_chapter("Table of Contents")
    assert should_skip_chapter("References and Further Reading")


def test_skip_matches_chinese_variants():
    assert should_skip_chapter("目录")
    assert should_skip_chapter("参考文献")
    assert should_skip_chapter("致谢")


def test_substantive_titles_are_kept():
    assert not should_skip_chapter("Chapter 1: The Beginning")
    assert not should_skip_chapter("Indexing Strategies")
    assert not should_skip_chapter("")


def test_custom_keywords():
    assert should_skip_chapter("Errata", keywords=("errata",))
    assert not should_skip_chapter("Preface", keywords=("errata",))


def test_keywords_are_lower_case():
    assert all(keyword == keyword.lower() for keyword in SKIP_CHAPTER_KEYWORDS)
