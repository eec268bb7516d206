"""Recognize chapter titles that carry no substantive content."""

# Front/back matter keywords, matched as lower-case substrings
SKIP_CHAPTER_KEYWORDS: tuple[str, ...] = (
    # English
    "acknowledgments",
    "acknowledgements",
    "acknowledgment",
    "preface",
    "foreword",
    "dedication",
    "table of contents",
    "copyright",
    "references",
    "bibliography",
    "about the author",
    "also by",
    # Chinese
    "致谢",
    "鸣谢",
    "前言",
    "序言",
    "目录",
    "版权",
    "参考文献",
    "索引",
    "作者简介",
)


def should_skip_chapter(
    title: str, keywords: tuple[str, ...] = SKIP_CHAPTER_KEYWORDS
) -> bool:
    """Return True if the title names front/back matter such as a preface."""
    normalized_title = title.lower().strip()
    return any(keyword.lower() in normalized_title for keyword in keywords)
