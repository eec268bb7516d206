from conftest import FakeDocument, node

from chapterizer.core.outline import flatten_outline


def _flat(infos):
    return [(info.title, info.page_index) for info in infos]


def test_flatten_sorts_out_of_order_entries():
    doc = FakeDocument([""] * 10)
    outline = [node("Three", 7), node("One", 0), node("Two", 3)]

    infos = flatten_outline(outline, doc)

    assert _flat(infos) == [("One", 0), ("Two", 3), ("Three", 7)]


def test_flatten_keeps_authored_order_for_equal_anchors():
    doc = FakeDocument([""] * 10)
    outline = [node("B", 4), node("A", 2), node("A2", 2)]

    assert _flat(flatten_outline(outline, doc)) == [("A", 2), ("A2", 2), ("B", 4)]


def test_depth_zero_never_descends():
    doc = FakeDocument([""] * 10)
    outline = [
        node("Part I", 0, children=[node("1.1", 1), node("1.2", 2)]),
        node("Part II", 5),
    ]

    assert _flat(flatten_outline(outline, doc, max_depth=0)) == [
        ("Part I", 0),
        ("Part II", 5),
    ]


def test_depth_zero_drops_parent_without_destination():
    doc = FakeDocument([""] * 10)
    outline = [node("Part I", children=[node("1.1", 1)]), node("Part II", 5)]

    assert _flat(flatten_outline(outline, doc)) == [("Part II", 5)]


def test_recursion_replaces_parent_with_children():
    doc = FakeDocument([""] * 10)
    outline = [
        node("Part I", 0, children=[node("1.1", 1), node("1.2", 3)]),
        node("Part II", 5),
    ]

    assert _flat(flatten_outline(outline, doc, max_depth=1)) == [
        ("1.1", 1),
        ("1.2", 3),
        ("Part II", 5),
    ]


def test_recursion_stops_at_max_depth():
    doc = FakeDocument([""] * 10)
    outline = [
        node(
            "Part I",
            0,
            children=[node("1.1", 1, children=[node("1.1.1", 2), node("1.1.2", 3)])],
        )
    ]

    assert _flat(flatten_outline(outline, doc, max_depth=1)) == [("1.1", 1)]
    assert _flat(flatten_outline(outline, doc, max_depth=2)) == [
        ("1.1.1", 2),
        ("1.1.2", 3),
    ]


def test_resolution_failure_skips_only_that_node():
    doc = FakeDocument([""] * 10, named={"intro": 1})
    outline = [
        node("Intro", name="intro"),
        node("Broken", name="missing"),
        node("Body", 4),
    ]

    assert _flat(flatten_outline(outline, doc)) == [("Intro", 1), ("Body", 4)]


def test_nodes_without_destination_or_children_are_dropped():
    doc = FakeDocument([""] * 10)
    outline = [node("Nowhere"), node("Somewhere", 2)]

    assert _flat(flatten_outline(outline, doc)) == [("Somewhere", 2)]


def test_untitled_entries_get_a_placeholder_title():
    doc = FakeDocument([""] * 10)
    outline = [node("First", 0), node("", 3)]

    assert _flat(flatten_outline(outline, doc)) == [("First", 0), ("chapter 2", 3)]
