from ydbops.grouping import group_by, index_set, to_map


def test_group_by_keeps_order_within_groups():
    words = ["a", "bb", "c", "dd", "eee"]
    groups = group_by(words, len)
    assert groups[1] == ["a", "c"]
    assert groups[2] == ["bb", "dd"]
    assert groups[3] == ["eee"]


def test_group_by_covers_every_item_once():
    items = list(range(20))
    groups = group_by(items, lambda n: n % 3)
    flattened = sorted(x for group in groups.values() for x in group)
    assert flattened == items


def test_group_by_empty():
    assert group_by([], len) == {}


def test_to_map_later_item_wins():
    pairs = [("a", 1), ("b", 2), ("a", 3)]
    mapping = to_map(pairs, lambda p: p[0])
    assert mapping == {"a": ("a", 3), "b": ("b", 2)}


def test_index_set_membership():
    indexed = index_set(["x", "y", "x"])
    assert indexed == {"x", "y"}
    assert "z" not in indexed