"""Tests for collext.lists."""

from collext.lists import add_items, add_uniq, remove_item, remove_items


# ── add_uniq ────────────────────────────────────────────────────────


def test_add_uniq_adds_missing_item() -> None:
    items = [1, 2, 3, 4]
    assert add_uniq(items, 6) is True
    assert items == [1, 2, 3, 4, 6]


def test_add_uniq_skips_existing_item() -> None:
    items = [1, 2, 3, 4]
    assert add_uniq(items, 3) is False
    assert items == [1, 2, 3, 4]


def test_add_uniq_objects_by_identity() -> None:
    obj1 = {"x": 12}
    obj2 = {"x": 3}
    items = [obj1, obj2]

    assert add_uniq(items, {"x": 4}) is True
    assert items == [{"x": 12}, {"x": 3}, {"x": 4}]

    assert add_uniq(items, obj2) is False
    assert items == [{"x": 12}, {"x": 3}, {"x": 4}]

    # An equal but distinct dict is a different object.
    assert add_uniq(items, {"x": 3}) is True
    assert len(items) == 4


def test_add_uniq_several_items() -> None:
    items = [1, 2, 3, 4]
    assert add_uniq(items, [2, 3, 4, 5, 7]) is True
    assert items == [1, 2, 3, 4, 5, 7]


def test_add_uniq_several_items_all_present() -> None:
    items = [1, 2]
    assert add_uniq(items, [1, 2]) is False
    assert items == [1, 2]


# ── add_items ───────────────────────────────────────────────────────


def test_add_items_keeps_duplicates() -> None:
    items = [1, 2, 3, 4, 5]
    result = add_items(items, [4, 5, 6])
    assert result is items
    assert items == [1, 2, 3, 4, 5, 4, 5, 6]


# ── remove_item / remove_items ──────────────────────────────────────


def test_remove_item_existing() -> None:
    items = [2, 3, 4]
    assert remove_item(items, 4) is True
    assert items == [2, 3]


def test_remove_item_missing() -> None:
    items = [1, 2, 3]
    assert remove_item(items, 4) is False
    assert items == [1, 2, 3]


def test_remove_item_objects() -> None:
    obj1 = {"x": 12}
    obj2 = {"x": 3}
    items = [obj1, obj2]

    assert remove_item(items, obj2) is True
    assert items == [{"x": 12}]

    assert remove_item(items, {"x": 12}) is False
    assert items == [{"x": 12}]


def test_remove_item_keeps_list_identity() -> None:
    items = [1, 2, 1]
    alias = items
    remove_item(items, 1)
    assert alias == [2]


def test_remove_items() -> None:
    items = [1, 2, 3, 4, 5]
    assert remove_items(items, [3, 4, 6]) is True
    assert items == [1, 2, 5]


def test_remove_items_nothing_matches() -> None:
    items = [1, 2]
    assert remove_items(items, (7, 8)) is False
    assert items == [1, 2]


# ── booleans vs numbers ─────────────────────────────────────────────


def test_add_uniq_bool_is_not_a_number() -> None:
    items = [1, 0]
    assert add_uniq(items, True) is True
    assert add_uniq(items, False) is True
    assert items == [1, 0, True, False]
    assert add_uniq(items, True) is False


def test_remove_item_bool_leaves_numbers() -> None:
    items = [1, True, 0, False]
    assert remove_item(items, True) is True
    assert items == [1, 0, False]
    assert [type(x) for x in items] == [int, int, bool]
