import pytest

from saltengine.containers import ContainerFullError, NameIdContainer, PackContainer


def test_add_takes_lowest_free_slot():
    pack = PackContainer(4)
    assert [pack.add(x) for x in "abc"] == [0, 1, 2]
    pack.remove(1)
    assert pack.add("d") == 1
    assert pack.get(1) == "d"


def test_get_free_slot_returns_none():
    pack = PackContainer(3)
    pack.add("a")
    assert pack.get(2) is None
    pack.remove(0)
    assert pack.get(0) is None


def test_full_container_raises():
    pack = PackContainer(2)
    pack.add(1)
    pack.add(2)
    with pytest.raises(ContainerFullError):
        pack.add(3)


def test_out_of_range_id_raises():
    pack = PackContainer(2)
    with pytest.raises(IndexError):
        pack.get(2)
    with pytest.raises(IndexError):
        pack.remove(-1)


def test_invalid_size():
    with pytest.raises(ValueError):
        PackContainer(0)


def test_len_and_iter_follow_occupancy():
    pack = PackContainer(5)
    for x in "abcd":
        pack.add(x)
    pack.remove(2)
    assert len(pack) == 3
    assert list(pack) == [(0, "a"), (1, "b"), (3, "d")]
    assert pack.size == 5


def test_index_of_uses_identity():
    pack = PackContainer(3)
    first, second = [1], [1]
    pack.add(first)
    pack.add(second)
    assert pack.index_of(second) == 1
    assert pack.index_of(first) == 0
    with pytest.raises(ValueError):
        pack.index_of([1])


def test_named_add_and_lookup():
    names = NameIdContainer(4)
    item_id = names.add("value", "position")
    assert names.get("position") == "value"
    assert names.get(item_id) == "value"
    assert names.id_of("position") == item_id
    assert names.name_of(item_id) == "position"


def test_unnamed_items_get_default_name():
    names = NameIdContainer(4)
    names.add("x", "first")
    item_id = names.add("y")
    assert names.name_of(item_id) == f"No_Name_{item_id}"
    assert names.get(f"No_Name_{item_id}") == "y"


def test_unknown_name_raises():
    names = NameIdContainer(2)
    with pytest.raises(KeyError):
        names.get("missing")
    with pytest.raises(KeyError):
        names.name_of(1)


def test_remove_by_name_frees_slot():
    names = NameIdContainer(2)
    names.add("a", "alpha")
    names.add("b", "beta")
    names.remove("alpha")
    assert names.get("alpha") is None
    assert len(names) == 1
    assert list(names) == [(1, "b")]


def test_first_name_association_is_kept():
    names = NameIdContainer(3)
    first = names.add("a", "dup")
    names.add("b", "dup")
    assert names.id_of("dup") == first


def test_id_of_item_object():
    names = NameIdContainer(3)
    obj = object()
    names.add("other", "o")
    item_id = names.add(obj, "target")
    assert names.id_of(obj) == item_id


def test_named_container_full():
    names = NameIdContainer(1)
    names.add("a", "a")
    with pytest.raises(ContainerFullError):
        names.add("b", "b")
    assert names.size == 1