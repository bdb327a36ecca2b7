import pytest
from hypothesis import given, strategies as st

from wasmkit.arena import Tombstone, TombstoneArena


class Doggo(Tombstone):
    def __init__(self, good_boi):
        self.good_boi = good_boi

    def on_delete(self):
        self.good_boi = None


def test_can_delete():
    arena = TombstoneArena()
    treat = object()
    doggo = Doggo(treat)
    id = arena.alloc(doggo)
    assert doggo.good_boi is treat
    assert id in arena

    arena.delete(id)

    assert doggo.good_boi is None, "the on_delete should have been called"
    assert id not in arena, "and the arena no longer contains the doggo :("


def test_deleted_item_is_hidden():
    arena = TombstoneArena()
    a = arena.alloc(Doggo(1))
    b = arena.alloc(Doggo(2))
    arena.delete(a)
    assert arena.get(a) is None
    assert arena.get(b).good_boi == 2
    assert len(arena) == 1
    assert [id for id, _ in arena.items()] == [b]
    assert [d.good_boi for d in arena] == [2]
    with pytest.raises(KeyError):
        arena[a]


def test_delete_twice_raises():
    arena = TombstoneArena()
    id = arena.alloc(Doggo(1))
    arena.delete(id)
    with pytest.raises(KeyError):
        arena.delete(id)


def test_delete_unknown_raises():
    arena = TombstoneArena()
    with pytest.raises(KeyError):
        arena.delete(0)


def test_ids_not_reused_after_delete():
    arena = TombstoneArena()
    first = arena.alloc("a")
    arena.delete(first)
    second = arena.alloc("b")
    assert second != first
    assert arena[second] == "b"


def test_alloc_with_id_passes_future_id():
    arena = TombstoneArena()
    arena.alloc("x")
    expected = arena.next_id()
    id = arena.alloc_with_id(lambda i: ("item", i))
    assert id == expected
    assert arena[id] == ("item", id)


def test_items_without_on_delete_can_be_deleted():
    arena = TombstoneArena()
    id = arena.alloc(42)
    arena.delete(id)
    assert len(arena) == 0
    assert list(arena) == []


def test_contains_rejects_out_of_range():
    arena = TombstoneArena()
    arena.alloc("a")
    assert -1 not in arena
    assert 1 not in arena
    assert "0" not in arena


@given(st.lists(st.booleans(), max_size=40))
def test_len_counts_live_items(deletions):
    arena = TombstoneArena()
    ids = [arena.alloc(i) for i in range(len(deletions))]
    for id, remove in zip(ids, deletions):
        if remove:
            arena.delete(id)
    assert len(arena) == deletions.count(False)
    assert list(arena) == [i for i, d in zip(ids, deletions) if not d]