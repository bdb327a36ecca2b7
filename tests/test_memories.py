import pytest

from wasmkit.binary import Encoder
from wasmkit.memories import MEMORY_SECTION, ModuleMemories


def _emit_one(memory):
    enc = Encoder()
    memory.emit(enc)
    return enc.getvalue()


def test_add_local_assigns_sequential_ids_and_fields():
    mems = ModuleMemories()
    a = mems.add_local(False, 1, None)
    b = mems.add_local(True, 2, 4)
    assert b == a + 1
    mem = mems.get(b)
    assert (mem.id, mem.shared, mem.initial, mem.maximum) == (b, True, 2, 4)
    assert mem.import_id is None
    assert len(mems) == 2


def test_add_import_records_import():
    mems = ModuleMemories()
    id = mems.add_import(False, 1, 3, "env.memory")
    assert mems.get(id).import_id == "env.memory"


def test_emit_without_maximum():
    mems = ModuleMemories()
    id = mems.add_local(False, 1, None)
    assert _emit_one(mems.get(id)) == bytes([0x00, 1])


def test_emit_with_maximum_unshared():
    mems = ModuleMemories()
    id = mems.add_local(False, 1, 2)
    assert _emit_one(mems.get(id)) == bytes([0x01, 1, 2])


def test_emit_with_maximum_shared():
    mems = ModuleMemories()
    id = mems.add_local(True, 1, 2)
    assert _emit_one(mems.get(id)) == bytes([0x03, 1, 2])


def test_delete_clears_segments_and_hides_memory():
    mems = ModuleMemories()
    keep = mems.add_local(False, 1, None)
    gone = mems.add_local(False, 2, None)
    mem = mems.get(gone)
    mem.data_segments.add(7)
    mems.delete(gone)
    assert mem.data_segments == set()
    assert [m.id for m in mems] == [keep]
    assert len(mems) == 1
    with pytest.raises(KeyError):
        mems.get(gone)


def test_delete_twice_raises():
    mems = ModuleMemories()
    id = mems.add_local(False, 1, None)
    mems.delete(id)
    with pytest.raises(KeyError):
        mems.delete(id)


def test_section_emit_skips_imports():
    mems = ModuleMemories()
    mems.add_import(False, 1, None, "imp")
    local = mems.add_local(False, 3, None)
    enc = Encoder()
    order = mems.emit(enc)
    out = enc.getvalue()
    assert order == [local]
    assert out[0] == MEMORY_SECTION
    assert out[1] == len(out) - 2
    assert out[2] == 1
    assert out[3:] == _emit_one(mems.get(local))


def test_section_emit_nothing_when_only_imports():
    mems = ModuleMemories()
    mems.add_import(True, 1, 2, "imp")
    enc = Encoder()
    assert mems.emit(enc) == []
    assert enc.getvalue() == b""