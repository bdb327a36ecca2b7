"""Linear memories of a module and the memory section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterator

from wasmkit.arena import Tombstone, TombstoneArena
from wasmkit.binary import Encoder

MEMORY_SECTION = 5


@dataclass
class Memory(Tombstone):
    """A linear memory, either defined locally or imported."""

    id: int
    shared: bool
    initial: int
    maximum: int | None = None
    import_id: Hashable | None = None
    data_segments: set[Hashable] = field(default_factory=set)

    def on_delete(self) -> None:
        self.data_segments = set()

    def emit(self, encoder: Encoder) -> None:
        """Write this memory's limits in binary form."""
        if self.maximum is not None:
            encoder.byte(0x03 if self.shared else 0x01)
            encoder.u32(self.initial)
            encoder.u32(self.maximum)
        else:
            encoder.byte(0x00)
            encoder.u32(self.initial)


class ModuleMemories:
    """The set of memories of a module."""

    def __init__(self) -> None:
        self._arena: TombstoneArena[Memory] = TombstoneArena()

    def add_import(
        self,
        shared: bool,
        initial: int,
        maximum: int | None,
        import_id: Hashable,
    ) -> int:
        """Add a memory provided by ``import_id`` and return its id."""
        return self._arena.alloc_with_id(
            lambda id: Memory(id, shared, initial, maximum, import_id)
        )

    def add_local(self, shared: bool, initial: int, maximum: int | None) -> int:
        """Add a memory defined by the module itself and return its id."""
        return self._arena.alloc_with_id(
            lambda id: Memory(id, shared, initial, maximum)
        )

    def get(self, id: int) -> Memory:
        """Return the memory with ``id``."""
        return self._arena[id]

    def delete(self, id: int) -> None:
        """Remove a memory; references to it must be removed by the caller."""
        self._arena.delete(id)

    def __iter__(self) -> Iterator[Memory]:
        return iter(self._arena)

    def __len__(self) -> int:
        return len(self._arena)

    def emit(self, encoder: Encoder) -> list[int]:
        """Write the memory section and return local memory ids in index order.

        Imported memories belong to the import section and are left out;
        nothing is written if no local memory remains.
        """
        local = [memory for memory in self if memory.import_id is None]
        if not local:
            return []
        body = Encoder()
        body.usize(len(local))
        for memory in local:
            memory.emit(body)
        encoder.section(MEMORY_SECTION, body.getvalue())
        return [memory.id for memory in local]