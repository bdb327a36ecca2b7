"""Tables of a module and the table section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterator

from wasmkit.arena import Tombstone, TombstoneArena
from wasmkit.binary import Encoder
from wasmkit.types import ValType

TABLE_SECTION = 4


@dataclass
class Table(Tombstone):
    """A table, either defined locally or imported."""

    id: int
    initial: int
    maximum: int | None
    element_ty: ValType
    import_id: Hashable | None = None
    elem_segments: set[Hashable] = field(default_factory=set)

    def emit(self, encoder: Encoder) -> None:
        """Write this table's element type and limits in binary form."""
        self.element_ty.emit(encoder)
        encoder.byte(1 if self.maximum is not None else 0)
        encoder.u32(self.initial)
        if self.maximum is not None:
            encoder.u32(self.maximum)


class ModuleTables:
    """The set of tables of a module."""

    def __init__(self) -> None:
        self._arena: TombstoneArena[Table] = TombstoneArena()

    def add_import(
        self,
        initial: int,
        maximum: int | None,
        element_ty: ValType,
        import_id: Hashable,
    ) -> int:
        """Add a table provided by ``import_id`` and return its id."""
        return self._arena.alloc_with_id(
            lambda id: Table(id, initial, maximum, element_ty, import_id)
        )

    def add_local(
        self, initial: int, maximum: int | None, element_ty: ValType
    ) -> int:
        """Add a table defined by the module itself and return its id."""
        return self._arena.alloc_with_id(
            lambda id: Table(id, initial, maximum, element_ty)
        )

    def get(self, id: int) -> Table:
        """Return the table with ``id``."""
        return self._arena[id]

    def delete(self, id: int) -> None:
        """Remove a table; references to it must be removed by the caller."""
        self._arena.delete(id)

    def __iter__(self) -> Iterator[Table]:
        return iter(self._arena)

    def __len__(self) -> int:
        return len(self._arena)

    def main_function_table(self) -> int | None:
        """Return the id of the single funcref table, or None if there is none.

        Raises ValueError if the module has more than one funcref table.
        """
        funcref = (t.id for t in self if t.element_ty is ValType.FUNCREF)
        first = next(funcref, None)
        if first is None:
            return None
        if next(funcref, None) is not None:
            raise ValueError("module contains more than one function table")
        return first

    def emit(self, encoder: Encoder) -> list[int]:
        """Write the table section and return local table ids in index order.

        Imported tables belong to the import section and are left out;
        nothing is written if no local table remains.
        """
        local = [table for table in self if table.import_id is None]
        if not local:
            return []
        body = Encoder()
        body.usize(len(local))
        for table in local:
            table.emit(body)
        encoder.section(TABLE_SECTION, body.getvalue())
        return [table.id for table in local]