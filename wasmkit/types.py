"""WebAssembly value types, function types and a module's type section."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Iterable, Iterator

from wasmkit.arena import Tombstone, TombstoneArena
from wasmkit.binary import Encoder

TYPE_SECTION = 1


@total_ordering
class ValType(Enum):
    """A value type; each member's value is its binary encoding."""

    I32 = 0x7F
    I64 = 0x7E
    F32 = 0x7D
    F64 = 0x7C
    V128 = 0x7B
    EXTERNREF = 0x6F
    FUNCREF = 0x70

    def _rank(self) -> int:
        return list(ValType).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ValType):
            return NotImplemented
        return self._rank() < other._rank()

    def emit(self, encoder: Encoder) -> None:
        """Write this type's encoding byte."""
        encoder.byte(self.value)

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(eq=False)
class Type(Tombstone):
    """A function type. Equality ignores ``id`` and ``name``."""

    id: int
    params: tuple[ValType, ...] = ()
    results: tuple[ValType, ...] = ()
    is_for_function_entry: bool = False
    name: str | None = field(default=None)

    def __post_init__(self) -> None:
        self.params = tuple(self.params)
        self.results = tuple(self.results)

    def _key(self) -> tuple:
        return (self.params, self.results, self.is_for_function_entry)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def sort_key(self) -> tuple:
        """Ordering key: parameters first, then results."""
        return (self.params, self.results)

    def on_delete(self) -> None:
        self.params = ()
        self.results = ()

    def emit(self, encoder: Encoder) -> None:
        """Write this function type in binary form."""
        if self.is_for_function_entry:
            raise ValueError("function entry block types are never emitted")
        encoder.byte(0x60)
        encoder.list(self.params)
        encoder.list(self.results)


class ModuleTypes:
    """The de-duplicated set of function types of a module."""

    def __init__(self) -> None:
        self._arena: TombstoneArena[Type] = TombstoneArena()
        self._ids: dict[Type, int] = {}

    def _insert(self, ty: Type) -> int:
        existing = self._ids.get(ty)
        if existing is not None:
            return existing
        id = self._arena.alloc(ty)
        self._ids[ty] = id
        return id

    def get(self, id: int) -> Type:
        """Return the type with ``id``."""
        return self._arena[id]

    def params_results(
        self, id: int
    ) -> tuple[tuple[ValType, ...], tuple[ValType, ...]]:
        """Return the parameters and results of a type."""
        ty = self.get(id)
        return ty.params, ty.results

    def params(self, id: int) -> tuple[ValType, ...]:
        """Return the parameters of a type."""
        return self.get(id).params

    def results(self, id: int) -> tuple[ValType, ...]:
        """Return the results of a type."""
        return self.get(id).results

    def by_name(self, name: str) -> int | None:
        """Return the id of the first type with ``name``, if any."""
        return next((id for id, ty in self._arena.items() if ty.name == name), None)

    def __iter__(self) -> Iterator[Type]:
        return iter(self._arena)

    def __len__(self) -> int:
        return len(self._arena)

    def delete(self, id: int) -> None:
        """Remove a type; references to it must be removed by the caller."""
        ty = self._arena[id]
        self._ids.pop(ty, None)
        self._arena.delete(id)

    def add(self, params: Iterable[ValType], results: Iterable[ValType]) -> int:
        """Add a function type, reusing an equal existing one."""
        return self._insert(Type(self._arena.next_id(), tuple(params), tuple(results)))

    def add_entry_ty(self, results: Iterable[ValType]) -> int:
        """Add a type used only for multi-value function entry blocks."""
        return self._insert(
            Type(self._arena.next_id(), (), tuple(results), is_for_function_entry=True)
        )

    def find(self, params: Iterable[ValType], results: Iterable[ValType]) -> int | None:
        """Return the id of the ordinary type with these params and results."""
        params, results = tuple(params), tuple(results)
        return next(
            (
                id
                for id, ty in self._arena.items()
                if not ty.is_for_function_entry
                and ty.params == params
                and ty.results == results
            ),
            None,
        )

    def find_for_function_entry(self, results: Iterable[ValType]) -> int | None:
        """Return the id of the entry-block type with these results."""
        results = tuple(results)
        return next(
            (
                id
                for id, ty in self._arena.items()
                if ty.is_for_function_entry and not ty.params and ty.results == results
            ),
            None,
        )

    def emit(self, encoder: Encoder) -> list[int]:
        """Write the type section and return type ids in index order.

        Entry-block types are left out; nothing is written if no type remains.
        """
        tys = sorted(
            (ty for ty in self if not ty.is_for_function_entry), key=Type.sort_key
        )
        if not tys:
            return []
        body = Encoder()
        body.usize(len(tys))
        for ty in tys:
            ty.emit(body)
        encoder.section(TYPE_SECTION, body.getvalue())
        return [ty.id for ty in tys]