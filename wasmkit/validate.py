"""Basic validity checks for the parts of a module."""

from __future__ import annotations

from typing import Iterable

from wasmkit.memories import Memory
from wasmkit.tables import Table
from wasmkit.types import Type

_MEMORY_PAGE_LIMIT = 0xFFFF + 1
_U32_MAX = 0xFFFF_FFFF


class ValidationError(ValueError):
    """Raised when a module fails to validate."""


def validate_limits(initial: int, maximum: int | None, k: int) -> None:
    """Check that ``initial <= maximum <= k`` and ``initial <= k``."""
    if maximum is not None and (maximum < initial or maximum > k):
        raise ValidationError(
            f"invalid limits: min = {initial}, max = {maximum}; k = {k}"
        )
    if initial > k:
        raise ValidationError(f"invalid limits: min = {initial}, k = {k}")


def validate_memory(memory: Memory) -> None:
    """Check a memory's sharing and page limits."""
    if memory.shared and memory.maximum is None:
        raise ValidationError("shared memories must have a maximum size")
    try:
        validate_limits(memory.initial, memory.maximum, _MEMORY_PAGE_LIMIT)
    except ValidationError as err:
        raise ValidationError(f"when validating a memory: {err}") from err


def validate_table(table: Table) -> None:
    """Check a table's limits."""
    try:
        validate_limits(table.initial, table.maximum, _U32_MAX)
    except ValidationError as err:
        raise ValidationError(f"when validating a table: {err}") from err


def validate_unique_names(names: Iterable[str]) -> None:
    """Check that no export name occurs twice."""
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise ValidationError(f"duplicate export of `{name}`")
        seen.add(name)


def validate_start_type(ty: Type) -> None:
    """Check that a start function's type takes and returns nothing."""
    if ty.params or ty.results:
        raise ValidationError(
            "start function must take no arguments and return nothing"
        )


def validate(
    memories: Iterable[Memory],
    tables: Iterable[Table],
    only_stable_features: bool,
) -> None:
    """Validate a module's memories and tables."""
    memories = list(memories)
    tables = list(tables)
    if only_stable_features:
        if len(tables) > 1:
            raise ValidationError("multiple tables not allowed in the wasm spec yet")
        if len(memories) > 1:
            raise ValidationError(
                "multiple memories not allowed in the wasm spec yet"
            )
    for memory in memories:
        validate_memory(memory)
    for table in tables:
        validate_table(table)