"""Mapping from indices of a parsed binary to arena ids."""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import Hashable


class IndexSpace(Enum):
    """The index spaces of a module, named as they appear in errors."""

    TABLE = "tables"
    TYPE = "types"
    FUNC = "funcs"
    GLOBAL = "globals"
    MEMORY = "memories"
    ELEMENT = "elements"
    DATA = "data"


class IndicesToIds:
    """Maps original binary indices to ids, per index space.

    Items added after parsing have no original index and are not recorded.
    """

    def __init__(self) -> None:
        self._spaces: dict[IndexSpace, list[Hashable]] = {
            space: [] for space in IndexSpace
        }
        self._locals: defaultdict[Hashable, list[Hashable]] = defaultdict(list)

    def push(self, space: IndexSpace, id: Hashable) -> int:
        """Record ``id`` under the next index of ``space`` and return that index."""
        ids = self._spaces[space]
        ids.append(id)
        return len(ids) - 1

    def get(self, space: IndexSpace, index: int) -> Hashable:
        """Return the id recorded under ``index`` in ``space``."""
        ids = self._spaces[space]
        if 0 <= index < len(ids):
            return ids[index]
        raise IndexError(f"index `{index}` is out of bounds for {space.value}")

    def push_local(self, function: Hashable, id: Hashable) -> int:
        """Record a local of ``function`` under its next index and return it."""
        ids = self._locals[function]
        ids.append(id)
        return len(ids) - 1

    def get_local(self, function: Hashable, index: int) -> Hashable:
        """Return the id of local ``index`` of ``function``."""
        ids = self._locals.get(function, [])
        if 0 <= index < len(ids):
            return ids[index]
        raise IndexError(f"index `{index}` is out of bounds for local")