# wasmkit

Building blocks for holding parts of a WebAssembly module in memory and
writing them out in the binary format.

## What it provides

- `wasmkit.arena` has `TombstoneArena`, an arena keyed by integer ids whose
  items can be deleted. Deleted ids are never reused. When an item is deleted
  its `on_delete` method is called, if it has one. `Tombstone` is a base class
  whose `on_delete` does nothing.
- `wasmkit.indices` has `IndicesToIds`, which maps the indices of an input
  binary to ids, one `IndexSpace` at a time (tables, types, funcs, globals,
  memories, elements, data), plus the locals of each function. An index that
  was never recorded raises `IndexError`.
- `wasmkit.binary` has `Encoder`. It writes bytes, unsigned LEB128 integers
  (`u32`, `usize`), length-prefixed UTF-8 strings, counted lists of items that
  have an `emit` method, sections and custom sections. `getvalue()` returns
  the bytes written so far.
- `wasmkit.types` has:
  - `ValType`, the value types. Each member's value is its encoding byte.
  - `Type`, a function type. Equality ignores its id and name.
  - `ModuleTypes`, a module's de-duplicated set of function types. Adding a
    type equal to an existing one returns the existing id.
- `wasmkit.memories` has `Memory` and `ModuleMemories`.
- `wasmkit.tables` has `Table` and `ModuleTables`.
  `ModuleTables.main_function_table()` returns the single funcref table. It
  raises `ValueError` if there is more than one.
- `wasmkit.producers` has `ModuleProducers`, the contents of the `producers`
  custom section. Adding a name that is already in a field replaces its
  version.
- `wasmkit.validate` has checks for limits, memories, tables, unique export
  names and start-function types, and `validate()` for a set of memories and
  tables. Failures raise `ValidationError`, a subclass of `ValueError`.

## Install

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Example

```python
from wasmkit.binary import Encoder
from wasmkit.types import ModuleTypes, ValType
from wasmkit.memories import ModuleMemories
from wasmkit.validate import validate

types = ModuleTypes()
add = types.add([ValType.I32, ValType.I32], [ValType.I32])
assert types.find([ValType.I32, ValType.I32], [ValType.I32]) == add

memories = ModuleMemories()
memories.add_local(shared=False, initial=1, maximum=None)

validate(memories, tables=[], only_stable_features=True)

encoder = Encoder()
type_order = types.emit(encoder)        # type ids in index order
memory_order = memories.emit(encoder)   # local memory ids in index order
wasm_sections = encoder.getvalue()
```

A section is written only when it has something in it:

- Types are written sorted by parameters, then results. The output therefore
  does not depend on the order in which they were added.
- Types used only for function entry blocks are left out.
- Imported memories and tables are left out of the memory and table sections.

## What it does not do

- wasmkit does not read `.wasm` files. `IndicesToIds` is only a map to be
  filled by a reader you supply.
- It has no whole-module object and writes no module header.
- It has no functions, instructions, imports, exports, globals, element or
  data segments, or name section.
- It has no pass that removes unused items.
- Validation covers only the checks listed above, not instruction
  type-checking.
- There is no command-line tool.