"""Arena, index map, binary encoder, types, memories, tables, producers and validation for WebAssembly modules."""

__version__ = "0.1.0"

__all__ = [
    "arena",
    "indices",
    "binary",
    "types",
    "memories",
    "tables",
    "producers",
    "validate",
]