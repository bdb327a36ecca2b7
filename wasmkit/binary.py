"""Encoding primitives for the WebAssembly binary format."""

from __future__ import annotations

from typing import Any, Iterable

_U32_MAX = 0xFFFF_FFFF


class Encoder:
    """Accumulates bytes of a WebAssembly binary."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def byte(self, value: int) -> None:
        """Append one byte."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        self._buf.append(value)

    def raw(self, data: bytes) -> None:
        """Append bytes as they are."""
        self._buf.extend(data)

    def _leb128(self, value: int) -> None:
        while True:
            low = value & 0x7F
            value >>= 7
            if value:
                self._buf.append(low | 0x80)
            else:
                self._buf.append(low)
                return

    def u32(self, value: int) -> None:
        """Append an unsigned 32-bit integer in LEB128 form."""
        if not 0 <= value <= _U32_MAX:
            raise ValueError(f"u32 value out of range: {value}")
        self._leb128(value)

    def usize(self, value: int) -> None:
        """Append a non-negative count or length in LEB128 form."""
        if value < 0:
            raise ValueError(f"usize value must not be negative: {value}")
        self._leb128(value)

    def str(self, value: str) -> None:
        """Append a length-prefixed UTF-8 string."""
        data = value.encode("utf-8")
        self.usize(len(data))
        self.raw(data)

    def list(self, items: Iterable[Any]) -> None:
        """Append a count followed by each item's own encoding."""
        items = [*items]
        self.usize(len(items))
        for item in items:
            item.emit(self)

    def section(self, section_id: int, payload: bytes) -> None:
        """Append a section: its id, payload length and payload."""
        self.byte(section_id)
        self.usize(len(payload))
        self.raw(payload)

    def custom_section(self, name: str, payload: bytes) -> None:
        """Append a custom section with the given name and payload."""
        body = Encoder()
        body.str(name)
        body.raw(payload)
        self.section(0, body.getvalue())

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buf)