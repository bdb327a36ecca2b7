"""The ``producers`` custom section."""

from __future__ import annotations

from dataclasses import dataclass, field

from wasmkit.binary import Encoder


@dataclass
class _Value:
    name: str
    version: str

    def emit(self, encoder: Encoder) -> None:
        encoder.str(self.name)
        encoder.str(self.version)


@dataclass
class _Field:
    name: str
    values: list[_Value] = field(default_factory=list)

    def emit(self, encoder: Encoder) -> None:
        encoder.str(self.name)
        encoder.list(self.values)


class ModuleProducers:
    """Tools, languages and SDKs recorded as having produced the module."""

    def __init__(self) -> None:
        self._fields: list[_Field] = []

    def add_language(self, language: str, version: str) -> None:
        """Record a source language and its version."""
        self._add("language", language, version)

    def add_processed_by(self, tool: str, version: str) -> None:
        """Record a tool that processed the module and its version."""
        self._add("processed-by", tool, version)

    def add_sdk(self, sdk: str, version: str) -> None:
        """Record an SDK and its version."""
        self._add("sdk", sdk, version)

    def _add(self, field_name: str, name: str, version: str) -> None:
        new_value = _Value(name, version)
        entry = next((f for f in self._fields if f.name == field_name), None)
        if entry is None:
            self._fields.append(_Field(field_name, [new_value]))
            return
        for position, value in enumerate(entry.values):
            if value.name == name:
                entry.values[position] = new_value
                return
        entry.values.append(new_value)

    def clear(self) -> None:
        """Remove every field."""
        self._fields.clear()

    def fields(self) -> list[tuple[str, list[tuple[str, str]]]]:
        """Return each field name with its ``(name, version)`` pairs, in order."""
        return [
            (f.name, [(v.name, v.version) for v in f.values]) for f in self._fields
        ]

    def emit(self, encoder: Encoder) -> None:
        """Write the ``producers`` custom section, unless it is empty."""
        if not self._fields:
            return
        body = Encoder()
        body.list(self._fields)
        encoder.custom_section("producers", body.getvalue())