# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Fixed lookup table from a single letter to the named field it aliases.

The table has one slot per ASCII letter (`a`-`z` then `A`-`Z`) so lookups are a
constant-time index. It is filled once per record schema; a duplicate or
non-alphabetic alias is a `SchemaError`.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from seiargs.exceptions import SchemaError
from seiargs.parser.field import Field

_SLOTS = 26 * 2


def _slot(char: str) -> int | None:
    if len(char) != 1:
        return None
    if "a" <= char <= "z":
        return ord(char) - ord("a")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 26
    return None


class ShortAliasTable:
    """Maps alias letters to named field identifiers."""

    __slots__ = ("_names", "_count")

    def __init__(self) -> None:
        self._names: list[str | None] = [None] * _SLOTS
        self._count: int = 0

    @classmethod
    def from_fields(cls, fields: Iterable[Field]) -> ShortAliasTable:
        table = cls()
        for field in fields:
            if field.short is not None:
                table.set(field.short, field.name)
        return table

    def get(self, char: str) -> str | None:
        """Return the field aliased by `char`, or None if there is no such alias."""
        index = _slot(char)
        if index is None:
            return None
        return self._names[index]

    def set(self, char: str, name: str) -> None:
        index = _slot(char) if isinstance(char, str) else None
        if index is None:
            raise SchemaError(
                f"Short alias {char!r} for '{name}' must be a single ASCII letter"
            )
        existing = self._names[index]
        if existing is not None:
            raise SchemaError(
                f"Short alias '-{char}' is used by both '{existing}' and '{name}'"
            )
        self._names[index] = name
        self._count += 1

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and self.get(char) is not None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for index, name in enumerate(self._names):
            if name is not None:
                base = "a" if index < 26 else "A"
                yield chr(ord(base) + index % 26), name

    def __repr__(self) -> str:
        aliases = ", ".join(f"-{char}={name}" for char, name in self)
        return f"ShortAliasTable({aliases})"
