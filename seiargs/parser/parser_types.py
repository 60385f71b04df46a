# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result types and the argument cursor used by the parsing engine.

Contents:
- `ParsedRecord`: result of a `Record` schema, one value per declared field.
- `Selected`: result of a `Subcommands` schema, the chosen variant and its value.
- `ArgumentCursor`: single forward cursor over a read-only argument sequence.
- `to_builtin`: flatten a parse result into dicts and scalars for serialization.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import SimpleNamespace
from typing import Any, Iterator, Sequence


@dataclass(frozen=True)
class ParsedRecord:
    """
    Values of one record schema.

    Attributes:
        positional (SimpleNamespace): Positional field values by name.
        named (SimpleNamespace): Named field values by name.
    """

    positional: SimpleNamespace
    named: SimpleNamespace

    def as_dict(self) -> dict[str, dict[str, Any]]:
        return {"positional": dict(vars(self.positional)), "named": dict(vars(self.named))}


@dataclass(frozen=True)
class Selected:
    """The variant chosen by a subcommand schema and its parsed value."""

    name: str
    value: Any


class ArgumentCursor:
    """
    Reads an argument sequence strictly left to right.

    The sequence is never copied or modified; a token handed out is never
    handed out again.
    """

    __slots__ = ("_args", "_index")

    def __init__(self, args: Sequence[str], index: int = 0) -> None:
        self._args = args
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def take(self) -> str | None:
        """Return the next token and advance, or None when exhausted."""
        if self._index >= len(self._args):
            return None
        token = self._args[self._index]
        self._index += 1
        return token

    def rest(self) -> tuple[str, ...]:
        """Return the tokens that have not been consumed."""
        return tuple(self._args[self._index :])

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.take()
        if token is None:
            raise StopIteration
        return token

    def __repr__(self) -> str:
        return f"ArgumentCursor(index={self._index}, total={len(self._args)})"


def to_builtin(result: Any) -> Any:
    """Convert a parse result to plain dicts, lists and scalars."""
    if isinstance(result, ParsedRecord):
        return {
            group: {name: to_builtin(value) for name, value in values.items()}
            for group, values in result.as_dict().items()
        }
    if isinstance(result, Selected):
        return {"subcommand": result.name, "value": to_builtin(result.value)}
    if isinstance(result, Enum):
        return result.name
    if isinstance(result, (list, tuple)):
        return [to_builtin(item) for item in result]
    return result
