# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Derives the per-record facts the parsing engine works from.

`derive_properties()` looks only at the shape of a `Record`: its named and
positional fields, which of them have defaults, and their short aliases. It is
run when the record is built, so shape errors surface as `SchemaError` right
away, and again at the start of every record-level parse.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from seiargs.exceptions import SchemaError
from seiargs.parser.field import Field
from seiargs.parser.short_alias import ShortAliasTable

if TYPE_CHECKING:
    from seiargs.parser.schema import Record


@dataclass(frozen=True)
class FieldProperties:
    """
    Shape of one record schema.

    Attributes:
        named (Mapping[str, Field]): Named fields by identifier, in declaration order.
        positional (tuple[Field, ...]): Positional fields in declaration order.
        positional_default_limit (int): Index of the first positional field with a
            default. Every positional slot below it must be filled.
        defaulted_named (frozenset[str]): Named fields that carry a default.
        required_named (frozenset[str]): Named fields that must be supplied.
        short_map (ShortAliasTable): Alias letter to named field identifier.
    """

    named: Mapping[str, Field]
    positional: tuple[Field, ...]
    positional_default_limit: int
    defaulted_named: frozenset[str]
    required_named: frozenset[str]
    short_map: ShortAliasTable

    @property
    def named_count(self) -> int:
        return len(self.named)

    @property
    def positional_count(self) -> int:
        return len(self.positional)

    @property
    def short_count(self) -> int:
        return len(self.short_map)


def derive_properties(record: Record) -> FieldProperties:
    """
    Compute the `FieldProperties` of a record schema.

    Raises:
        SchemaError: If a positional field without a default follows one with a
            default, or if short aliases collide or are not letters.
    """
    positional_default_limit = len(record.positional)
    for index, field in enumerate(record.positional):
        if field.has_default:
            positional_default_limit = min(positional_default_limit, index)
        elif positional_default_limit < index:
            raise SchemaError(
                f"Positional field '{field.name}' has no default but follows "
                f"'{record.positional[positional_default_limit].name}', which does"
            )

    named = {field.name: field for field in record.named}
    defaulted = frozenset(name for name, field in named.items() if field.has_default)

    return FieldProperties(
        named=MappingProxyType(named),
        positional=tuple(record.positional),
        positional_default_limit=positional_default_limit,
        defaulted_named=defaulted,
        required_named=frozenset(named) - defaulted,
        short_map=ShortAliasTable.from_fields(record.named),
    )
