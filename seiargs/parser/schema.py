# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Schema model describing what an argument sequence should look like.

A schema is one of three immutable forms:

- `Record`: a group of positional fields and a group of named fields.
- `Subcommands`: a closed set of named variants, each a nested schema.
- `Leaf`: a single value with one parser.

Every invariant is checked when the schema is built and reported as
`SchemaError`; a schema that was built successfully can always be parsed against.
Schemas are never mutated afterwards and may be shared between threads.

Example:
    schema = Subcommands(
        {
            "hi": Record(
                positional=[Field("val", int)],
                named=[Field("other", bool, default=False, short="o")],
            ),
            "bye": Leaf(int),
        }
    )
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Union

from seiargs.exceptions import SchemaError
from seiargs.parser.field import Field, check_default, resolve_parser
from seiargs.parser.properties import derive_properties
from seiargs.parser.values import ParseFn, kind_name


def _check_unique(fields: tuple[Field, ...], group: str) -> None:
    seen: set[str] = set()
    for item in fields:
        if not isinstance(item, Field):
            raise SchemaError(f"{group} fields must be Field instances, got {item!r}")
        if item.name in seen:
            raise SchemaError(f"Duplicate {group} field '{item.name}'")
        seen.add(item.name)


@dataclass(frozen=True)
class Record:
    """
    A record schema: positional fields in order, plus named fields.

    Attributes:
        positional (tuple[Field, ...]): Fields filled from bare tokens, in order.
            Fields with defaults must come last.
        named (tuple[Field, ...]): Fields filled from `--name` / `-x` options.
            Boolean named fields must declare a default.
        description (str): Free text describing the record.
    """

    positional: Iterable[Field] = ()
    named: Iterable[Field] = ()
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "positional", tuple(self.positional))
        object.__setattr__(self, "named", tuple(self.named))
        _check_unique(self.positional, "positional")
        _check_unique(self.named, "named")

        for item in self.positional:
            if item.short is not None:
                raise SchemaError(
                    f"Positional field '{item.name}' cannot have a short alias"
                )
        for item in self.named:
            if item.is_flag:
                if not item.has_default:
                    raise SchemaError(
                        f"Boolean field '{item.name}' must declare a default"
                    )
                if not isinstance(item.default, bool):
                    raise SchemaError(
                        f"Boolean field '{item.name}' must have a bool default, "
                        f"got {item.default!r}"
                    )

        derive_properties(self)

    def __str__(self) -> str:
        return (
            f"Record(positional={len(self.positional)}, named={len(self.named)})"
        )


@dataclass(frozen=True)
class Leaf:
    """
    A single value schema.

    Attributes:
        kind (Any): The value kind.
        parser (ParseFn | None): Converter from a token to a value. Defaults to the
            registry parser of `kind`.
        description (str): Free text describing the value.
        has_custom_parser (bool): Whether `parser` was given explicitly.
    """

    kind: Any = str
    parser: ParseFn | None = None
    description: str = ""
    has_custom_parser: bool = field(init=False, repr=False, compare=False, default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "has_custom_parser", self.parser is not None)
        object.__setattr__(
            self,
            "parser",
            resolve_parser(self.kind, self.parser, f"leaf {kind_name(self.kind)}"),
        )

    def __str__(self) -> str:
        return f"Leaf({kind_name(self.kind)})"


@dataclass(frozen=True)
class Subcommands:
    """
    A subcommand schema: exactly one variant is selected per parse.

    Attributes:
        variants (Mapping[str, Schema]): Variant name to child schema. A variant
            named "" is selected when no token is left, making the subcommand
            optional.
        defaults (Mapping[str, Any]): Fallback values for `Leaf` variants whose
            value token is missing.
        description (str): Free text describing the subcommand set.
    """

    variants: Mapping[str, Schema]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self) -> None:
        variants = dict(self.variants)
        if not variants:
            raise SchemaError("Subcommands must declare at least one variant")
        for name, child in variants.items():
            if not isinstance(name, str):
                raise SchemaError(f"Subcommand names must be strings, got {name!r}")
            if not isinstance(child, (Record, Subcommands, Leaf)):
                raise SchemaError(
                    f"Subcommand '{name}' must be a Record, Subcommands or Leaf, "
                    f"got {type(child).__name__}"
                )

        defaults = dict(self.defaults)
        for name in defaults:
            if name not in variants:
                raise SchemaError(f"Default given for unknown subcommand '{name}'")
            leaf = variants[name]
            if not isinstance(leaf, Leaf):
                raise SchemaError(
                    f"Default for subcommand '{name}' is only allowed on a Leaf variant"
                )
            if not leaf.has_custom_parser:
                check_default(leaf.kind, defaults[name], f"subcommand '{name}'")

        object.__setattr__(self, "variants", MappingProxyType(variants))
        object.__setattr__(self, "defaults", MappingProxyType(defaults))

    def __str__(self) -> str:
        return f"Subcommands({', '.join(repr(name) for name in self.variants)})"


Schema = Union[Record, Subcommands, Leaf]
