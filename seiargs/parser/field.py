# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Field` dataclass, the description of one named or positional argument
of a `Record` schema.

A field carries everything the parsing engine needs to fill it in:

- `name`: identifier used as `--name` for named fields and as the key in results
- `kind`: the value kind (`int`, `u8`, `float`, `str`, `bool`, an `Enum`, a `Literal`, ...)
- `parser`: callable converting one token to a value; resolved from the kind when omitted
- `default`: value used when the field is not supplied; `MISSING` makes it required;
  without an explicit `parser` it must be a value of `kind`
- `short`: single-letter alias for named fields (`-v`)
- `description`: free text kept for callers, never rendered by seiargs

Whether a field is named or positional depends on the group of the `Record` it is
declared in, not on the field itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from seiargs.exceptions import SchemaError
from seiargs.parser.values import ParseFn, default_parser, kind_accepts, kind_name


class _Missing:
    """Sentinel type for a field declared without a default."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def resolve_parser(kind: Any, parser: ParseFn | None, owner: str) -> ParseFn:
    """Return `parser` if given, else the registry parser for `kind`."""
    if parser is not None:
        if not callable(parser):
            raise SchemaError(f"Parser for {owner} is not callable: {parser!r}")
        return parser
    resolved = default_parser(kind)
    if resolved is None:
        raise SchemaError(
            f"{owner} of kind {kind_name(kind)} has no default parser; "
            "pass parser= explicitly"
        )
    return resolved


def check_default(kind: Any, default: Any, owner: str) -> None:
    """Raise `SchemaError` if `default` is not a value of `kind`."""
    if not kind_accepts(kind, default):
        raise SchemaError(
            f"Default {default!r} of {owner} is not a valid {kind_name(kind)}"
        )


@dataclass(frozen=True)
class Field:
    """
    Represents one field of a record schema.

    Attributes:
        name (str): Identifier of the field. Must be non-empty, must not start
            with '-' and must not contain '='.
        kind (Any): The value kind of the field.
        parser (ParseFn | None): Converter from a token to a value. Defaults to the
            registry parser of `kind`.
        default (Any): Value used when the field is not supplied.
        short (str | None): Single alphabetic alias, named fields only.
        description (str): Free text describing the field.
    """

    name: str
    kind: Any = str
    parser: ParseFn | None = None
    default: Any = MISSING
    short: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise SchemaError("Field names must be non-empty strings")
        if self.name.startswith("-"):
            raise SchemaError(f"Field name '{self.name}' must not start with '-'")
        if "=" in self.name:
            raise SchemaError(f"Field name '{self.name}' must not contain '='")
        owner = f"field '{self.name}'"
        if self.parser is None and self.has_default:
            check_default(self.kind, self.default, owner)
        object.__setattr__(
            self, "parser", resolve_parser(self.kind, self.parser, owner)
        )

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def is_flag(self) -> bool:
        """True if the field toggles on presence instead of taking a value."""
        return self.kind is bool

    def __str__(self) -> str:
        default = f"={self.default!r}" if self.has_default else ""
        return f"Field({self.name}: {kind_name(self.kind)}{default})"
