# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value parsers for converting a single argument token into a typed value.

Each parser is a plain callable `str -> value` that raises a `ParseError` subclass
when the token does not match its kind's grammar. A small registry maps value kinds
to their default parser; any other kind needs an explicit parser on its field.

Kinds with a default parser:
- `int`: unbounded signed integer, radix 10.
- `IntKind` (`i8` ... `u64`): integer with a range check.
- `float`: decimal/exponent syntax, plus `inf` and `nan`.
- `str`: identity.
- `bool`: `true yes y 1` / `false no n 0`, case-sensitive.
- `Enum` subclasses: matched by member name, case-sensitive.
- `Literal[...]`: matched against its string values, case-sensitive.

Functions:
- parse_int, parse_float, parse_str, parse_bool: the primitive parsers.
- enum_parser, literal_parser: build parsers for closed enumerations.
- default_parser: registry lookup from kind to parser.
- kind_accepts: whether a value could have come from a kind's default parser.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, EnumMeta
from typing import Any, Callable, Literal, get_args, get_origin

from seiargs.exceptions import (
    IntegerOverflowError,
    InvalidCharacterError,
    InvalidFloatError,
    InvalidInputError,
    SchemaError,
)

ParseFn = Callable[[str], Any]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_BOOL_WORDS: dict[str, bool] = {
    "true": True,
    "yes": True,
    "y": True,
    "1": True,
    "false": False,
    "no": False,
    "n": False,
    "0": False,
}


def parse_int(value: str) -> int:
    """
    Convert a radix 10 integer literal to an `int`.

    An optional leading sign is accepted. Whitespace, underscores and any other
    non-digit content are rejected.

    Raises:
        InvalidCharacterError: If the token is not an integer literal.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise InvalidCharacterError(f"Invalid integer '{value}'", value)
    return int(value)


@dataclass(frozen=True)
class IntKind:
    """
    A fixed-width integer kind.

    Attributes:
        bits (int): Width of the integer in bits.
        signed (bool): Whether negative values are allowed.
    """

    bits: int
    signed: bool = True

    def __post_init__(self) -> None:
        if self.bits < 1:
            raise ValueError("bits must be a positive integer")

    @property
    def name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def parse(self, value: str) -> int:
        """
        Convert a radix 10 integer literal, checking it fits this kind.

        Raises:
            InvalidCharacterError: If the token is not an integer literal.
            IntegerOverflowError: If the value is outside `minimum..maximum`.
        """
        number = parse_int(value)
        if not self.minimum <= number <= self.maximum:
            raise IntegerOverflowError(
                f"Value '{value}' is out of range for {self.name} "
                f"({self.minimum}..{self.maximum})",
                value,
            )
        return number

    def __str__(self) -> str:
        return self.name


i8 = IntKind(8)
i16 = IntKind(16)
i32 = IntKind(32)
i64 = IntKind(64)
u8 = IntKind(8, signed=False)
u16 = IntKind(16, signed=False)
u32 = IntKind(32, signed=False)
u64 = IntKind(64, signed=False)


def parse_float(value: str) -> float:
    """
    Convert a floating point literal to a `float`.

    Raises:
        InvalidFloatError: If the token is not a float literal.
    """
    if not _FLOAT_PATTERN.fullmatch(value):
        raise InvalidFloatError(f"Invalid float '{value}'", value)
    return float(value)


def parse_str(value: str) -> str:
    return value


def parse_bool(value: str) -> bool:
    """
    Convert a boolean word to a `bool`.

    Accepts exactly `true`, `yes`, `y`, `1` and `false`, `no`, `n`, `0`.

    Raises:
        InvalidInputError: For any other spelling, including other casings.
    """
    try:
        return _BOOL_WORDS[value]
    except KeyError:
        raise InvalidInputError(
            f"Invalid boolean '{value}'. Expected one of: {', '.join(_BOOL_WORDS)}",
            value,
        ) from None


def enum_parser(enum_type: type[Enum]) -> ParseFn:
    """Return a parser matching tokens against the member names of `enum_type`."""

    def parser(value: str) -> Enum:
        member = enum_type.__members__.get(value)
        if member is None:
            names = ", ".join(enum_type.__members__)
            raise InvalidInputError(
                f"'{value}' should be one of {{{names}}}", value
            )
        return member

    return parser


def literal_parser(literal: Any) -> ParseFn:
    """
    Return a parser matching tokens against the values of a `Literal`.

    Raises:
        SchemaError: If any of the literal's values is not a string.
    """
    choices = get_args(literal)
    for choice in choices:
        if not isinstance(choice, str):
            raise SchemaError(
                f"Literal kinds need string values, got {choice!r}; "
                "use an Enum or pass parser= explicitly"
            )

    def parser(value: str) -> str:
        if value not in choices:
            raise InvalidInputError(
                f"'{value}' should be one of {{{', '.join(choices)}}}", value
            )
        return value

    return parser


def is_enum_kind(kind: Any) -> bool:
    return isinstance(kind, EnumMeta)


def default_parser(kind: Any) -> ParseFn | None:
    """
    Return the default parser for a value kind, or None if the kind has none.

    Args:
        kind (Any): A Python type, an `IntKind`, or a `Literal[...]`.

    Returns:
        ParseFn | None: The parser for the kind.
    """
    if kind is bool:
        return parse_bool
    if kind is int:
        return parse_int
    if isinstance(kind, IntKind):
        return kind.parse
    if kind is float:
        return parse_float
    if kind is str:
        return parse_str
    if is_enum_kind(kind):
        return enum_parser(kind)
    if get_origin(kind) is Literal:
        return literal_parser(kind)
    return None


def kind_accepts(kind: Any, value: Any) -> bool:
    """
    Return True if `value` belongs to `kind`.

    Kinds without a default parser accept anything. `bool` is not accepted as an
    integer, and `float` accepts integers.
    """
    if kind is bool:
        return isinstance(value, bool)
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    if kind is int:
        return is_number and isinstance(value, int)
    if isinstance(kind, IntKind):
        return (
            is_number
            and isinstance(value, int)
            and kind.minimum <= value <= kind.maximum
        )
    if kind is float:
        return is_number
    if kind is str:
        return isinstance(value, str)
    if is_enum_kind(kind):
        return isinstance(value, kind)
    if get_origin(kind) is Literal:
        return isinstance(value, str) and value in get_args(kind)
    return True


def kind_name(kind: Any) -> str:
    """Return a short display name for a value kind."""
    if isinstance(kind, IntKind):
        return kind.name
    if get_origin(kind) is Literal:
        return "{" + ",".join(str(choice) for choice in get_args(kind)) + "}"
    return getattr(kind, "__name__", repr(kind))
