"""
Seiargs Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .field import MISSING, Field
from .parser_types import ArgumentCursor, ParsedRecord, Selected, to_builtin
from .properties import FieldProperties, derive_properties
from .schema import Leaf, Record, Schema, Subcommands
from .schema_parser import SchemaParser, parse, parse_argv, parse_with_remaining
from .short_alias import ShortAliasTable
from .values import (
    IntKind,
    default_parser,
    i8,
    i16,
    i32,
    i64,
    parse_bool,
    parse_float,
    parse_int,
    parse_str,
    u8,
    u16,
    u32,
    u64,
)

__all__ = [
    "ArgumentCursor",
    "Field",
    "FieldProperties",
    "IntKind",
    "Leaf",
    "MISSING",
    "ParsedRecord",
    "Record",
    "Schema",
    "SchemaParser",
    "Selected",
    "ShortAliasTable",
    "Subcommands",
    "default_parser",
    "derive_properties",
    "i8",
    "i16",
    "i32",
    "i64",
    "parse",
    "parse_argv",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_str",
    "parse_with_remaining",
    "to_builtin",
    "u8",
    "u16",
    "u32",
    "u64",
]
