# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `SchemaParser`, the engine that turns an argument sequence
into a typed result for a `Record`, `Subcommands` or `Leaf` schema.

The engine makes a single left-to-right pass over the sequence. At record level
every token is classified, in priority order, as:

- `--name` / `--name=value`: long option (only if the record has named fields)
- `--`: terminator; parsing stops and the rest is handed back untouched
- `-abc`: bundle of short aliases (only if the record has aliases); every letter
  but the last must be a boolean field, the last may take the next token
- anything else: the next positional value

Boolean named fields never take a value: each occurrence toggles them, starting
from their declared default. Subcommand schemas read one token to pick a variant
and recurse on the same cursor; leaf schemas read one token.

Every failure raises a `ParseError` subclass and aborts the whole parse.

Public Interface:
- `SchemaParser(schema).parse(args)`: parse and return the result.
- `SchemaParser(schema).parse_with_remaining(args)`: also return unparsed tokens.
- `parse()`, `parse_with_remaining()`, `parse_argv()`: module-level shortcuts.

Example Usage:
    schema = Record(
        positional=[Field("x", int), Field("y", int, default=10)],
        named=[Field("verbose", bool, default=False, short="v")],
    )
    result, rest = parse_with_remaining(schema, ["-v", "5", "--", "extra"])

    # result.positional.x == 5, result.positional.y == 10
    # result.named.verbose is True, rest == ("extra",)
"""
from __future__ import annotations

import sys
from copy import deepcopy
from types import SimpleNamespace
from typing import Any, Sequence

from seiargs.exceptions import (
    InvalidInputError,
    MissingArgumentError,
    NoSubcmdSpecifiedError,
    ParseError,
    SchemaError,
    TooManyArgumentsError,
    UnknownArgumentError,
    UnknownSubcmdError,
    UnsetArgumentsError,
)
from seiargs.logger import logger
from seiargs.parser.field import MISSING, Field
from seiargs.parser.parser_types import ArgumentCursor, ParsedRecord, Selected
from seiargs.parser.properties import FieldProperties, derive_properties
from seiargs.parser.schema import Leaf, Record, Schema, Subcommands
from seiargs.parser.values import ParseFn, kind_name


def _run_parser(parser: ParseFn, token: str, label: str) -> Any:
    try:
        return parser(token)
    except ParseError:
        raise
    except ValueError as error:
        raise InvalidInputError(f"Invalid value for '{label}': {error}", token) from error


class SchemaParser:
    """
    Parses argument sequences against one schema.

    A `SchemaParser` holds no per-parse state, so one instance may be reused for
    any number of parses, including from several threads at once.
    """

    def __init__(self, schema: Schema) -> None:
        if not isinstance(schema, (Record, Subcommands, Leaf)):
            raise SchemaError(
                f"Expected a Record, Subcommands or Leaf schema, got {type(schema).__name__}"
            )
        self.schema: Schema = schema

    def parse(self, args: Sequence[str]) -> Any:
        """
        Parse an argument sequence, excluding the program name.

        Args:
            args (Sequence[str]): The CLI-style argument list.

        Returns:
            Any: `ParsedRecord`, `Selected` or a scalar, mirroring the schema.

        Raises:
            ParseError: On the first token that does not fit the schema.
        """
        result, _ = self.parse_with_remaining(args)
        return result

    def parse_with_remaining(self, args: Sequence[str]) -> tuple[Any, tuple[str, ...]]:
        """
        Parse an argument sequence and return the tokens left unparsed.

        The remaining tokens are those following a `--` terminator, unchanged.

        Returns:
            tuple[Any, tuple[str, ...]]: The result and the remaining tokens.
        """
        if isinstance(args, str):
            raise TypeError("args must be a sequence of strings, not a single string")
        cursor = ArgumentCursor(args)
        result = self._parse_schema(self.schema, cursor, MISSING)
        return result, cursor.rest()

    def _parse_schema(self, schema: Schema, cursor: ArgumentCursor, default: Any) -> Any:
        if isinstance(schema, Subcommands):
            return self._parse_subcommands(schema, cursor)
        if isinstance(schema, Leaf):
            return self._parse_leaf(schema, cursor, default)
        return self._parse_record(schema, cursor)

    def _parse_subcommands(self, schema: Subcommands, cursor: ArgumentCursor) -> Selected:
        token = cursor.take()
        selector = "" if token is None else token
        child = schema.variants.get(selector)
        if child is None:
            if not selector:
                raise NoSubcmdSpecifiedError.from_choices(schema.variants)
            raise UnknownSubcmdError.from_choices(selector, schema.variants)

        logger.debug("Selected subcommand '%s' -> %s", selector, child)
        value = self._parse_schema(child, cursor, schema.defaults.get(selector, MISSING))
        return Selected(selector, value)

    def _parse_leaf(self, schema: Leaf, cursor: ArgumentCursor, default: Any) -> Any:
        token = cursor.take()
        if token is None:
            if default is not MISSING:
                return deepcopy(default)
            raise MissingArgumentError(f"Expected a {kind_name(schema.kind)} value")
        return _run_parser(schema.parser, token, kind_name(schema.kind))

    def _parse_record(self, record: Record, cursor: ArgumentCursor) -> ParsedRecord:
        properties = derive_properties(record)
        logger.debug(
            "Parsing record: named=%d, positional=%d, short=%d",
            properties.named_count,
            properties.positional_count,
            properties.short_count,
        )

        named_values = {
            name: deepcopy(properties.named[name].default)
            for name in properties.defaulted_named
        }
        positional_values = {
            field.name: deepcopy(field.default)
            for field in properties.positional
            if field.has_default
        }
        pending = set(properties.required_named)
        position = 0

        for token in cursor:
            if (
                properties.named_count > 0
                and len(token) > 2
                and token.startswith("--")
            ):
                self._handle_long_option(token, cursor, properties, named_values, pending)
                continue

            if token == "--":
                logger.debug(
                    "Terminator at index %d, %d token(s) left",
                    cursor.index - 1,
                    len(cursor.rest()),
                )
                break

            if properties.short_count > 0 and len(token) > 1 and token.startswith("-"):
                self._handle_short_bundle(token, cursor, properties, named_values, pending)
                continue

            if position == properties.positional_count:
                raise TooManyArgumentsError(f"Unexpected positional argument: {token}", token)
            field = properties.positional[position]
            positional_values[field.name] = _run_parser(field.parser, token, field.name)
            position += 1

        if pending or position < properties.positional_default_limit:
            raise UnsetArgumentsError.from_missing(
                named=[name for name in properties.named if name in pending],
                positional=[
                    field.name
                    for field in properties.positional[
                        position : properties.positional_default_limit
                    ]
                ],
            )

        return ParsedRecord(
            positional=SimpleNamespace(
                **{field.name: positional_values[field.name] for field in properties.positional}
            ),
            named=SimpleNamespace(**{name: named_values[name] for name in properties.named}),
        )

    def _handle_long_option(
        self,
        token: str,
        cursor: ArgumentCursor,
        properties: FieldProperties,
        values: dict[str, Any],
        pending: set[str],
    ) -> None:
        name, has_inline, inline = token[2:].partition("=")
        field = properties.named.get(name)
        if field is None:
            raise UnknownArgumentError(f"Unrecognized option '--{name}'", token)

        pending.discard(name)
        if field.is_flag:
            values[name] = not values[name]
            return

        value = inline if has_inline else cursor.take()
        if value is None:
            raise MissingArgumentError(f"Option '--{name}' requires a value", token)
        values[name] = _run_parser(field.parser, value, name)

    def _resolve_short(self, char: str, token: str, properties: FieldProperties) -> Field:
        name = properties.short_map.get(char)
        if name is None:
            raise UnknownArgumentError(f"Unrecognized option '-{char}' in '{token}'", token)
        return properties.named[name]

    def _handle_short_bundle(
        self,
        token: str,
        cursor: ArgumentCursor,
        properties: FieldProperties,
        values: dict[str, Any],
        pending: set[str],
    ) -> None:
        for char in token[1:-1]:
            field = self._resolve_short(char, token, properties)
            if not field.is_flag:
                raise MissingArgumentError(
                    f"Option '-{char}' takes a value and must be last in '{token}'", token
                )
            pending.discard(field.name)
            values[field.name] = not values[field.name]

        field = self._resolve_short(token[-1], token, properties)
        pending.discard(field.name)
        if field.is_flag:
            values[field.name] = not values[field.name]
            return

        value = cursor.take()
        if value is None:
            raise MissingArgumentError(f"Option '-{token[-1]}' requires a value", token)
        values[field.name] = _run_parser(field.parser, value, field.name)

    def __str__(self) -> str:
        return f"SchemaParser({self.schema})"

    def __repr__(self) -> str:
        return str(self)


def parse(schema: Schema, args: Sequence[str]) -> Any:
    """Parse `args` (program name excluded) against `schema`."""
    return SchemaParser(schema).parse(args)


def parse_with_remaining(
    schema: Schema, args: Sequence[str]
) -> tuple[Any, tuple[str, ...]]:
    """Parse `args` against `schema`, also returning the tokens after `--`."""
    return SchemaParser(schema).parse_with_remaining(args)


def parse_argv(schema: Schema, argv: Sequence[str] | None = None) -> Any:
    """Parse a full argv, skipping the program name at index 0."""
    if argv is None:
        argv = sys.argv
    return SchemaParser(schema).parse(argv[1:])
