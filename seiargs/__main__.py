"""
Seiargs Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command line tool checking an argument vector against a schema file:

    seiargs [-v] [--json] SCHEMA_FILE -- ARGS...
"""

import logging
import sys
from typing import Sequence

from pydantic import ValidationError
from rich.markup import escape
from rich.pretty import Pretty

from seiargs.config import load_schema
from seiargs.console import console, error_console
from seiargs.exceptions import ParseError, SchemaError
from seiargs.logger import logger
from seiargs.parser import Field, Record, parse_with_remaining, to_builtin
from seiargs.utils import setup_logging

EXIT_OK = 0
EXIT_SCHEMA_ERROR = 1
EXIT_PARSE_ERROR = 2

CLI_SCHEMA = Record(
    positional=[
        Field("schema_file", str, description="YAML or TOML file describing the arguments"),
    ],
    named=[
        Field("verbose", bool, default=False, short="v", description="Enable debug logging"),
        Field(
            "json",
            bool,
            default=False,
            short="j",
            description="Print the result and log records as JSON",
        ),
    ],
    description="Check an argument vector against a seiargs schema file.",
)


def report_parse_error(error: ParseError, prefix: str = "") -> None:
    token = f" (at '{escape(error.token)}')" if error.token is not None else ""
    error_console.print(f"{prefix}[bold red]{error.kind}[/]: {escape(error.message)}{token}")


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        options, remaining = parse_with_remaining(CLI_SCHEMA, argv)
    except ParseError as error:
        report_parse_error(error, prefix="seiargs: ")
        error_console.print("usage: seiargs [-v] [--json] SCHEMA_FILE -- ARGS...")
        return EXIT_PARSE_ERROR

    setup_logging(
        mode="json" if options.named.json else None,
        console_log_level=logging.DEBUG if options.named.verbose else logging.WARNING,
    )

    try:
        schema = load_schema(options.positional.schema_file)
    except (OSError, ValidationError, ValueError, SchemaError) as error:
        logger.debug("Schema load failed", exc_info=True)
        error_console.print(f"[bold red]schema error[/]: {escape(str(error))}")
        return EXIT_SCHEMA_ERROR

    try:
        result, rest = parse_with_remaining(schema, remaining)
    except ParseError as error:
        report_parse_error(error)
        return EXIT_PARSE_ERROR

    data = {"result": to_builtin(result), "remaining": list(rest)}
    if options.named.json:
        console.print_json(data=data)
    else:
        console.print(Pretty(data))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
