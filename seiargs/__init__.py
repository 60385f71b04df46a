"""
Seiargs Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ErrorKind, ParseError, SchemaError, SeiargsError
from .parser import (
    MISSING,
    Field,
    IntKind,
    Leaf,
    ParsedRecord,
    Record,
    SchemaParser,
    Selected,
    Subcommands,
    parse,
    parse_argv,
    parse_with_remaining,
)

logger = logging.getLogger("seiargs")

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "Field",
    "IntKind",
    "Leaf",
    "MISSING",
    "ParseError",
    "ParsedRecord",
    "Record",
    "SchemaError",
    "SchemaParser",
    "SeiargsError",
    "Selected",
    "Subcommands",
    "parse",
    "parse_argv",
    "parse_with_remaining",
]
