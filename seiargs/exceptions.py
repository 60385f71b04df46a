# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by seiargs.

Two families exist:

- `SchemaError` is raised while a schema is being built. It signals a programmer
  error (duplicate short alias, boolean field without a default, a positional
  default ahead of a required positional, ...) and is not meant to be caught by
  end users.
- `ParseError` and its subclasses are raised while an argument sequence is being
  parsed. They form a closed taxonomy, each member tagged with an `ErrorKind`, so
  callers can map them to exit codes and messages.

Exception Hierarchy:
- SeiargsError
    ├── SchemaError
    └── ParseError
        ├── InvalidInputError
        ├── InvalidNumberError
        │   ├── InvalidCharacterError
        │   ├── IntegerOverflowError
        │   └── InvalidFloatError
        ├── NoSubcmdSpecifiedError
        ├── UnknownSubcmdError
        ├── UnknownArgumentError
        ├── MissingArgumentError
        ├── TooManyArgumentsError
        └── UnsetArgumentsError

A parse error raised at any depth of subcommand recursion reaches the caller of
`parse()` unchanged.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable


class ErrorKind(Enum):
    """The closed set of runtime parse failures."""

    INVALID_INPUT = "invalid_input"
    INVALID_CHARACTER = "invalid_character"
    OVERFLOW = "overflow"
    INVALID_FLOAT = "invalid_float"
    NO_SUBCMD_SPECIFIED = "no_subcmd_specified"
    UNKNOWN_SUBCMD = "unknown_subcmd"
    UNKNOWN_ARGUMENT = "unknown_argument"
    MISSING_ARGUMENT = "missing_argument"
    TOO_MANY_ARGUMENTS = "too_many_arguments"
    UNSET_ARGUMENTS = "unset_arguments"

    def __str__(self) -> str:
        return self.value


class SeiargsError(Exception):
    """Base exception for seiargs."""


class SchemaError(SeiargsError):
    """Exception raised when a schema violates a construction-time invariant."""


class ParseError(SeiargsError):
    """
    Base class for errors raised while parsing an argument sequence.

    Attributes:
        kind (ErrorKind): The taxonomy entry of this error.
        token (str | None): The argument token the error was raised for, if any.
    """

    kind: ErrorKind

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token


class InvalidInputError(ParseError):
    """Raised when a value does not match its kind's grammar."""

    kind = ErrorKind.INVALID_INPUT


class InvalidNumberError(ParseError):
    """Base class for numeric literal errors."""


class InvalidCharacterError(InvalidNumberError):
    """Raised when an integer literal contains something other than digits."""

    kind = ErrorKind.INVALID_CHARACTER


class IntegerOverflowError(InvalidNumberError):
    """Raised when an integer literal does not fit its kind's range."""

    kind = ErrorKind.OVERFLOW


class InvalidFloatError(InvalidNumberError):
    """Raised when a floating point literal is malformed."""

    kind = ErrorKind.INVALID_FLOAT


class NoSubcmdSpecifiedError(ParseError):
    """Raised when a subcommand was expected but no token was left."""

    kind = ErrorKind.NO_SUBCMD_SPECIFIED

    @classmethod
    def from_choices(cls, choices: Iterable[str]) -> NoSubcmdSpecifiedError:
        names = ", ".join(name for name in choices if name)
        return cls(f"No subcommand specified. Choose from: {names}")


class UnknownSubcmdError(ParseError):
    """Raised when the subcommand token matches no declared variant."""

    kind = ErrorKind.UNKNOWN_SUBCMD

    @classmethod
    def from_choices(cls, token: str, choices: Iterable[str]) -> UnknownSubcmdError:
        names = ", ".join(name for name in choices if name)
        return cls(f"Unknown subcommand '{token}'. Choose from: {names}", token)


class UnknownArgumentError(ParseError):
    """Raised when a long option name or short alias matches no named field."""

    kind = ErrorKind.UNKNOWN_ARGUMENT


class MissingArgumentError(ParseError):
    """Raised when a value token is required but absent."""

    kind = ErrorKind.MISSING_ARGUMENT


class TooManyArgumentsError(ParseError):
    """Raised when a positional value arrives after every slot is filled."""

    kind = ErrorKind.TOO_MANY_ARGUMENTS


class UnsetArgumentsError(ParseError):
    """Raised when required fields are still unset at the end of a record."""

    kind = ErrorKind.UNSET_ARGUMENTS

    def __init__(self, message: str, missing: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.missing: tuple[str, ...] = tuple(missing)

    @classmethod
    def from_missing(
        cls, named: Iterable[str], positional: Iterable[str]
    ) -> UnsetArgumentsError:
        flags = [f"--{name}" for name in named]
        missing = [*positional, *flags]
        return cls(f"Missing required arguments: {', '.join(missing)}", missing)
