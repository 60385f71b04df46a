import pytest

from seiargs.exceptions import (
    ErrorKind,
    IntegerOverflowError,
    InvalidCharacterError,
    InvalidFloatError,
    InvalidInputError,
    InvalidNumberError,
    MissingArgumentError,
    NoSubcmdSpecifiedError,
    ParseError,
    SchemaError,
    SeiargsError,
    TooManyArgumentsError,
    UnknownArgumentError,
    UnknownSubcmdError,
    UnsetArgumentsError,
)


@pytest.mark.parametrize(
    "error_type, kind",
    [
        (InvalidInputError, ErrorKind.INVALID_INPUT),
        (InvalidCharacterError, ErrorKind.INVALID_CHARACTER),
        (IntegerOverflowError, ErrorKind.OVERFLOW),
        (InvalidFloatError, ErrorKind.INVALID_FLOAT),
        (NoSubcmdSpecifiedError, ErrorKind.NO_SUBCMD_SPECIFIED),
        (UnknownSubcmdError, ErrorKind.UNKNOWN_SUBCMD),
        (UnknownArgumentError, ErrorKind.UNKNOWN_ARGUMENT),
        (MissingArgumentError, ErrorKind.MISSING_ARGUMENT),
        (TooManyArgumentsError, ErrorKind.TOO_MANY_ARGUMENTS),
        (UnsetArgumentsError, ErrorKind.UNSET_ARGUMENTS),
    ],
)
def test_error_kinds(error_type, kind):
    error = error_type("message")
    assert error.kind is kind
    assert isinstance(error, ParseError)
    assert isinstance(error, SeiargsError)
    assert str(error) == "message"


def test_number_errors_share_a_base():
    for error_type in (InvalidCharacterError, IntegerOverflowError, InvalidFloatError):
        assert issubclass(error_type, InvalidNumberError)


def test_schema_error_is_not_a_parse_error():
    assert issubclass(SchemaError, SeiargsError)
    assert not issubclass(SchemaError, ParseError)


def test_error_kind_str():
    assert str(ErrorKind.UNSET_ARGUMENTS) == "unset_arguments"


def test_from_choices_skips_empty_variant():
    error = NoSubcmdSpecifiedError.from_choices(["", "run", "stop"])
    assert str(error) == "No subcommand specified. Choose from: run, stop"
    error = UnknownSubcmdError.from_choices("go", ["run"])
    assert error.token == "go"


def test_unset_arguments_from_missing():
    error = UnsetArgumentsError.from_missing(named=["level"], positional=["path"])
    assert error.missing == ("path", "--level")
    assert str(error) == "Missing required arguments: path, --level"
    assert error.token is None
