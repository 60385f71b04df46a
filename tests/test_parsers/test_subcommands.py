from pathlib import Path

import pytest

from seiargs.exceptions import (
    ErrorKind,
    InvalidCharacterError,
    MissingArgumentError,
    NoSubcmdSpecifiedError,
    TooManyArgumentsError,
    UnknownSubcmdError,
    UnsetArgumentsError,
)
from seiargs.parser import (
    Field,
    Leaf,
    ParsedRecord,
    Record,
    Selected,
    Subcommands,
    parse,
    parse_with_remaining,
    to_builtin,
    u8,
)


def build_schema() -> Subcommands:
    return Subcommands(
        {
            "hi": Record(
                positional=[Field("val", int)],
                named=[Field("other", bool, default=False)],
            ),
            "bye": Leaf(int),
        }
    )


def test_subcommand_record():
    result = parse(build_schema(), ["hi", "10", "--other"])
    assert isinstance(result, Selected)
    assert result.name == "hi"
    assert isinstance(result.value, ParsedRecord)
    assert result.value.positional.val == 10
    assert result.value.named.other is True


def test_subcommand_leaf():
    assert parse(build_schema(), ["bye", "3"]) == Selected("bye", 3)


def test_unknown_subcommand():
    with pytest.raises(UnknownSubcmdError) as excinfo:
        parse(build_schema(), ["zzz"])
    assert excinfo.value.kind is ErrorKind.UNKNOWN_SUBCMD
    assert excinfo.value.token == "zzz"
    assert "hi, bye" in str(excinfo.value)


def test_no_subcommand():
    with pytest.raises(NoSubcmdSpecifiedError):
        parse(build_schema(), [])
    with pytest.raises(NoSubcmdSpecifiedError):
        parse(build_schema(), [""])


def test_subcommand_names_are_case_sensitive():
    with pytest.raises(UnknownSubcmdError):
        parse(build_schema(), ["HI", "1"])


def test_leaf_without_token_or_default():
    with pytest.raises(MissingArgumentError):
        parse(build_schema(), ["bye"])


def test_leaf_variant_default():
    schema = Subcommands({"bye": Leaf(u8), "hi": Record()}, defaults={"bye": 3})
    assert parse(schema, ["bye"]) == Selected("bye", 3)
    assert parse(schema, ["bye", "9"]) == Selected("bye", 9)


def test_child_errors_propagate_unchanged():
    with pytest.raises(InvalidCharacterError):
        parse(build_schema(), ["bye", "x"])
    with pytest.raises(UnsetArgumentsError):
        parse(build_schema(), ["hi", "--other"])
    with pytest.raises(TooManyArgumentsError):
        parse(build_schema(), ["hi", "1", "2"])


def test_leaf_leaves_trailing_tokens():
    result, rest = parse_with_remaining(build_schema(), ["bye", "3", "extra"])
    assert result == Selected("bye", 3)
    assert rest == ("extra",)


def test_nested_subcommands():
    schema = Subcommands(
        {
            "remote": Subcommands(
                {
                    "add": Record(
                        positional=[Field("name", str), Field("url", str)],
                        named=[Field("fetch", bool, default=False, short="f")],
                    ),
                    "remove": Leaf(str),
                }
            ),
            "status": Record(named=[Field("short", bool, default=False, short="s")]),
        }
    )
    result = parse(schema, ["remote", "add", "-f", "origin", "git@host:repo"])
    assert result.name == "remote"
    assert result.value.name == "add"
    assert result.value.value.positional.url == "git@host:repo"
    assert result.value.value.named.fetch is True

    assert parse(schema, ["remote", "remove", "origin"]).value == Selected("remove", "origin")

    with pytest.raises(NoSubcmdSpecifiedError):
        parse(schema, ["remote"])
    with pytest.raises(UnknownSubcmdError):
        parse(schema, ["remote", "rename"])


def test_optional_subcommand():
    schema = Subcommands(
        {
            "": Record(named=[Field("verbose", bool, default=False, short="v")]),
            "run": Record(positional=[Field("target", str)]),
        }
    )
    result = parse(schema, [])
    assert result.name == ""
    assert result.value.named.verbose is False
    assert parse(schema, ["run", "all"]).value.positional.target == "all"
    with pytest.raises(UnknownSubcmdError):
        parse(schema, ["-v"])


def test_subcommand_with_terminator():
    schema = Subcommands({"exec": Record(positional=[Field("program", Path, parser=Path)])})
    result, rest = parse_with_remaining(schema, ["exec", "ls", "--", "-la", "/tmp"])
    assert result.value.positional.program == Path("ls")
    assert rest == ("-la", "/tmp")


def test_to_builtin():
    result = parse(build_schema(), ["hi", "10", "--other"])
    assert to_builtin(result) == {
        "subcommand": "hi",
        "value": {"positional": {"val": 10}, "named": {"other": True}},
    }
    assert to_builtin(parse(build_schema(), ["bye", "4"])) == {
        "subcommand": "bye",
        "value": 4,
    }
