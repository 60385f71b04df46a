import pytest

from seiargs.exceptions import MissingArgumentError, UnknownArgumentError
from seiargs.parser import Field, Record, parse


def build_record() -> Record:
    return Record(
        named=[
            Field("alpha", bool, default=False, short="a"),
            Field("beta", bool, default=False, short="b"),
            Field("charlie", int, default=0, short="c"),
            Field("delta", bool, default=True, short="D"),
        ]
    )


def test_posix_bundling():
    """Test the bundling of short options in the POSIX style."""
    result = parse(build_record(), ["-abD"])
    assert result.named.alpha is True
    assert result.named.beta is True
    assert result.named.delta is False
    assert result.named.charlie == 0


def test_posix_bundling_last_has_value():
    """Test the bundling of short options with the last option taking a value."""
    result = parse(build_record(), ["-abc", "7"])
    assert result.named.alpha is True
    assert result.named.beta is True
    assert result.named.charlie == 7


def test_posix_bundling_value_flag_alone():
    result = parse(build_record(), ["-c", "-3"])
    assert result.named.charlie == -3
    assert result.named.alpha is False


def test_posix_bundling_value_flag_not_last():
    with pytest.raises(MissingArgumentError):
        parse(build_record(), ["-cab", "7"])


def test_posix_bundling_missing_value():
    with pytest.raises(MissingArgumentError):
        parse(build_record(), ["-abc"])


def test_posix_bundling_unknown_alias():
    with pytest.raises(UnknownArgumentError) as excinfo:
        parse(build_record(), ["-dbc", "7"])
    assert "-d" in str(excinfo.value)
    assert excinfo.value.token == "-dbc"

    with pytest.raises(UnknownArgumentError):
        parse(build_record(), ["-abx"])


def test_posix_bundling_case_sensitive():
    with pytest.raises(UnknownArgumentError):
        parse(build_record(), ["-d"])
    assert parse(build_record(), ["-D"]).named.delta is False


def test_posix_bundling_fuzz():
    """Tokens that look like short options but are not valid bundles."""
    with pytest.raises(UnknownArgumentError):
        parse(build_record(), ["-a=b"])

    with pytest.raises(UnknownArgumentError):
        parse(build_record(), ["-1"])

    with pytest.raises(UnknownArgumentError):
        parse(build_record(), ["-a", "-b", "-x"])


def test_bundled_booleans_toggle():
    result = parse(build_record(), ["-aa"])
    assert result.named.alpha is False
    result = parse(build_record(), ["-aab"])
    assert result.named.alpha is False
    assert result.named.beta is True


def test_positional_after_bundle():
    record = Record(
        positional=[Field("path", str)],
        named=[Field("verbose", bool, default=False, short="v")],
    )
    result = parse(record, ["-v", "out.txt"])
    assert result.positional.path == "out.txt"
    assert result.named.verbose is True
