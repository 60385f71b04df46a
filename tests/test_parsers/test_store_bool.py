from seiargs.parser import Field, Record, parse


def build_record() -> Record:
    return Record(
        positional=[Field("flag", bool, default=False)],
        named=[
            Field("dry-run", bool, default=False, short="n"),
            Field("color", bool, default=True),
        ],
    )


def test_store_bool_default():
    result = parse(build_record(), [])
    assert getattr(result.named, "dry-run") is False
    assert result.named.color is True


def test_store_bool_short_toggles():
    result = parse(build_record(), ["-n"])
    assert getattr(result.named, "dry-run") is True


def test_store_bool_twice_toggles_back():
    result = parse(build_record(), ["-n", "-n"])
    assert getattr(result.named, "dry-run") is False
    result = parse(build_record(), ["--dry-run", "-n", "--dry-run"])
    assert getattr(result.named, "dry-run") is True


def test_store_bool_toggles_relative_to_default():
    result = parse(build_record(), ["--color"])
    assert result.named.color is False


def test_store_bool_ignores_inline_value():
    result = parse(build_record(), ["--color=true"])
    assert result.named.color is False
    result = parse(build_record(), ["--dry-run=no"])
    assert getattr(result.named, "dry-run") is True


def test_store_bool_does_not_consume_next_token():
    result = parse(build_record(), ["--dry-run", "yes"])
    assert getattr(result.named, "dry-run") is True
    assert result.positional.flag is True


def test_positional_bool_uses_word_parser():
    assert parse(build_record(), ["0"]).positional.flag is False
    assert parse(build_record(), ["y"]).positional.flag is True
