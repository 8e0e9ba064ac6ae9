import pytest

from stringext.config import CONFIG
from stringext.errors import (
    DuplicateKeyError,
    MalformedPairError,
    NotACharacterError,
    NullInputError,
    StringExtError,
)
from stringext.text.pairs import format_pairs, parse_pairs


@pytest.mark.parametrize(
    "source, expected",
    [
        ("a=1;b=2", {"a": "1", "b": "2"}),
        ("a=1;b=2;", {"a": "1", "b": "2"}),
        (";a=1;b=2", {"a": "1", "b": "2"}),
        ("a=1", {"a": "1"}),
        ("a=", {"a": ""}),
        ("=1", {"": "1"}),
        ("key=some value;other=x y", {"key": "some value", "other": "x y"}),
    ],
)
def test_parse_pairs(source, expected):
    assert parse_pairs(source) == expected


def test_preserves_input_order():
    assert list(parse_pairs("z=1;a=2;m=3")) == ["z", "a", "m"]


@pytest.mark.parametrize("source", ["", "novalue", "a;b;c"])
def test_no_separator_gives_empty(source):
    assert parse_pairs(source) == {}


@pytest.mark.parametrize(
    "source",
    [
        "a=1;;;b=2",  # too many delimiters
        "a=1b=2",  # too few delimiters
        "a=b=c",
    ],
)
def test_structural_mismatch_gives_empty(source):
    assert parse_pairs(source) == {}


def test_none_source_raises():
    with pytest.raises(NullInputError):
        parse_pairs(None)


def test_pair_without_separator_raises():
    with pytest.raises(MalformedPairError) as excinfo:
        parse_pairs("a=1;b")
    assert excinfo.value.pair == "b"
    assert excinfo.value.separator == "="


def test_empty_pair_in_the_middle_raises():
    with pytest.raises(MalformedPairError):
        parse_pairs("a=1;;b=2")


def test_duplicate_key_raises():
    with pytest.raises(DuplicateKeyError) as excinfo:
        parse_pairs("a=1;a=2")
    assert excinfo.value.key == "a"
    assert isinstance(excinfo.value, StringExtError)
    assert isinstance(excinfo.value, ValueError)


def test_value_keeps_extra_separators():
    # counts pass (2 separators, 2 delimiters), split happens once
    assert parse_pairs("a=b=c;;") == {"a": "b=c"}


def test_custom_delimiter_and_separator():
    assert parse_pairs("host:db1,port:5432", ",", ":") == {
        "host": "db1",
        "port": "5432",
    }


def test_long_input_matches_short_path():
    source = ";".join(f"k{i}=v{i}" for i in range(200))
    CONFIG["vector_min_length"] = 1
    vectorized = parse_pairs(source)
    CONFIG["vector_enabled"] = False
    scalar = parse_pairs(source)
    assert vectorized == scalar
    assert len(scalar) == 200
    assert scalar["k199"] == "v199"


def test_defaults_come_from_config():
    CONFIG["default_delimiter"] = "&"
    assert parse_pairs("a=1&b=2") == {"a": "1", "b": "2"}


def test_multi_character_delimiter_rejected():
    with pytest.raises(NotACharacterError):
        parse_pairs("a=1;;b=2", delimiter=";;")


def test_format_pairs():
    assert format_pairs({"a": "1", "b": "2"}) == "a=1;b=2"
    assert format_pairs({}) == ""
    assert format_pairs({"x": "y"}, delimiter="&", separator=":") == "x:y"


@pytest.mark.parametrize(
    "mapping",
    [
        {"a": "1"},
        {"z": "26", "a": "1", "m": ""},
        {"name": "Ada Lovelace", "year": "1815"},
    ],
)
def test_round_trip(mapping):
    parsed = parse_pairs(format_pairs(mapping))
    assert parsed == mapping
    assert list(parsed) == list(mapping)


@pytest.mark.parametrize("source", ["a=1;b=2;", ";a=1;b=2", "a=1;b=2"])
def test_reformat_is_canonical(source):
    assert format_pairs(parse_pairs(source)) == "a=1;b=2"


def test_leading_and_trailing_delimiters_fail_count_check():
    # 2 separators, 3 delimiters
    assert parse_pairs(";a=1;b=2;") == {}


@pytest.mark.parametrize("source", ["a=1", "a=1=b=2"])
def test_same_delimiter_and_separator_raises(source):
    with pytest.raises(MalformedPairError) as excinfo:
        parse_pairs(source, delimiter="=", separator="=")
    assert excinfo.value.pair == "a"
